"""
Goal: the focus request is a detached, fire-and-forget process; launch errors never escape.
"""
import subprocess

from switcher.adapters import aerospace
from switcher.services import focus_service


class PopenRecorder:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        return object()


def test_delayed_focus_goes_through_sh(monkeypatch):
    recorder = PopenRecorder()
    monkeypatch.setattr(aerospace.subprocess, "Popen", recorder)
    assert aerospace.spawn_focus("3", delay=0.05, binary="aerospace") is True

    cmd, kwargs = recorder.calls[0]
    assert cmd == ["sh", "-c", "sleep 0.050 && aerospace focus --window-id 3"]
    assert kwargs["start_new_session"] is True
    assert kwargs["stdout"] is subprocess.DEVNULL


def test_window_id_is_shell_quoted(monkeypatch):
    recorder = PopenRecorder()
    monkeypatch.setattr(aerospace.subprocess, "Popen", recorder)
    aerospace.spawn_focus("1; rm -rf ~", delay=0.1, binary="aerospace")
    cmd, _ = recorder.calls[0]
    assert cmd[2] == "sleep 0.100 && aerospace focus --window-id '1; rm -rf ~'"


def test_zero_delay_runs_focus_directly(monkeypatch):
    recorder = PopenRecorder()
    monkeypatch.setattr(aerospace.subprocess, "Popen", recorder)
    aerospace.spawn_focus("42", delay=0, binary="aerospace")
    cmd, _ = recorder.calls[0]
    assert cmd == ["aerospace", "focus", "--window-id", "42"]


def test_launch_failure_is_swallowed(monkeypatch):
    def boom(cmd, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(aerospace.subprocess, "Popen", boom)
    assert aerospace.spawn_focus("3", delay=0.05) is False


def test_request_focus_uses_configured_delay(monkeypatch):
    calls = []
    monkeypatch.setattr(focus_service, "spawn_focus", lambda wid, delay: calls.append((wid, delay)))
    focus_service.request_focus("3")
    focus_service.request_focus("4", delay=-1)
    focus_service.request_focus("5", delay=0.3)
    focus_service.request_focus("6", delay=600)
    assert calls == [
        ("3", focus_service.FOCUS_DELAY_SECONDS),
        ("4", 0.0),
        ("5", 0.3),
        ("6", focus_service.MAX_FOCUS_DELAY_SECONDS),
    ]


def test_tiny_and_huge_delays_stay_fixed_point(monkeypatch):
    recorder = PopenRecorder()
    monkeypatch.setattr(aerospace.subprocess, "Popen", recorder)
    aerospace.spawn_focus("3", delay=0.0126, binary="aerospace")
    aerospace.spawn_focus("3", delay=1234567.0, binary="aerospace")
    assert recorder.calls[0][0][2] == "sleep 0.013 && aerospace focus --window-id 3"
    assert recorder.calls[1][0][2] == "sleep 1234567.000 && aerospace focus --window-id 3"


def test_delay_that_rounds_to_zero_skips_sleep(monkeypatch):
    recorder = PopenRecorder()
    monkeypatch.setattr(aerospace.subprocess, "Popen", recorder)
    aerospace.spawn_focus("3", delay=0.00001, binary="aerospace")
    assert recorder.calls[0][0] == ["aerospace", "focus", "--window-id", "3"]
