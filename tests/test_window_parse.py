"""
Goal: aerospace output parsing keeps good rows, in order, and quietly drops the junk.
"""
import pytest
from pydantic import ValidationError

from switcher.adapters.aerospace import (
    focus_command,
    list_windows_command,
    parse_window_line,
    parse_window_lines,
    parse_window_output,
)


def test_mixed_lines_parse_to_three_records():
    lines = ["1|Terminal|~/proj", "2|Browser|github.com", "bad-line", "  ", "3|Editor|main.rs"]
    windows = parse_window_lines(lines)
    assert [(w.id, w.name, w.info) for w in windows] == [
        ("1", "Terminal", "~/proj"),
        ("2", "Browser", "github.com"),
        ("3", "Editor", "main.rs"),
    ]


def test_fields_are_trimmed():
    record = parse_window_line("  42 |  Safari  | Docs - Apple  ")
    assert record is not None
    assert (record.id, record.name, record.info) == ("42", "Safari", "Docs - Apple")


def test_extra_separators_fold_into_info():
    record = parse_window_line("7 | Code | main.py | repo | branch")
    assert record is not None
    assert record.info == "main.py | repo | branch"


def test_two_fields_is_not_enough():
    assert parse_window_line("7|Code") is None


def test_empty_fields_still_count():
    record = parse_window_line("||")
    assert record is not None
    assert (record.id, record.name, record.info) == ("", "", "")


def test_output_text_with_blank_lines_and_crlf():
    out = "10 | Finder | Downloads\r\n\r\n\n11 | Mail | Inbox\r\n"
    windows = parse_window_output(out)
    assert [w.id for w in windows] == ["10", "11"]
    assert windows[1].info == "Inbox"


def test_empty_output():
    assert parse_window_output("") == []


def test_record_is_frozen_and_has_label():
    record = parse_window_line("1|Terminal|~/proj")
    assert record is not None
    assert record.label == "Terminal | ~/proj"
    with pytest.raises(ValidationError):
        record.name = "Other"


def test_commands():
    assert list_windows_command("aerospace") == ["aerospace", "list-windows", "--all"]
    assert focus_command("3", "aerospace") == ["aerospace", "focus", "--window-id", "3"]
