"""
Goal: the fuzzy scorer behaves like a subsequence matcher and prefers tight, early matches.
"""
from switcher.services.fuzzy import fuzzy_score


def test_subsequence_matches():
    assert fuzzy_score("Terminal", "trml") is not None
    assert fuzzy_score("github.com", "ghc") is not None


def test_out_of_order_does_not_match():
    assert fuzzy_score("Terminal", "mret") is None


def test_missing_character_does_not_match():
    assert fuzzy_score("Browser", "term") is None
    assert fuzzy_score("Editor", "term") is None
    assert fuzzy_score("", "a") is None


def test_pattern_longer_than_candidate():
    assert fuzzy_score("ab", "abc") is None


def test_case_insensitive():
    assert fuzzy_score("Terminal", "TERM") == fuzzy_score("terminal", "term")


def test_positive_score_for_match():
    score = fuzzy_score("Terminal", "term")
    assert score is not None and score > 0


def test_prefix_beats_middle():
    assert fuzzy_score("terminal", "term") > fuzzy_score("xterminal", "term")


def test_contiguous_beats_scattered():
    assert fuzzy_score("abc", "abc") > fuzzy_score("a_b_c", "abc")
    assert fuzzy_score("Terminal", "term") > fuzzy_score("the_error_map", "term")


def test_word_boundary_beats_mid_word():
    assert fuzzy_score("my notes", "n") > fuzzy_score("my wand", "n")


def test_camel_case_hump_gets_a_bonus():
    assert fuzzy_score("fooBar", "b") > fuzzy_score("foobar", "b")


def test_empty_pattern_scores_zero():
    assert fuzzy_score("anything", "") == 0


def test_deterministic():
    assert fuzzy_score("Visual Studio Code", "vsc") == fuzzy_score("Visual Studio Code", "vsc")


def test_non_ascii_lowercasing_keeps_alignment():
    # "İ".lower() is two characters long; scoring must not trip over it
    assert fuzzy_score("İstanbul Notes", "notes") is not None
