from __future__ import annotations

from edit_engine.buffer import graphemes

from helpers import COMBINING_E, FLAG_FR


def test_boundaries_keep_combining_marks_with_their_base() -> None:
    text = "a" + COMBINING_E + "b"

    assert graphemes.boundaries(text) == [0, 1, 3, 4]


def test_crlf_is_a_single_cluster() -> None:
    assert graphemes.boundaries("x\r\ny") == [0, 1, 3, 4]


def test_regional_indicator_pair_is_one_cluster() -> None:
    text = FLAG_FR + "!"

    assert graphemes.next_boundary(text, 0) == 2
    assert graphemes.previous_boundary(text, 2) == 0
    assert graphemes.count(text, 0, len(text)) == 2


def test_snapping_rounds_to_cluster_edges() -> None:
    text = "a" + COMBINING_E

    assert graphemes.snap_down(text, 2) == 1
    assert graphemes.snap_up(text, 2) == 3
    assert graphemes.snap_down(text, 1) == 1
    assert graphemes.snap_up(text, 1) == 1


def test_next_and_previous_at_text_edges() -> None:
    assert graphemes.next_boundary("ab", 2) == 2
    assert graphemes.previous_boundary("ab", 0) == 0
    assert graphemes.previous_boundary("ab", 1, floor=1) == 1


def test_advance_stops_at_limit() -> None:
    text = "abcdef"

    assert graphemes.advance(text, 1, 2) == 3
    assert graphemes.advance(text, 1, 10) == 6
    assert graphemes.advance(text, 1, 10, limit=4) == 4
    assert graphemes.advance(text, 1, 0) == 1


def test_retreat_counts_clusters_not_code_points() -> None:
    text = COMBINING_E + FLAG_FR + "z"

    assert graphemes.retreat(text, 5, 1) == 4
    assert graphemes.retreat(text, 5, 2) == 2
    assert graphemes.retreat(text, 5, 3) == 0
    assert graphemes.retreat(text, 5, 9) == 0
    assert graphemes.retreat(text, 5, 0) == 5
