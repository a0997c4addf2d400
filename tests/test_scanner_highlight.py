from __future__ import annotations

import pytest

from edit_engine.scanner import RUST_LEXICON, Span, SpanKind
from edit_engine.scanner.highlight import (
    block_comment_spans,
    is_escaped,
    line_comment_spans,
    string_spans,
    word_spans,
)


def keyword_spans(text: str) -> list[Span]:
    return word_spans(text, RUST_LEXICON.keywords, SpanKind.KEYWORD)


def test_keyword_inside_identifier_is_not_tagged() -> None:
    assert keyword_spans("format") == []


def test_whole_word_keywords_are_tagged() -> None:
    spans = keyword_spans("for i in 0..n")

    assert [(span.start, span.end) for span in spans] == [(0, 3), (6, 8)]
    assert all(span.kind is SpanKind.KEYWORD for span in spans)


def test_keyword_matching_ignores_case() -> None:
    assert keyword_spans("FOR x") == [Span(SpanKind.KEYWORD, 0, 3)]


def test_underscore_is_a_word_edge_for_keywords() -> None:
    assert keyword_spans("my_for") == [Span(SpanKind.KEYWORD, 3, 6)]


def test_combining_mark_after_keyword_joins_the_word() -> None:
    assert keyword_spans("for\u0301") == []
    assert keyword_spans("x\u0301for") == []


def test_keyword_after_accented_cluster_and_space_is_tagged() -> None:
    assert keyword_spans("e\u0301 for") == [Span(SpanKind.KEYWORD, 3, 6)]
    assert keyword_spans("a\r\nfor") == [Span(SpanKind.KEYWORD, 3, 6)]


def test_words_differing_only_in_case_collapse() -> None:
    assert "Self" not in RUST_LEXICON.keywords
    assert keyword_spans("Self") == [Span(SpanKind.KEYWORD, 0, 4)]


def test_type_names_use_their_own_kind() -> None:
    text = "let v: Vec<u8> = String::new();"
    spans = word_spans(text, RUST_LEXICON.types, SpanKind.TYPE)

    assert [span.slice(text) for span in spans] == ["u8", "String", "Vec"]


@pytest.mark.parametrize(
    "text, index, expected",
    [
        ('"', 0, False),
        ('\\"', 1, True),
        ('\\\\"', 2, False),
        ('\\\\\\"', 3, True),
    ],
)
def test_is_escaped_counts_backslashes(text: str, index: int, expected: bool) -> None:
    assert is_escaped(text, index) is expected


def test_string_span_skips_escaped_quote() -> None:
    text = 'let s = "a\\"b";'

    assert string_spans(text) == [Span(SpanKind.STRING, 9, 13)]


def test_escaped_backslash_does_not_escape_the_quote() -> None:
    text = '"a\\\\" b "c"'

    assert string_spans(text) == [
        Span(SpanKind.STRING, 1, 4),
        Span(SpanKind.STRING, 9, 10),
    ]


def test_string_span_covers_only_the_contents() -> None:
    text = 'x = "ab";'

    assert string_spans(text) == [Span(SpanKind.STRING, 5, 7)]
    assert string_spans('""') == [Span(SpanKind.STRING, 1, 1)]


def test_unterminated_string_yields_nothing() -> None:
    assert string_spans('x = "abc') == []


def test_line_comment_stops_before_line_break() -> None:
    text = "x // hi\r\ny // z"

    assert line_comment_spans(text) == [
        Span(SpanKind.COMMENT, 2, 7),
        Span(SpanKind.COMMENT, 11, 15),
    ]


def test_repeated_markers_on_one_line_give_one_comment() -> None:
    assert line_comment_spans("// a // b") == [Span(SpanKind.COMMENT, 0, 9)]


def test_comment_marker_inside_string_still_comments() -> None:
    text = 'let url = "http://x";'

    assert line_comment_spans(text) == [Span(SpanKind.COMMENT, 16, len(text))]
    assert string_spans(text) == [Span(SpanKind.STRING, 11, 19)]


def test_block_comment_uses_nearest_closer_without_nesting() -> None:
    text = "/* a /* b */ c */"

    assert block_comment_spans(text) == [Span(SpanKind.COMMENT, 0, 12)]


def test_block_comment_spans_lines_and_ignores_unterminated() -> None:
    text = "a /* b\n */ c /* d"

    assert block_comment_spans(text) == [Span(SpanKind.COMMENT, 2, 10)]


def test_block_comment_opener_cannot_share_its_star() -> None:
    assert block_comment_spans("/*/") == []
