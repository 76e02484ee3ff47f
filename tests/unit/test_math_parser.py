import re

from paperflow.converter.math_parser import (
    contains_math,
    extract_math_expressions,
    parse_content_with_math,
    segments_to_markdown,
    segments_to_text,
)
from paperflow.converter.models import SegmentKind


def _kinds(segments):
    return [(s.kind, s.content) for s in segments]


def test_mixed_inline_and_block_math():
    src = "Energy $E=mc^2$ and $$\\int x\\,dx$$ done"
    segs = parse_content_with_math(src)
    assert _kinds(segs) == [
        (SegmentKind.TEXT, "Energy "),
        (SegmentKind.MATH_INLINE, "E=mc^2"),
        (SegmentKind.TEXT, " and "),
        (SegmentKind.MATH_BLOCK, "\\int x\\,dx"),
        (SegmentKind.TEXT, " done"),
    ]
    assert segments_to_text(segs) == src


def test_bracket_delimiters_normalize_to_dollars():
    src = "Let \\(a\\) be given. \\[a^2 + b^2\\]"
    segs = parse_content_with_math(src)
    assert _kinds(segs) == [
        (SegmentKind.TEXT, "Let "),
        (SegmentKind.MATH_INLINE, "a"),
        (SegmentKind.TEXT, " be given. "),
        (SegmentKind.MATH_BLOCK, "a^2 + b^2"),
    ]
    assert segments_to_text(segs) == "Let $a$ be given. $$a^2 + b^2$$"


def test_double_dollar_is_not_read_as_two_inline_spans():
    segs = parse_content_with_math("$$x$$")
    assert _kinds(segs) == [(SegmentKind.MATH_BLOCK, "x")]


def test_overlapping_match_inside_earlier_one_is_dropped():
    segs = parse_content_with_math("\\( p $q$ \\)")
    assert _kinds(segs) == [(SegmentKind.MATH_INLINE, " p $q$ ")]


def test_whitespace_between_expressions_is_dropped():
    segs = parse_content_with_math("$a$ \n $b$")
    assert _kinds(segs) == [(SegmentKind.MATH_INLINE, "a"), (SegmentKind.MATH_INLINE, "b")]


def test_plain_text_and_blank_input():
    assert _kinds(parse_content_with_math("no math here")) == [(SegmentKind.TEXT, "no math here")]
    assert parse_content_with_math("   \n ") == []
    assert parse_content_with_math("") == []


def test_round_trip_with_well_formed_dollars():
    src = "Intro text $x_1$ then\n$$\nE = mc^2\n$$\nand the end."
    assert segments_to_text(parse_content_with_math(src)) == src


def test_markdown_puts_block_math_on_own_lines():
    segs = parse_content_with_math("see $$a=b$$ now")
    assert segments_to_markdown(segs) == "see \n$$\na=b\n$$\n now"


def test_contains_and_extract():
    assert contains_math("cost is $5$")
    assert not contains_math("cost is 5 dollars")
    found = extract_math_expressions("$x$ and \\(y\\)")
    assert [(e.kind, e.content) for e in found] == [
        (SegmentKind.MATH_INLINE, "x"),
        (SegmentKind.MATH_INLINE, "y"),
    ]


def test_custom_patterns():
    patterns = ((re.compile(r"@@(.*?)@@"), SegmentKind.MATH_INLINE),)
    segs = parse_content_with_math("a @@x@@ b $y$", patterns)
    assert _kinds(segs) == [
        (SegmentKind.TEXT, "a "),
        (SegmentKind.MATH_INLINE, "x"),
        (SegmentKind.TEXT, " b $y$"),
    ]
