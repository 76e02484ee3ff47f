import pydantic
import pytest

from paperflow.converter.config import ConvertConfig
from paperflow.converter.sections import SectionSegmenter, estimate_page, segment_sections


def test_two_numbered_sections_on_one_page():
    sections = segment_sections("1 Introduction\nHello world\n2 Methods\nFoo bar", 1)
    assert [(s.title, s.level, s.content, s.page_start, s.page_end) for s in sections] == [
        ("1 Introduction", 1, "Hello world", 1, 1),
        ("2 Methods", 1, "Foo bar", 1, 1),
    ]
    assert [s.order_index for s in sections] == [1, 2]


def test_preamble_collects_text_before_first_header():
    text = "Learning Things Fast\nJane Roe\n\nAbstract\nWe study things.\n1 Introduction\nThings matter."
    sections = segment_sections(text, 1)
    assert [s.title for s in sections] == ["Preamble", "Abstract", "1 Introduction"]
    assert sections[0].order_index == 0
    assert sections[0].level == 1
    assert sections[0].content == "Learning Things Fast\nJane Roe"


def test_blank_lines_before_first_header_do_not_create_preamble():
    sections = segment_sections("\n\n1 Introduction\nBody", 1)
    assert [s.title for s in sections] == ["1 Introduction"]


def test_empty_sections_are_discarded_but_keep_their_index():
    sections = segment_sections("1 Introduction\n\n2 Methods\nFoo", 1)
    assert [(s.title, s.order_index) for s in sections] == [("2 Methods", 2)]


def test_no_headers_gives_full_document():
    text = "  just some prose\nmore prose here  "
    sections = segment_sections(text, 3)
    assert len(sections) == 1
    s = sections[0]
    assert (s.title, s.level, s.page_start, s.page_end) == ("Full Document", 1, 1, 3)
    assert s.content == "just some prose\nmore prose here"


def test_order_index_strictly_increasing():
    text = "Preface line\n1 Intro Part\nx\n1.1 Sub Part\ny\n2 Next Part\nz"
    sections = segment_sections(text, 2)
    idx = [s.order_index for s in sections]
    assert idx == sorted(idx) and len(set(idx)) == len(idx)
    assert [s.level for s in sections] == [1, 1, 2, 1]


@pytest.mark.parametrize(
    "position, total, pages, expected",
    [(0, 100, 4, 1), (50, 100, 4, 2), (51, 100, 4, 3), (100, 100, 4, 4), (500, 100, 4, 4), (10, 100, 1, 1), (0, 0, 5, 1)],
)
def test_estimate_page(position, total, pages, expected):
    assert estimate_page(position, total, pages) == expected


def test_page_ranges_follow_character_offsets():
    text = "1 Introduction\n" + "x" * 85 + "\n2 Methods\nFoo bar"
    first, second = segment_sections(text, 2)
    assert (first.page_start, first.page_end) == (1, 2)
    assert (second.page_start, second.page_end) == (2, 2)


def test_last_section_ends_on_last_page():
    sections = segment_sections("1 Introduction\nshort", 7)
    assert sections[-1].page_end == 7


def test_sections_are_immutable():
    section = segment_sections("1 Introduction\nHello", 1)[0]
    with pytest.raises(pydantic.ValidationError):
        section.title = "changed"


def test_segmenter_uses_configured_names():
    seg = SectionSegmenter(ConvertConfig(section_names=("zusammenfassung",)))
    sections = seg.segment("Zusammenfassung\nKurz gesagt.", 1)
    assert sections[0].title == "Zusammenfassung"
    assert sections[0].content == "Kurz gesagt."
