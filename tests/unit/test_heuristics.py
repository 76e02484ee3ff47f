import pytest

from paperflow.converter.heuristics import detect_header, section_level


@pytest.mark.parametrize(
    "numbering, level",
    [("1", 1), ("1.2", 2), ("1.2.3", 3), ("1.2.3.4", 3), ("IV", 1), ("ii", 1), ("B", 1)],
)
def test_section_level(numbering, level):
    assert section_level(numbering) == level


@pytest.mark.parametrize(
    "line, title, level",
    [
        ("1 Introduction", "1 Introduction", 1),
        ("3.2.1 Scaled Dot-Product Attention", "3.2.1 Scaled Dot-Product Attention", 3),
        ("2.1. Methods", "2.1 Methods", 2),
        ("1.2.3.4 Very Deep Heading", "1.2.3.4 Very Deep Heading", 3),
        ("IV. Results", "IV Results", 1),
        ("II Background", "II Background", 1),
        ("A. Overview", "A Overview", 1),
        ("  5 Conclusion  ", "5 Conclusion", 1),
    ],
)
def test_numbered_headings(line, title, level):
    m = detect_header(line)
    assert m is not None
    assert (m.title, m.level) == (title, level)


@pytest.mark.parametrize(
    "line, title",
    [
        ("Abstract", "Abstract"),
        ("abstract:", "abstract"),
        ("Related   Work", "Related   Work"),
        ("INTRODUCTION", "INTRODUCTION"),
        ("References", "References"),
    ],
)
def test_known_section_names(line, title):
    m = detect_header(line)
    assert m is not None
    assert m.title == title
    assert m.level == 1


@pytest.mark.parametrize(
    "line",
    [
        "",
        "x",
        "RANDOM BANNER TEXT",
        "10 20 30",
        "1 ab",
        "the results are shown below",
        "This is " + "a very long sentence " * 6,
    ],
)
def test_non_headers(line):
    assert detect_header(line) is None


def test_all_caps_name_outside_known_list_is_rejected_even_if_short():
    assert detect_header("ALL HANDS") is None


def test_custom_section_names():
    assert detect_header("Einleitung") is None
    m = detect_header("Einleitung", section_names=("einleitung",))
    assert m is not None and m.title == "Einleitung"


def test_numbering_takes_precedence_over_known_names():
    m = detect_header("1 References")
    assert m.title == "1 References"
