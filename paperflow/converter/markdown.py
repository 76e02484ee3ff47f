from __future__ import annotations

from typing import Mapping, Optional, Sequence, Union

from .config import ConvertConfig
from .math_parser import parse_content_with_math, segments_to_markdown
from .models import MarkupOptions, MarkupSection, NormalizedItem, Section
from .reconstruct import SPACE_GAP_RATIO
from .text_utils import _split_ws

SECTION_SEPARATOR = "\n\n---\n\n"

OptionsLike = Union[MarkupOptions, Mapping[str, bool], None]


def _options(options: OptionsLike) -> MarkupOptions:
    if isinstance(options, MarkupOptions):
        return options
    return MarkupOptions(**dict(options or {}))


def _wrap(text: str, marker: str) -> str:
    # Keep surrounding whitespace outside the markers so "**word** ," never happens.
    lead, body, trail = _split_ws(text)
    if not body:
        return text
    return f"{lead}{marker}{body}{marker}{trail}"


def apply_emphasis(text: str, is_bold: bool, is_italic: bool) -> str:
    if is_bold and is_italic:
        return _wrap(text, "***")
    if is_bold:
        return _wrap(text, "**")
    if is_italic:
        return _wrap(text, "*")
    return text


def section_header(title: str, level: int) -> str:
    return "#" * min(max(int(level), 1), 6) + " " + title


def build_markdown_line(items: Sequence[NormalizedItem], avg_height: float, options: OptionsLike = None) -> str:
    opts = _options(options)
    space_width = avg_height * SPACE_GAP_RATIO
    parts: list[str] = []
    prev: Optional[NormalizedItem] = None
    for it in items:
        text = it.text
        if opts.detect_emphasis:
            text = apply_emphasis(text, it.is_bold, it.is_italic)
        if prev is not None and (it.x - prev.right) > space_width:
            parts.append(" ")
        parts.append(text)
        prev = it
    return "".join(parts)


def convert_items_to_markdown(items: Sequence[NormalizedItem], options: OptionsLike = None) -> str:
    """
    Render items in the given order, wrapping bold/italic runs.
    A run flagged `ends_line` closes the current output line.
    """
    opts = _options(options)
    out: list[str] = []
    current: list[str] = []
    prev: Optional[NormalizedItem] = None
    for it in items:
        text = it.text
        if opts.detect_emphasis:
            text = apply_emphasis(text, it.is_bold, it.is_italic)
        if prev is not None and current:
            gap = it.x - prev.right
            if gap > (it.height + prev.height) / 2.0 * SPACE_GAP_RATIO:
                current.append(" ")
        current.append(text)
        if it.ends_line:
            out.append("".join(current) + "\n")
            current = []
        prev = it
    if current:
        out.append("".join(current))
    return "".join(out)


def convert_section_to_markdown(
    section: Section,
    options: OptionsLike = None,
    cfg: Optional[ConvertConfig] = None,
) -> MarkupSection:
    opts = _options(options)
    cfg = cfg or ConvertConfig()

    if opts.detect_headers:
        header = section_header(section.title, section.level)
    else:
        header = section.title

    body = section.content
    if opts.preserve_math:
        body = segments_to_markdown(parse_content_with_math(body, cfg.math_patterns))

    markup = f"{header}\n\n{body.strip()}"
    if opts.include_page_numbers:
        if section.page_start == section.page_end:
            page_info = f"p. {section.page_start}"
        else:
            page_info = f"pp. {section.page_start}-{section.page_end}"
        markup += f"\n\n<!-- {page_info} -->"

    return MarkupSection(
        title=section.title,
        level=section.level,
        markup=markup,
        page_start=section.page_start,
        page_end=section.page_end,
    )


def convert_sections_to_markdown(
    sections: Sequence[Section],
    options: OptionsLike = None,
    cfg: Optional[ConvertConfig] = None,
) -> tuple[str, list[MarkupSection]]:
    opts = _options(options)
    rendered = [convert_section_to_markdown(s, opts, cfg) for s in sections]
    return SECTION_SEPARATOR.join(s.markup for s in rendered), rendered
