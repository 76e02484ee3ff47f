from __future__ import annotations

import math
from typing import NamedTuple, Optional

from .config import ConvertConfig
from .heuristics import detect_header
from .models import Section

PREAMBLE_TITLE = "Preamble"
FALLBACK_TITLE = "Full Document"


class _OpenSection(NamedTuple):
    title: str
    level: int
    order_index: int
    page_start: int


def estimate_page(position: int, total_length: int, page_count: int) -> int:
    """Linear interpolation of a character offset onto 1..page_count."""
    if page_count <= 1 or total_length <= 0:
        return 1
    page = math.ceil(position / total_length * page_count)
    return max(1, min(page, page_count))


def _close(open_: _OpenSection, lines: list[str], page_end: int) -> Optional[Section]:
    content = "\n".join(lines).strip()
    if not content:
        return None
    return Section(
        title=open_.title,
        level=open_.level,
        order_index=open_.order_index,
        content=content,
        page_start=open_.page_start,
        page_end=max(page_end, open_.page_start),
    )


class SectionSegmenter:
    def __init__(self, cfg: Optional[ConvertConfig] = None):
        self.cfg = cfg or ConvertConfig()

    def segment(self, text: str, page_count: int) -> list[Section]:
        """
        Partition joined document text into ordered sections.

        Lines before the first heading become a "Preamble" section when they
        hold any text. Sections whose body is empty are dropped. When nothing
        survives, the whole text is returned as a single "Full Document".
        """
        page_count = max(1, int(page_count))
        text = text or ""
        total = len(text)

        sections: list[Section] = []
        open_: Optional[_OpenSection] = None
        lines: list[str] = []
        next_index = 1
        position = 0

        for line in text.split("\n"):
            header = detect_header(line, self.cfg.section_names)
            if header is not None:
                page = estimate_page(position, total, page_count)
                if open_ is not None:
                    closed = _close(open_, lines, page)
                    if closed is not None:
                        sections.append(closed)
                open_ = _OpenSection(header.title, header.level, next_index, page)
                lines = []
                next_index += 1
            elif open_ is not None:
                lines.append(line)
            elif line.strip():
                open_ = _OpenSection(PREAMBLE_TITLE, 1, 0, 1)
                lines = [line]
            position += len(line) + 1

        if open_ is not None:
            closed = _close(open_, lines, page_count)
            if closed is not None:
                sections.append(closed)

        if not sections:
            sections.append(
                Section(
                    title=FALLBACK_TITLE,
                    level=1,
                    order_index=1,
                    content=text.strip(),
                    page_start=1,
                    page_end=page_count,
                )
            )
        return sections


def segment_sections(text: str, page_count: int, cfg: Optional[ConvertConfig] = None) -> list[Section]:
    return SectionSegmenter(cfg).segment(text, page_count)
