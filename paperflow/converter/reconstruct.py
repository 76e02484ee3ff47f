from __future__ import annotations

from typing import Optional, Sequence

from .layout_analysis import detect_columns
from .models import NormalizedItem

DEFAULT_ITEM_HEIGHT = 10.0
LINE_Y_RATIO = 0.6
NORMAL_LINE_GAP_RATIO = 1.4
PARAGRAPH_GAP_RATIO = 2.2
INDENT_RATIO = 1.5
SPACE_GAP_RATIO = 0.25

Line = list[NormalizedItem]


def average_height(items: Sequence[NormalizedItem]) -> float:
    if not items:
        return DEFAULT_ITEM_HEIGHT
    avg = sum(float(it.height) for it in items) / len(items)
    return avg or DEFAULT_ITEM_HEIGHT


def _vertical_key(it: NormalizedItem):
    return (-it.y, it.x, it.width, it.text)


def _horizontal_key(it: NormalizedItem):
    return (it.x, -it.y, it.width, it.text)


def group_into_lines(items: Sequence[NormalizedItem]) -> list[Line]:
    """
    Cluster items into lines, top to bottom, each sorted left to right.

    A line stays anchored at the y of its first item; an item further than
    0.6 * average height from that anchor opens a new line. Anchoring on the
    line start keeps many small per-item deltas from chaining separate lines.
    """
    if not items:
        return []

    ordered = sorted(items, key=_vertical_key)
    y_threshold = average_height(items) * LINE_Y_RATIO

    lines: list[Line] = []
    current: Line = []
    line_start_y = ordered[0].y
    for it in ordered:
        if current and abs(it.y - line_start_y) > y_threshold:
            lines.append(sorted(current, key=_horizontal_key))
            current = []
            line_start_y = it.y
        current.append(it)
    if current:
        lines.append(sorted(current, key=_horizontal_key))
    return lines


def build_line_text(line: Sequence[NormalizedItem], avg_height: float) -> str:
    """Join a line's runs, with a space only where the horizontal gap looks like a word break."""
    space_width = avg_height * SPACE_GAP_RATIO
    parts: list[str] = []
    prev: Optional[NormalizedItem] = None
    for it in line:
        if prev is not None and (it.x - prev.right) > space_width:
            parts.append(" ")
        parts.append(it.text)
        prev = it
    return "".join(parts)


def reconstruct_column_text(
    lines: Sequence[Line],
    avg_height: float,
    left_margin: Optional[float] = None,
) -> str:
    lines = [ln for ln in lines if ln]
    if not lines:
        return ""

    normal_gap = avg_height * NORMAL_LINE_GAP_RATIO
    paragraph_gap = avg_height * PARAGRAPH_GAP_RATIO
    if left_margin is None:
        left_margin = min(it.x for ln in lines for it in ln)

    out: list[str] = []
    last_y = lines[0][0].y
    for ln in lines:
        y = ln[0].y
        gap = last_y - y
        indented = ln[0].x > left_margin + avg_height * INDENT_RATIO
        if out and (gap > paragraph_gap or (gap > normal_gap and indented)):
            out.append("")
        out.append(build_line_text(ln, avg_height))
        last_y = y
    return "\n".join(out)


def reconstruct_page_text(items: Sequence[NormalizedItem], page_width: float) -> str:
    """
    Rebuild one page's reading-order text.

    Two-column pages are stitched as span text, then the left column, then the
    right column, separated by blank lines.
    """
    if not items:
        return ""

    avg = average_height(items)
    bucket = detect_columns(items, page_width)

    if not bucket.is_two_column:
        return reconstruct_column_text(group_into_lines(bucket.left), avg)

    parts: list[str] = []
    for group in (bucket.span, bucket.left, bucket.right):
        if not group:
            continue
        text = reconstruct_column_text(group_into_lines(group), avg)
        if text.strip():
            parts.append(text)
    return "\n\n".join(parts)
