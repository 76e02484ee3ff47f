from __future__ import annotations

from typing import Sequence

from .models import ColumnBucket, NormalizedItem

SPAN_WIDTH_RATIO = 0.60
CENTER_MARGIN_RATIO = 0.08
MIN_COLUMN_ITEMS = 10


def _top_to_bottom(items: Sequence[NormalizedItem]) -> list[NormalizedItem]:
    # y grows upward, so the top of the page has the largest y.
    return sorted(items, key=lambda it: -it.y)


def detect_columns(items: Sequence[NormalizedItem], page_width: float) -> ColumnBucket:
    """
    Bucket items into left / right / span groups.

    Items wider than 60% of the page, or straddling the center band
    (midpoint +/- 8% of the width), are span items (titles, captions).
    A page is two-column only when both sides hold more than 10 items;
    otherwise everything collapses into one top-to-bottom ordered set,
    returned in `left`.
    """
    page_width = float(page_width)
    mid = page_width / 2.0
    margin = page_width * CENTER_MARGIN_RATIO

    left: list[NormalizedItem] = []
    right: list[NormalizedItem] = []
    span: list[NormalizedItem] = []

    for it in items:
        if float(it.width) > page_width * SPAN_WIDTH_RATIO:
            span.append(it)
        elif it.right < mid + margin:
            left.append(it)
        elif float(it.x) > mid - margin:
            right.append(it)
        else:
            span.append(it)

    if len(left) > MIN_COLUMN_ITEMS and len(right) > MIN_COLUMN_ITEMS:
        return ColumnBucket(layout="two", left=tuple(left), right=tuple(right), span=tuple(span))

    merged = _top_to_bottom([*span, *left, *right])
    return ColumnBucket(layout="single", left=tuple(merged))
