from __future__ import annotations

import re
from typing import NamedTuple, Optional, Sequence

from .config import MATH_PATTERNS
from .models import ContentSegment, SegmentKind

MathPatterns = Sequence[tuple[re.Pattern, SegmentKind]]


class _MathMatch(NamedTuple):
    start: int
    end: int
    content: str
    kind: SegmentKind


def _find_math(content: str, patterns: MathPatterns) -> list[_MathMatch]:
    found: list[_MathMatch] = []
    for pat, kind in patterns:
        for m in pat.finditer(content):
            found.append(_MathMatch(m.start(), m.end(), m.group(1), kind))
    # Stable sort: at equal offsets, the earlier pattern (block before inline) wins.
    found.sort(key=lambda mm: mm.start)

    kept: list[_MathMatch] = []
    for mm in found:
        if kept and mm.start < kept[-1].end:
            continue
        kept.append(mm)
    return kept


def parse_content_with_math(content: str, patterns: Optional[MathPatterns] = None) -> list[ContentSegment]:
    """
    Split text into text / inline-math / block-math segments.

    Recognizes $$...$$ and \\[...\\] as block math, $...$ and \\(...\\) as inline
    math. Overlapping matches are resolved first-start-wins. Whitespace-only
    text between expressions is dropped.
    """
    content = content or ""
    patterns = MATH_PATTERNS if patterns is None else patterns
    segments: list[ContentSegment] = []

    last_end = 0
    for mm in _find_math(content, patterns):
        if mm.start > last_end:
            chunk = content[last_end:mm.start]
            if chunk.strip():
                segments.append(ContentSegment(kind=SegmentKind.TEXT, content=chunk))
        segments.append(ContentSegment(kind=mm.kind, content=mm.content))
        last_end = mm.end

    if last_end < len(content):
        chunk = content[last_end:]
        if chunk.strip():
            segments.append(ContentSegment(kind=SegmentKind.TEXT, content=chunk))
    return segments


def segments_to_text(segments: Sequence[ContentSegment]) -> str:
    """Inverse of parse_content_with_math, with delimiters normalized to $ form."""
    out: list[str] = []
    for seg in segments:
        if seg.kind == SegmentKind.MATH_BLOCK:
            out.append(f"$${seg.content}$$")
        elif seg.kind == SegmentKind.MATH_INLINE:
            out.append(f"${seg.content}$")
        else:
            out.append(seg.content)
    return "".join(out)


def segments_to_markdown(segments: Sequence[ContentSegment]) -> str:
    out: list[str] = []
    for seg in segments:
        if seg.kind == SegmentKind.MATH_BLOCK:
            out.append(f"\n$$\n{seg.content}\n$$\n")
        elif seg.kind == SegmentKind.MATH_INLINE:
            out.append(f"${seg.content}$")
        else:
            out.append(seg.content)
    return "".join(out)


def contains_math(text: str, patterns: Optional[MathPatterns] = None) -> bool:
    patterns = MATH_PATTERNS if patterns is None else patterns
    return any(pat.search(text or "") for pat, _ in patterns)


def extract_math_expressions(text: str, patterns: Optional[MathPatterns] = None) -> list[ContentSegment]:
    # Raw matches per pattern; overlaps are not resolved here.
    patterns = MATH_PATTERNS if patterns is None else patterns
    return [
        ContentSegment(kind=kind, content=m.group(1))
        for pat, kind in patterns
        for m in pat.finditer(text or "")
    ]
