from __future__ import annotations

import re
from typing import NamedTuple, Optional, Sequence

from .config import KNOWN_SECTION_NAMES
from .text_utils import _collapse_ws

MAX_SECTION_LEVEL = 3
MIN_HEADER_CHARS = 2
MAX_HEADER_CHARS = 100


# Tried in order, first accepted match wins.
_SECTION_PATTERNS: tuple[re.Pattern, ...] = (
    # "1 Introduction", "3.2.1 Scaled Dot-Product Attention" (no dot after the number)
    re.compile(r"^(\d+(?:\.\d+)*)\s+([A-Z][^\d].*)$"),
    # "1. Introduction", "2.1. Methods"
    re.compile(r"^(\d+(?:\.\d+)*)\.\s+(.+)$"),
    # number with optional dot
    re.compile(r"^(\d+(?:\.\d+)*)\s*\.?\s+(.+)$"),
    # "I. Introduction", "II Background"
    re.compile(r"^([IVX]+)\s*\.?\s+(.+)$", re.IGNORECASE),
    # "A. Overview", "B Methods"
    re.compile(r"^([A-Z])\s*\.?\s+(.+)$"),
)

_NUMERIC_ONLY_RE = re.compile(r"^[\d\s.,\-+=*/()]+$")
_SHORT_CAPS_RE = re.compile(r"^[A-Z]{1,2}$")
_ROMAN_RE = re.compile(r"^[IVX]+$", re.IGNORECASE)
_LETTER_RE = re.compile(r"^[A-Z]$", re.IGNORECASE)
_ALL_CAPS_RE = re.compile(r"^[A-Z\s]+$")


class HeaderMatch(NamedTuple):
    title: str
    level: int


def section_level(numbering: str) -> int:
    """
    "1" -> 1, "1.2" -> 2, "1.2.3" -> 3, deeper numbering is capped at 3.
    Roman numerals and single letters are always top level.
    """
    if _ROMAN_RE.match(numbering) or _LETTER_RE.match(numbering):
        return 1
    return min(len(numbering.split(".")), MAX_SECTION_LEVEL)


def _match_numbered(line: str) -> Optional[HeaderMatch]:
    for pat in _SECTION_PATTERNS:
        m = pat.match(line)
        if not m:
            continue
        numbering = m.group(1)
        title = m.group(2).strip()
        if not title:
            continue
        if _NUMERIC_ONLY_RE.match(title):
            continue
        # "1 A" and friends
        if len(title) < 3 and not _SHORT_CAPS_RE.match(title):
            continue
        return HeaderMatch(f"{numbering} {title}", section_level(numbering))
    return None


def _match_known_name(line: str, names: Sequence[str]) -> Optional[HeaderMatch]:
    lower = line.lower()
    collapsed = _collapse_ws(lower)
    for name in names:
        if lower == name:
            return HeaderMatch(line, 1)
        if lower == name + ":":
            return HeaderMatch(line[:-1], 1)
        if collapsed == name:
            return HeaderMatch(line, 1)
    return None


def _match_all_caps(line: str, names: Sequence[str]) -> Optional[HeaderMatch]:
    if not (4 <= len(line) <= 50):
        return None
    if line != line.upper() or not _ALL_CAPS_RE.match(line):
        return None
    if _collapse_ws(line.lower()) not in names:
        return None
    return HeaderMatch(line[0] + line[1:].lower(), 1)


def detect_header(line: str, section_names: Sequence[str] = KNOWN_SECTION_NAMES) -> Optional[HeaderMatch]:
    """
    Decide whether one physical line is a section heading.

    Numbering patterns are tried first, then the known section names
    (exact, with a trailing colon, or whitespace-normalized), then shouted
    all-caps lines, which are only accepted when they spell a known name.
    """
    t = (line or "").strip()
    if len(t) < MIN_HEADER_CHARS or len(t) > MAX_HEADER_CHARS:
        return None
    names = [n.lower() for n in section_names]
    return _match_numbered(t) or _match_known_name(t, names) or _match_all_caps(t, names)
