from __future__ import annotations

import re

LIGATURES = {
    "ﬁ": "fi",
    "ﬂ": "fl",
    "ﬀ": "ff",
    "ﬃ": "ffi",
    "ﬄ": "ffl",
    "": "tt",   # private-use ligature seen in some ACM PDFs
}

_HANGUL_RE = re.compile(r"[가-힯]")
_KANA_RE = re.compile(r"[぀-ゟ゠-ヿ]")
_CJK_RE = re.compile(r"[一-鿿]")
_WS_RE = re.compile(r"\s+")


def _expand_ligatures(s: str) -> str:
    if not s:
        return ""
    for k, v in LIGATURES.items():
        if k in s:
            s = s.replace(k, v)
    return s


def _collapse_ws(s: str) -> str:
    return _WS_RE.sub(" ", s or "").strip()


def _split_ws(s: str) -> tuple[str, str, str]:
    """Split into (leading whitespace, body, trailing whitespace)."""
    body = s.strip()
    if not body:
        return s, "", ""
    start = len(s) - len(s.lstrip())
    end = start + len(body)
    return s[:start], body, s[end:]


def detect_language(text: str) -> str:
    """
    ISO 639-1 guess from Unicode blocks.
    Hangul wins over kana, kana wins over bare CJK ideographs.
    """
    if not text:
        return "en"
    if _HANGUL_RE.search(text):
        return "ko"
    if _KANA_RE.search(text):
        return "ja"
    if _CJK_RE.search(text):
        return "zh"
    return "en"
