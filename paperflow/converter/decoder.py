from __future__ import annotations

import logging
import re
from typing import Optional, Protocol

try:
    import fitz
except ImportError:
    fitz = None

from .errors import DecodeError, EncryptedDocumentError
from .models import DecodedDocument, RawGlyph, RawPage

logger = logging.getLogger(__name__)

_SUBSET_PREFIX_RE = re.compile(r"^[A-Z]{6}\+")

# PyMuPDF span flags
_FLAG_ITALIC = 1 << 1
_FLAG_BOLD = 1 << 4


class DocumentDecoder(Protocol):
    def decode(self, data: bytes) -> DecodedDocument:
        ...


def _strip_subset(name: str) -> str:
    return _SUBSET_PREFIX_RE.sub("", name or "")


def _family_for_span(font: str, flags: int) -> str:
    """
    Font family with the style words PyMuPDF knows about made explicit,
    so fonts like CMBX10 still read as bold downstream.
    """
    family = _strip_subset(font)
    low = family.lower()
    if (flags & _FLAG_BOLD) and "bold" not in low:
        family += " Bold"
    if (flags & _FLAG_ITALIC) and "italic" not in low and "oblique" not in low:
        family += " Italic"
    return family


def _page_to_raw(page) -> RawPage:
    page_h = float(page.rect.height)
    glyphs: list[RawGlyph] = []
    families: dict[str, str] = {}

    d = page.get_text("dict")
    for b in d.get("blocks", []):
        if b.get("type", 0) != 0:
            continue
        for l in b.get("lines", []) or []:
            spans = [s for s in (l.get("spans", []) or []) if (s.get("text") or "").strip()]
            for i, s in enumerate(spans):
                x0, _, x1, _ = s.get("bbox", (0.0, 0.0, 0.0, 0.0))
                ox, oy = s.get("origin", (x0, 0.0))
                size = float(s.get("size", 0.0) or 0.0)
                font = s.get("font", "") or ""
                families.setdefault(font, _family_for_span(font, int(s.get("flags", 0) or 0)))
                glyphs.append(
                    RawGlyph(
                        text=s["text"],
                        # y flipped so that it grows upward
                        transform=(size, 0.0, 0.0, size, float(ox), page_h - float(oy)),
                        width=float(x1) - float(x0),
                        height=size,
                        font_name=font,
                        ends_line=(i == len(spans) - 1),
                    )
                )
    return RawPage(width=float(page.rect.width), glyphs=glyphs, font_families=families)


def _meta_value(meta: Optional[dict], key: str) -> Optional[str]:
    v = (meta or {}).get(key)
    if isinstance(v, str) and v.strip():
        return v.strip()
    return None


class PyMuPDFDecoder:
    """Decodes PDF bytes into raw per-page glyph records."""

    def decode(self, data: bytes) -> DecodedDocument:
        if fitz is None:
            raise ImportError("PyMuPDF (fitz) not installed.")

        try:
            doc = fitz.open(stream=bytes(data), filetype="pdf")
        except Exception as e:
            raise DecodeError(str(e)) from e

        try:
            if doc.needs_pass:
                raise EncryptedDocumentError("document is encrypted and requires a password")
            if doc.page_count == 0:
                raise DecodeError("document has no pages")
            pages: list[RawPage] = []
            for i, page in enumerate(doc):
                raw = _page_to_raw(page)
                logger.debug("page %d: %d glyph runs", i + 1, len(raw.glyphs))
                pages.append(raw)
            meta = doc.metadata
            return DecodedDocument(
                pages=pages,
                title=_meta_value(meta, "title"),
                author=_meta_value(meta, "author"),
            )
        finally:
            doc.close()
