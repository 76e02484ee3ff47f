from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .config import ConvertConfig
from .models import NormalizedItem, RawGlyph, RawPage
from .text_utils import _expand_ligatures


def _has_keyword(family: str, keywords: Iterable[str]) -> bool:
    f = (family or "").lower()
    return any(k.lower() in f for k in keywords)


def normalize_glyph(
    glyph: RawGlyph,
    *,
    font_families: Mapping[str, str],
    page: int = 1,
    cfg: Optional[ConvertConfig] = None,
) -> Optional[NormalizedItem]:
    """Returns None for glyphs that carry no usable text or have a degenerate box."""
    cfg = cfg or ConvertConfig()
    text = glyph.text or ""
    if not text.strip():
        return None
    if glyph.width <= 0 or glyph.height <= 0:
        return None
    if cfg.expand_ligatures:
        text = _expand_ligatures(text)

    family = font_families.get(glyph.font_name) or glyph.font_name or ""
    return NormalizedItem(
        text=text,
        x=float(glyph.transform[4]),
        y=float(glyph.transform[5]),
        width=float(glyph.width),
        height=float(glyph.height),
        font_name=glyph.font_name or "",
        font_family=family,
        is_bold=_has_keyword(family, cfg.bold_keywords),
        is_italic=_has_keyword(family, cfg.italic_keywords),
        ends_line=bool(glyph.ends_line),
        page=page,
    )


def normalize_page(raw: RawPage, *, page: int = 1, cfg: Optional[ConvertConfig] = None) -> list[NormalizedItem]:
    cfg = cfg or ConvertConfig()
    out: list[NormalizedItem] = []
    for g in raw.glyphs:
        item = normalize_glyph(g, font_families=raw.font_families, page=page, cfg=cfg)
        if item is not None:
            out.append(item)
    return out
