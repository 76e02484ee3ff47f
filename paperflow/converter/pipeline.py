from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, Optional, Sequence

from .config import ConvertConfig
from .decoder import DocumentDecoder, PyMuPDFDecoder
from .errors import (
    EncryptedDocumentError,
    ErrorKind,
    MarkupParseResult,
    MarkupParseSuccess,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    make_error,
)
from .glyphs import normalize_page
from .layout_analysis import detect_columns
from .markdown import OptionsLike, convert_sections_to_markdown
from .models import DecodedDocument, DocumentMetadata, NormalizedItem, RawPage
from .reconstruct import reconstruct_page_text
from .sections import SectionSegmenter
from .text_utils import detect_language

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"

_ENCRYPTION_HINTS = ("encrypted", "password", "protected")


class PageResult(NamedTuple):
    text: str
    items: list[NormalizedItem]


class _Extracted(NamedTuple):
    text: str
    page_count: int
    metadata: DocumentMetadata
    items: list[NormalizedItem]


def process_page(raw: RawPage, page: int, cfg: Optional[ConvertConfig] = None) -> PageResult:
    cfg = cfg or ConvertConfig()
    items = normalize_page(raw, page=page, cfg=cfg)
    if logger.isEnabledFor(logging.DEBUG) and items:
        layout = detect_columns(items, raw.width).layout
        logger.debug("page %d: %d items, %s-column", page, len(items), layout)
    return PageResult(reconstruct_page_text(items, raw.width), items)


def reconstruct_pages(pages: Sequence[RawPage], cfg: Optional[ConvertConfig] = None) -> list[PageResult]:
    """
    Normalize and rebuild every page. Pages are independent, so they may run on
    a thread pool; results always come back in page order.
    """
    cfg = cfg or ConvertConfig()
    if cfg.workers > 1 and len(pages) > 1:
        with ThreadPoolExecutor(max_workers=cfg.workers) as ex:
            futures = [ex.submit(process_page, raw, i + 1, cfg) for i, raw in enumerate(pages)]
            return [f.result() for f in futures]
    return [process_page(raw, i + 1, cfg) for i, raw in enumerate(pages)]


def _extract(data: bytes, cfg: ConvertConfig, decoder: DocumentDecoder) -> _Extracted:
    decoded: DecodedDocument = decoder.decode(data)
    results = reconstruct_pages(decoded.pages, cfg)
    text = PAGE_SEPARATOR.join(r.text for r in results)
    items = [it for r in results for it in r.items]
    metadata = DocumentMetadata(
        language=detect_language(text),
        title=decoded.title,
        author=decoded.author,
    )
    return _Extracted(text, len(decoded.pages), metadata, items)


def _failure_for(exc: Exception) -> ParseFailure:
    if isinstance(exc, EncryptedDocumentError):
        return ParseFailure(error=make_error(ErrorKind.ENCRYPTED))
    msg = str(exc).lower()
    if any(h in msg for h in _ENCRYPTION_HINTS):
        return ParseFailure(error=make_error(ErrorKind.ENCRYPTED))
    logger.exception("document parsing failed")
    return ParseFailure(error=make_error(ErrorKind.DECODE_FAILED))


def _run(data: bytes, cfg: Optional[ConvertConfig], decoder: Optional[DocumentDecoder]):
    cfg = cfg or ConvertConfig()
    decoder = decoder or PyMuPDFDecoder()
    try:
        extracted = _extract(data, cfg, decoder)
    except Exception as e:
        return None, _failure_for(e)

    if not extracted.text.strip():
        logger.info("no text content in %d page(s)", extracted.page_count)
        return None, ParseFailure(error=make_error(ErrorKind.NO_TEXT_CONTENT))

    sections = SectionSegmenter(cfg).segment(extracted.text, extracted.page_count)
    logger.debug("segmented %d section(s)", len(sections))
    return (extracted, sections), None


def parse_document(
    data: bytes,
    cfg: Optional[ConvertConfig] = None,
    decoder: Optional[DocumentDecoder] = None,
) -> ParseResult:
    """Decode, rebuild reading order and split into sections. Never raises."""
    ok, failure = _run(data, cfg, decoder)
    if failure is not None:
        return failure
    extracted, sections = ok
    return ParseSuccess(
        text=extracted.text,
        page_count=extracted.page_count,
        sections=sections,
        metadata=extracted.metadata,
    )


def parse_document_with_markup(
    data: bytes,
    options: OptionsLike = None,
    cfg: Optional[ConvertConfig] = None,
    decoder: Optional[DocumentDecoder] = None,
) -> MarkupParseResult:
    """parse_document plus a markdown rendering of every section."""
    ok, failure = _run(data, cfg, decoder)
    if failure is not None:
        return failure
    extracted, sections = ok
    markup, markup_sections = convert_sections_to_markdown(sections, options, cfg)
    return MarkupParseSuccess(
        text=extracted.text,
        page_count=extracted.page_count,
        sections=sections,
        metadata=extracted.metadata,
        markup=markup,
        markup_sections=markup_sections,
        items=extracted.items,
    )
