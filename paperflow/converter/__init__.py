from .config import ConvertConfig
from .models import MarkupOptions, Section, MarkupSection, NormalizedItem, ContentSegment
from .errors import ErrorKind, ParseError, ParseFailure, ParseSuccess, MarkupParseSuccess
from .pipeline import parse_document, parse_document_with_markup

__all__ = [
    "ConvertConfig",
    "MarkupOptions",
    "Section",
    "MarkupSection",
    "NormalizedItem",
    "ContentSegment",
    "ErrorKind",
    "ParseError",
    "ParseFailure",
    "ParseSuccess",
    "MarkupParseSuccess",
    "parse_document",
    "parse_document_with_markup",
]
