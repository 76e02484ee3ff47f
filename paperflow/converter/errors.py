from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import DocumentMetadata, MarkupSection, NormalizedItem, Section


class DocumentError(Exception):
    """Raised by the decoding backend; never escapes parse_document*."""


class EncryptedDocumentError(DocumentError):
    pass


class DecodeError(DocumentError):
    pass


class ErrorKind(str, Enum):
    ENCRYPTED = "PDF_ENCRYPTED"
    NO_TEXT_CONTENT = "NO_TEXT_CONTENT"
    DECODE_FAILED = "PARSING_FAILED"


class ParseError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    recovery_action: str

    @property
    def code(self) -> str:
        return self.kind.value


_ERROR_TEXT = {
    ErrorKind.ENCRYPTED: (
        "Encrypted documents are not supported.",
        "Provide a decrypted document.",
    ),
    ErrorKind.NO_TEXT_CONTENT: (
        "No text could be extracted from the document.",
        "It may be a scanned image; re-submit a text-bearing document.",
    ),
    ErrorKind.DECODE_FAILED: (
        "Failed to decode the document.",
        "Retry the submission.",
    ),
}


def make_error(kind: ErrorKind) -> ParseError:
    message, recovery = _ERROR_TEXT[kind]
    return ParseError(kind=kind, message=message, recovery_action=recovery)


class ParseFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    error: ParseError


class ParseSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    text: str
    page_count: int
    sections: list[Section]
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)


class MarkupParseSuccess(ParseSuccess):
    markup: str
    markup_sections: list[MarkupSection]
    items: list[NormalizedItem] = Field(default_factory=list)


ParseResult = Union[ParseSuccess, ParseFailure]
MarkupParseResult = Union[MarkupParseSuccess, ParseFailure]
