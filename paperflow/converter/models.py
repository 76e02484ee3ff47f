from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RawGlyph(BaseModel):
    """One text run as handed over by the decoding backend."""
    text: str
    transform: tuple[float, float, float, float, float, float]
    width: float
    height: float
    font_name: str = ""
    ends_line: bool = False


class RawPage(BaseModel):
    width: float
    glyphs: list[RawGlyph] = Field(default_factory=list)
    font_families: dict[str, str] = Field(default_factory=dict)


class DecodedDocument(BaseModel):
    pages: list[RawPage] = Field(default_factory=list)
    title: Optional[str] = None
    author: Optional[str] = None


class NormalizedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    x: float
    y: float  # page coordinates, y grows upward
    width: float
    height: float
    font_name: str = ""
    font_family: str = ""
    is_bold: bool = False
    is_italic: bool = False
    ends_line: bool = False
    page: int = 1

    @property
    def right(self) -> float:
        return self.x + self.width


class ColumnBucket(BaseModel):
    model_config = ConfigDict(frozen=True)

    layout: str  # "single" | "two"
    left: tuple[NormalizedItem, ...] = ()
    right: tuple[NormalizedItem, ...] = ()
    span: tuple[NormalizedItem, ...] = ()

    @property
    def is_two_column(self) -> bool:
        return self.layout == "two"


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    level: int = Field(ge=1, le=3)
    order_index: int
    content: str
    page_start: int
    page_end: int


class SegmentKind(str, Enum):
    TEXT = "text"
    MATH_INLINE = "math-inline"
    MATH_BLOCK = "math-block"


class ContentSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    content: str


class MarkupOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    preserve_math: bool = True
    detect_headers: bool = True
    detect_emphasis: bool = True
    include_page_numbers: bool = False


class MarkupSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    level: int
    markup: str
    page_start: int
    page_end: int


class DocumentMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str = "en"
    title: Optional[str] = None
    author: Optional[str] = None
