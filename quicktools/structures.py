"""Core data structures for the QuickTools engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import ErrorRecord


class CaseVariant(str, Enum):
    """Casing transforms supported by the case converter."""

    UPPER = "upper"
    LOWER = "lower"
    TITLE = "title"
    SENTENCE = "sentence"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"


class FillerUnit(str, Enum):
    """Granularity of generated filler text."""

    WORDS = "words"
    SENTENCES = "sentences"
    PARAGRAPHS = "paragraphs"


class DigestAlgorithm(str, Enum):
    """Digest algorithms offered by the digest engine."""

    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"

    @property
    def bits(self) -> int:
        return _DIGEST_BITS[self.value]

    @property
    def hex_length(self) -> int:
        return self.bits // 4

    @property
    def hashlib_name(self) -> str:
        return self.value.replace("-", "").lower()


_DIGEST_BITS = {
    "SHA-1": 160,
    "SHA-256": 256,
    "SHA-384": 384,
    "SHA-512": 512,
}


@dataclass(frozen=True)
class TextStatistics:
    """Counts derived from a single piece of text."""

    words: int = 0
    characters: int = 0
    characters_no_spaces: int = 0
    sentences: int = 0
    paragraphs: int = 0
    reading_time_minutes: int = 0


@dataclass(frozen=True)
class DiffRow:
    """One positional line comparison."""

    line: int
    left: str
    right: str
    state: str


@dataclass
class DiffReport:
    """Rows and tallies produced by the text diff checker."""

    rows: List[DiffRow] = field(default_factory=list)
    changed: int = 0
    added: int = 0
    removed: int = 0

    @property
    def identical(self) -> bool:
        return not (self.changed or self.added or self.removed)


@dataclass(frozen=True)
class CodecResult:
    """Outcome of an encode/decode call, carrying either a value or an error."""

    value: Optional[str] = None
    error: Optional[ErrorRecord] = None

    @property
    def ok(self) -> bool:
        return self.error is None
