"""Error definitions for the QuickTools engine and its front ends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ErrorCategory(Enum):
    """Categorises failures that are reported in-band rather than raised."""

    UNSUPPORTED_ALGORITHM = auto()
    DIGEST = auto()
    CODEC = auto()
    OTHER = auto()


class QuickToolsError(Exception):
    """Base exception for all custom errors."""


class UnsupportedVariantError(QuickToolsError, ValueError):
    """Raised when a case conversion is requested for an unknown variant."""


class UnsupportedUnitError(QuickToolsError, ValueError):
    """Raised when filler text is requested in an unknown unit."""


class UnknownToolError(QuickToolsError, LookupError):
    """Raised when a tool identifier is not present in the catalog."""


class DigestBackendConfigurationError(QuickToolsError):
    """Raised when the digest backend is misconfigured."""


class ConfigurationError(QuickToolsError):
    """Raised when settings cannot be loaded or fail validation."""


@dataclass(frozen=True)
class ErrorRecord:
    """In-band error marker stored in place of a result value."""

    category: ErrorCategory
    message: str
    details: Optional[str] = None

    def __str__(self) -> str:
        return self.message
