"""Base64 and URL component encoding of text."""

from __future__ import annotations

import base64
import binascii
import re
from urllib.parse import quote, unquote_to_bytes

from .digest import encode_text
from .errors import ErrorCategory, ErrorRecord
from .structures import CodecResult

# Characters left untouched by URI component encoding besides ASCII
# alphanumerics and ``-_.~``.
URL_COMPONENT_SAFE = "!*'()"
MALFORMED_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")
ASCII_WHITESPACE_PATTERN = re.compile(r"[\t\n\f\r ]+")


def _failure(message: str, details: str | None = None) -> CodecResult:
    return CodecResult(
        error=ErrorRecord(category=ErrorCategory.CODEC, message=message, details=details)
    )


def encode_base64(text: str) -> CodecResult:
    """Base64-encode the UTF-8 bytes of ``text``."""

    return CodecResult(value=base64.b64encode(encode_text(text)).decode("ascii"))


def decode_base64(text: str) -> CodecResult:
    """Decode Base64 into UTF-8 text.

    ASCII whitespace is ignored and missing ``=`` padding is tolerated.
    """

    compact = ASCII_WHITESPACE_PATTERN.sub("", text)
    if len(compact) % 4 == 1:
        return _failure("Invalid Base64 string.", "length is not a valid Base64 size")
    compact += "=" * (-len(compact) % 4)
    try:
        raw = base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        return _failure("Invalid Base64 string.", str(exc))
    try:
        return CodecResult(value=raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        return _failure("Decoded Base64 is not valid UTF-8 text.", str(exc))


def encode_url_component(text: str) -> CodecResult:
    """Percent-encode text for use as a single URL component."""

    return CodecResult(value=quote(encode_text(text), safe=URL_COMPONENT_SAFE))


def decode_url_component(text: str) -> CodecResult:
    """Reverse :func:`encode_url_component`, rejecting malformed escapes."""

    if MALFORMED_ESCAPE_PATTERN.search(text):
        return _failure("Invalid encoded string.", "malformed percent escape")
    try:
        return CodecResult(value=unquote_to_bytes(text).decode("utf-8"))
    except UnicodeDecodeError as exc:
        return _failure("Invalid encoded string.", str(exc))
