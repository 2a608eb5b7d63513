"""Text segmentation into words, sentences and paragraphs."""

from __future__ import annotations

import re
from typing import List

# Whitespace as browsers define it for ``\s`` and ``trim()``. Unlike
# ``str.isspace`` this excludes the U+001C-U+001F separators and U+0085
# and includes U+FEFF.
WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

WHITESPACE_CLASS = "[" + re.escape(WHITESPACE_CHARS) + "]"
WHITESPACE_PATTERN = re.compile(WHITESPACE_CLASS + "+")
SENTENCE_PATTERN = re.compile(r"[^.!?\n]+[.!?]+")
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n" + WHITESPACE_CLASS + r"*\n")


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""

    return text.strip(WHITESPACE_CHARS)


def split_words(text: str) -> List[str]:
    """Split text on whitespace runs, dropping empty tokens."""

    trimmed = trim(text)
    if not trimmed:
        return []
    return [token for token in WHITESPACE_PATTERN.split(trimmed) if token]


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space and trim the result."""

    return trim(WHITESPACE_PATTERN.sub(" ", text))


def split_sentences(text: str) -> List[str]:
    """Split text into terminator-delimited sentences.

    Sentences are maximal runs of non-terminator characters followed by one
    or more of ``.``, ``!`` or ``?``. Non-empty text without any terminated
    sentence counts as a single sentence; trailing text after the last
    terminator is not counted separately.
    """

    collapsed = collapse_whitespace(text)
    if not collapsed:
        return []
    sentences = [match.strip() for match in SENTENCE_PATTERN.findall(collapsed)]
    if not sentences:
        # Unterminated text still reads as one sentence.
        return [collapsed]
    return sentences


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines and drop empty paragraphs."""

    trimmed = trim(text)
    if not trimmed:
        return []
    paragraphs: List[str] = []
    for candidate in PARAGRAPH_BREAK_PATTERN.split(trimmed):
        candidate = trim(candidate)
        if candidate:
            paragraphs.append(candidate)
    return paragraphs
