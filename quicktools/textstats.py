"""Word, character, sentence and paragraph counts for a piece of text."""

from __future__ import annotations

import math

from .segmenter import WHITESPACE_PATTERN, split_paragraphs, split_sentences, split_words
from .structures import TextStatistics

DEFAULT_WORDS_PER_MINUTE = 200


def reading_time_minutes(words: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Whole minutes needed to read ``words`` at the given speed."""

    if words_per_minute <= 0:
        words_per_minute = DEFAULT_WORDS_PER_MINUTE
    return max(0, math.ceil(words / words_per_minute))


def compute_text_statistics(
    text: str,
    *,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> TextStatistics:
    """Compute a fresh statistics record for ``text``."""

    words = len(split_words(text))
    return TextStatistics(
        words=words,
        characters=len(text),
        characters_no_spaces=len(WHITESPACE_PATTERN.sub("", text)),
        sentences=len(split_sentences(text)),
        paragraphs=len(split_paragraphs(text)),
        reading_time_minutes=reading_time_minutes(words, words_per_minute),
    )


def format_statistics(stats: TextStatistics) -> str:
    """Render statistics as the plain-text summary offered for copying."""

    return "\n".join(
        [
            f"Words: {stats.words}",
            f"Characters: {stats.characters}",
            f"Characters (no spaces): {stats.characters_no_spaces}",
            f"Sentences: {stats.sentences}",
            f"Paragraphs: {stats.paragraphs}",
            f"Reading time: ~{stats.reading_time_minutes} min",
        ]
    )
