from __future__ import annotations

import pytest

from quicktools.structures import TextStatistics
from quicktools.textstats import compute_text_statistics, format_statistics, reading_time_minutes


def test_empty_text() -> None:
    assert compute_text_statistics("") == TextStatistics(
        words=0,
        characters=0,
        characters_no_spaces=0,
        sentences=0,
        paragraphs=0,
        reading_time_minutes=0,
    )


def test_short_text() -> None:
    stats = compute_text_statistics("Hello world. Bye!")
    assert stats.words == 3
    assert stats.sentences == 2
    assert stats.paragraphs == 1
    assert stats.characters == 17
    assert stats.characters_no_spaces == 15
    assert stats.reading_time_minutes == 1


def test_whitespace_only_text_counts_characters_only() -> None:
    stats = compute_text_statistics("   \n\t ")
    assert stats == TextStatistics(characters=6)


def test_unterminated_text_is_one_sentence() -> None:
    assert compute_text_statistics("no terminator here").sentences == 1


def test_paragraphs_and_trailing_fragment() -> None:
    stats = compute_text_statistics("First para.\n\nSecond para.\n   \nThird")
    assert stats.paragraphs == 3
    assert stats.sentences == 2
    assert stats.words == 5


@pytest.mark.parametrize(
    ("words", "minutes"),
    [(0, 0), (1, 1), (200, 1), (201, 2), (1000, 5)],
)
def test_reading_time_rounds_up(words: int, minutes: int) -> None:
    assert compute_text_statistics(" ".join(["word"] * words)).reading_time_minutes == minutes


def test_custom_reading_speed() -> None:
    text = " ".join(["word"] * 150)
    assert compute_text_statistics(text, words_per_minute=100).reading_time_minutes == 2


def test_non_positive_reading_speed_falls_back_to_default() -> None:
    assert reading_time_minutes(150, 0) == 1
    assert reading_time_minutes(150, -3) == 1


def test_each_call_returns_a_new_record() -> None:
    first = compute_text_statistics("one two")
    second = compute_text_statistics("one two")
    assert first == second
    assert first is not second


def test_format_statistics() -> None:
    summary = format_statistics(compute_text_statistics("Hello world. Bye!"))
    assert summary.splitlines() == [
        "Words: 3",
        "Characters: 17",
        "Characters (no spaces): 15",
        "Sentences: 2",
        "Paragraphs: 1",
        "Reading time: ~1 min",
    ]


def test_information_separator_is_not_whitespace() -> None:
    stats = compute_text_statistics("a\x1cb")
    assert stats.words == 1
    assert stats.characters_no_spaces == 3


def test_unicode_spaces_are_not_counted_as_characters_without_spaces() -> None:
    assert compute_text_statistics("a\u00a0b\u3000c").characters_no_spaces == 3
