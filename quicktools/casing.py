"""Case conversion transforms."""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Union

from .errors import UnsupportedVariantError
from .segmenter import WHITESPACE_CLASS, split_words
from .structures import CaseVariant

WORD_START_PATTERN = re.compile(r"\b\w", re.ASCII)
SENTENCE_START_PATTERN = re.compile(
    r"(^" + WHITESPACE_CLASS + r"*[a-z])|([.!?]" + WHITESPACE_CLASS + r"*[a-z])"
)


def coerce_variant(variant: Union[CaseVariant, str]) -> CaseVariant:
    """Resolve a variant given either as an enum member or by name."""

    if isinstance(variant, CaseVariant):
        return variant
    try:
        return CaseVariant(str(variant).strip().lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in CaseVariant)
        raise UnsupportedVariantError(
            f"Unknown case variant '{variant}'. Choose one of: {choices}."
        ) from exc


def _upper_match(match: re.Match[str]) -> str:
    return match.group(0).upper()


def _capitalise(word: str) -> str:
    return word[:1].upper() + word[1:]


def _words(text: str) -> List[str]:
    """Lower-cased words that carry at least one alphanumeric character."""

    return [
        word
        for word in split_words(text.lower())
        if any(char.isalnum() for char in word)
    ]


def to_title_case(text: str) -> str:
    return WORD_START_PATTERN.sub(_upper_match, text.lower())


def to_sentence_case(text: str) -> str:
    return SENTENCE_START_PATTERN.sub(_upper_match, text.lower())


def to_camel_case(text: str) -> str:
    words = _words(text)
    return "".join(
        word if index == 0 else _capitalise(word) for index, word in enumerate(words)
    )


def to_pascal_case(text: str) -> str:
    return "".join(_capitalise(word) for word in _words(text))


def to_snake_case(text: str) -> str:
    return "_".join(_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(_words(text))


CONVERTERS: Dict[CaseVariant, Callable[[str], str]] = {
    CaseVariant.UPPER: str.upper,
    CaseVariant.LOWER: str.lower,
    CaseVariant.TITLE: to_title_case,
    CaseVariant.SENTENCE: to_sentence_case,
    CaseVariant.CAMEL: to_camel_case,
    CaseVariant.PASCAL: to_pascal_case,
    CaseVariant.SNAKE: to_snake_case,
    CaseVariant.KEBAB: to_kebab_case,
}


def convert_case(text: str, variant: Union[CaseVariant, str]) -> str:
    """Apply exactly one casing transform to ``text``."""

    return CONVERTERS[coerce_variant(variant)](text)
