"""Deterministic lorem ipsum filler text."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal, InvalidOperation
from typing import Any, List, Union

from .errors import UnsupportedUnitError
from .structures import FillerUnit

VOCABULARY = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua"
).split()

MIN_AMOUNT = 1
MAX_AMOUNT = 100


def _is_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Rational):
        return True
    return math.isfinite(value)


def clamp_amount(amount: Any) -> int:
    """Clamp a requested amount into ``[MIN_AMOUNT, MAX_AMOUNT]``.

    Out-of-range values are pulled to the nearest bound rather than
    rejected, however large they are. Values that are not finite numbers
    (including ``None``, booleans and unparsable strings) count as
    ``MIN_AMOUNT``. Fractional amounts round up.
    """

    if isinstance(amount, bool) or amount is None:
        return MIN_AMOUNT
    if isinstance(amount, numbers.Integral):
        return max(MIN_AMOUNT, min(MAX_AMOUNT, int(amount)))
    if isinstance(amount, str):
        try:
            amount = Decimal(amount.strip())
        except InvalidOperation:
            return MIN_AMOUNT
    if not isinstance(amount, (numbers.Real, Decimal)):
        try:
            amount = float(amount)
        except (TypeError, ValueError, OverflowError):
            return MIN_AMOUNT
    if not _is_finite(amount):
        return MIN_AMOUNT
    if amount <= MIN_AMOUNT:
        return MIN_AMOUNT
    if amount >= MAX_AMOUNT:
        return MAX_AMOUNT
    return int(math.ceil(amount))


def coerce_unit(unit: Union[FillerUnit, str]) -> FillerUnit:
    if isinstance(unit, FillerUnit):
        return unit
    try:
        return FillerUnit(str(unit).strip().lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in FillerUnit)
        raise UnsupportedUnitError(
            f"Unknown filler unit '{unit}'. Choose one of: {choices}."
        ) from exc


def make_words(count: int) -> str:
    """Return ``count`` vocabulary words, cycling from the first."""

    return " ".join(VOCABULARY[index % len(VOCABULARY)] for index in range(count))


def make_sentences(count: int) -> str:
    sentences: List[str] = []
    for index in range(count):
        sentence = make_words(10 + index % 8)
        sentences.append(sentence[:1].upper() + sentence[1:] + ".")
    return " ".join(sentences)


def make_paragraphs(count: int) -> str:
    return "\n\n".join(make_sentences(4 + index % 3) for index in range(count))


def generate_filler_text(unit: Union[FillerUnit, str], amount: Any) -> str:
    """Generate ``amount`` words, sentences or paragraphs of filler text."""

    resolved = coerce_unit(unit)
    count = clamp_amount(amount)
    if resolved is FillerUnit.WORDS:
        return make_words(count)
    if resolved is FillerUnit.SENTENCES:
        return make_sentences(count)
    return make_paragraphs(count)
