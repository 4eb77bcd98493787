"""Locale-free, platform-independent rounding.

Values are rounded on their shortest decimal text (``repr``), so ``2.675``
rounds to ``2.68`` exactly as a person reading the number would expect, rather
than to ``2.67`` as binary floating point would with ``round()``.
"""
from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]

MIN_PRECISION = 28


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


def _rounding_context(value: Decimal, places: int) -> Context:
    # Enough digits for every integer digit of value plus the kept places
    digits = max(value.adjusted(), 0) + 1 + max(places, 0) + 1
    return Context(prec=max(MIN_PRECISION, digits), rounding=ROUND_HALF_UP)


def round_half_away(value: Number, places: int) -> Decimal:
    """Round half away from zero to ``places`` decimal places.

    Runs in its own context sized to ``value``, so neither the thread's decimal
    context nor a large magnitude can make it fail.
    """
    value = to_decimal(value)
    quantum = Decimal(1).scaleb(-places)
    # ROUND_HALF_UP in the decimal module rounds ties away from zero
    return value.quantize(quantum, rounding=ROUND_HALF_UP, context=_rounding_context(value, places))


def round_to_float(value: Number, places: int) -> float:
    return float(round_half_away(value, places))
