"""Optional values, nametags, token costs and positive integers with errors."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width the way the strict parser does."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED_DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None past 23."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 23:
        return 0
    return None


def generate_nametag_text(name: str) -> str:
    """Text for a nametag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity of items, including the fee."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationErrorKind(enum.Enum):
    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value could not become a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind is self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text was not an integer, or the integer was not positive."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def creation(self) -> CreationError | None:
        """The creation error, if the text parsed but was not positive."""
        return self.cause if isinstance(self.cause, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        """The parse error, if the text was not an integer."""
        return None if isinstance(self.cause, CreationError) else self.cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc