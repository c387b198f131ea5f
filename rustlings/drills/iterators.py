"""Capitalising words, exact division, factorials and progress counting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that does not give a whole number."""

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.args == self.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class DivideByZeroError(DivisionError):
    def __init__(self) -> None:
        super().__init__()

    def __repr__(self) -> str:
        return "DivideByZero"


class NotDivisibleError(DivisionError):
    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(dividend, divisor)
        self.dividend = dividend
        self.divisor = divisor

    def __repr__(self) -> str:
        return f"NotDivisible(dividend={self.dividend}, divisor={self.divisor})"


def divide(a: int, b: int) -> int:
    """Divide a by b when b divides it evenly; raise DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def result_with_list() -> list[int]:
    """All quotients, raising at the first division that fails."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Each quotient, or the error its division gave."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """The factorial of a non-negative integer that fits in 64 bits."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative integers only")
    result = math.prod(range(1, num + 1)) if num > 1 else 1
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in an unsigned 64-bit integer")
    return result


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    return sum(count_iterator(progress_map, value) for progress_map in collection)