"""Apple pricing, a string transforming machine and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

G = TypeVar("G")

_BULK_THRESHOLD = 40


def calculate_price_of_apples(number: int) -> int:
    """Two per apple, or one per apple when buying more than forty."""
    if number <= _BULK_THRESHOLD:
        return number * 2
    return number


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the whole string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" a number of times."""

    times: int


Command = Union[Uppercase, Trim, Append]


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(times=times):
            return text + "bar" * max(times, 0)
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, keeping the input order."""
    return [_apply(text, command) for text, command in items]


@dataclass(frozen=True)
class ReportCard(Generic[G]):
    """A student's report card with a grade of any printable kind."""

    grade: G
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"