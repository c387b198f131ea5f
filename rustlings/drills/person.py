"""People parsed from "name,age" text, leniently or strictly."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer the way the strict integer parser does."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)


class PersonErrorKind(enum.Enum):
    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_NAME = "no_name"
    PARSE_INT = "parse_int"


class ParsePersonError(ValueError):
    """Text could not be parsed into a Person."""

    def __init__(self, kind: PersonErrorKind, detail: str | None = None) -> None:
        super().__init__(detail or kind.value)
        self.kind = kind


def person_from_text(text: str) -> Person:
    """Parse "name,age", falling back to the default person on any problem."""
    if "," not in text:
        return Person.default()
    parts = text.split(",")
    name = parts[0].strip()
    try:
        age = _parse_usize(parts[1].strip())
    except ValueError:
        return Person.default()
    if not name:
        return Person.default()
    return Person(name=name, age=age)


def parse_person(text: str) -> Person:
    """Parse exactly "name,age"; raise ParsePersonError otherwise."""
    if not text:
        raise ParsePersonError(PersonErrorKind.EMPTY)
    parts = text.split(",")
    if len(parts) != 2:
        raise ParsePersonError(PersonErrorKind.BAD_LEN)
    name = parts[0].strip()
    if not name:
        raise ParsePersonError(PersonErrorKind.NO_NAME)
    try:
        age = _parse_usize(parts[1].strip())
    except ValueError as exc:
        raise ParsePersonError(PersonErrorKind.PARSE_INT, str(exc)) from exc
    return Person(name=name, age=age)