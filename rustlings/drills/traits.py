"""Appending "Bar" to strings and lists, and shared licensing information."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch

_BAR = "Bar"


@singledispatch
def append_bar(value: object) -> object:
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + _BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, _BAR]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    version_number: int


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()