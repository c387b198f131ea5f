"""Generic wrappers, cons lists and clone-on-write sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    head: int
    tail: ConsList


ConsList = Union[Cons, Nil]


def create_empty_list() -> ConsList:
    return Nil()


def create_non_empty_list() -> ConsList:
    return Cons(0, Nil())


class Cow:
    """A sequence that is borrowed until it first needs to be changed."""

    __slots__ = ("_data", "_owned")

    def __init__(self, data: Sequence[int], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        """Wrap data without copying; it is copied on first mutation."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: MutableSequence[int]) -> Cow:
        """Take the data as owned; mutations change it in place."""
        return cls(data, owned=True)

    @property
    def data(self) -> Sequence[int]:
        return self._data

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def is_borrowed(self) -> bool:
        return not self._owned

    def to_mut(self) -> MutableSequence[int]:
        """Return mutable data, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if needed."""
    for index, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow