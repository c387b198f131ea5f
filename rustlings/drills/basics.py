"""Small functions on numbers, conditions, lists and strings."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})
_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    return _HABITATS.get(animal, "Unknown")


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def is_a_color_word(attempt: str) -> bool:
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")