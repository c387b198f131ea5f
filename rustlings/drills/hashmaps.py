"""Fruit baskets and a football scores table built with dictionaries."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8_MAX = 255
_UNSIGNED_DIGITS = re.compile(r"\+?[0-9]+")
_DEFAULT_NEW_FRUIT_COUNT = 6


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 5
    basket["orange"] = 5
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every kind of fruit that is missing, leaving present kinds untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, _DEFAULT_NEW_FRUIT_COUNT)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int
    goals_conceded: int

    def add(self, scored: int, conceded: int) -> None:
        self.goals_scored = _checked_goals(self.goals_scored + scored)
        self.goals_conceded = _checked_goals(self.goals_conceded + conceded)


def _checked_goals(total: int) -> int:
    if total > _U8_MAX:
        raise OverflowError("goal count does not fit in 0..=255")
    return total


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        for name, scored, conceded in (
            (team_1_name, team_1_score, team_2_score),
            (team_2_name, team_2_score, team_1_score),
        ):
            team = scores.get(name)
            if team is None:
                scores[name] = Team(goals_scored=scored, goals_conceded=conceded)
            else:
                team.add(scored, conceded)
    return scores