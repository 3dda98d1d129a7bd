"""Hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

_GOAL_LIMIT = 255


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 1, "mango": 2}


class Fruit(Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every fruit kind missing from the basket, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's name with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match to the totals."""
        self.goals_scored = _checked_total(self.goals_scored + scored)
        self.goals_conceded = _checked_total(self.goals_conceded + conceded)


def _parse_goals(text: str) -> int:
    if not text.isdigit() or not text.isascii():
        raise ValueError(f"invalid goal count {text!r}")
    goals = int(text)
    if goals > _GOAL_LIMIT:
        raise ValueError(f"goal count {goals} is too large")
    return goals


def _checked_total(total: int) -> int:
    if total > _GOAL_LIMIT:
        raise OverflowError(f"goal total {total} is too large")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table keyed by team name from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        scores.setdefault(team_1_name, Team(team_1_name)).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team(team_2_name)).record(team_2_score, team_1_score)
    return scores