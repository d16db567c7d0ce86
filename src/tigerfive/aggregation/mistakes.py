"""Tiger Five mistake aggregation.

Pure functions over a list of rounds ordered most recent first. None of
them raise for an empty or short history; "no data" is returned as None
or an empty list and callers choose how to render it.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from tigerfive.models.domain import (
    CATEGORY_LABELS,
    TIGER_FIVE_FIELDS,
    TIGER_FIVE_GOAL,
    TRACKED_FIELDS,
    RoundEntity,
)
from tigerfive.models.types import ChartPoint

DEFAULT_RECENT_COUNT = 5
DEFAULT_TREND_WINDOW = 5
DEFAULT_CHART_LIMIT = 20
DEFAULT_TABLE_LIMIT = 10


def _field(fields: Any, name: str) -> int:
    if isinstance(fields, Mapping):
        value = fields.get(name, 0)
    else:
        value = getattr(fields, name, 0)
    return int(value or 0)


def composite_score(fields: Any) -> int:
    """Sum of the five Tiger Five counts.

    Works on a stored round, an in-progress form state, or a plain mapping,
    so the entry form can preview the total before anything is saved.
    Missing fields count as zero.
    """
    return sum(_field(fields, name) for name in TIGER_FIVE_FIELDS)


def is_within_goal(score: int, goal: int = TIGER_FIVE_GOAL) -> bool:
    return score <= goal


def recent_average(
    rounds: Sequence[RoundEntity], n: int = DEFAULT_RECENT_COUNT
) -> float | None:
    """Mean Tiger Five over the n most recent rounds (or all, if fewer).

    Returns:
        The mean, or None when there are no rounds.
    """
    recent = rounds[:n]
    if not recent:
        return None
    return sum(r.tigerFive for r in recent) / len(recent)


def last_round_score(rounds: Sequence[RoundEntity]) -> int | None:
    return rounds[0].tigerFive if rounds else None


def below_goal_count(
    rounds: Sequence[RoundEntity], goal: int = TIGER_FIVE_GOAL
) -> tuple[int, int]:
    """Count rounds at or below goal.

    Returns:
        Tuple of (count, total rounds).
    """
    count = sum(1 for r in rounds if r.tigerFive <= goal)
    return count, len(rounds)


def _mean(rounds: Sequence[RoundEntity], category: str) -> float:
    return sum(getattr(r, category) for r in rounds) / len(rounds)


def trend(
    rounds: Sequence[RoundEntity], window_size: int = DEFAULT_TREND_WINDOW
) -> dict[str, float] | None:
    """Percent change per Tiger Five category, recent window vs previous.

    The recent window is rounds[:window_size]; the previous window is
    rounds[window_size:2 * window_size], averaged over however many rounds
    it actually holds.

    Returns:
        Mapping of category -> percent change rounded to one decimal,
        omitting categories with no previous baseline (mean of zero).
        None when there are fewer than 2 rounds or no previous window.
    """
    if len(rounds) < 2 or window_size < 1:
        return None

    recent = rounds[:window_size]
    previous = rounds[window_size : window_size * 2]
    if not previous:
        return None

    trends: dict[str, float] = {}
    for category in TIGER_FIVE_FIELDS:
        previous_mean = _mean(previous, category)
        if previous_mean == 0:
            continue
        recent_mean = _mean(recent, category)
        trends[category] = round((recent_mean - previous_mean) / previous_mean * 100, 1)

    return trends


def mistake_frequency(rounds: Sequence[RoundEntity]) -> list[tuple[str, int]]:
    """Total of each tracked category across all rounds, in fixed order."""
    if not rounds:
        return []
    return [
        (CATEGORY_LABELS[name], sum(getattr(r, name) for r in rounds))
        for name in TRACKED_FIELDS
    ]


def chart_series(
    rounds: Sequence[RoundEntity], limit: int = DEFAULT_CHART_LIMIT
) -> list[ChartPoint]:
    """Most recent rounds, oldest first, labelled R1..Rn for plotting."""
    chronological = list(reversed(rounds[:limit]))
    return [
        ChartPoint(
            round=f"R{index}",
            date=r.date,
            tigerFive=r.tigerFive,
            doubleBogeyPlus=r.doubleBogeyPlus,
            bogeyOnPar5=r.bogeyOnPar5,
            threePutts=r.threePutts,
            bogeyInside150=r.bogeyInside150,
            missedEasySaves=r.missedEasySaves,
            badDrives=r.badDrives,
        )
        for index, r in enumerate(chronological, start=1)
    ]


def recent_rounds(
    rounds: Sequence[RoundEntity], limit: int = DEFAULT_TABLE_LIMIT
) -> list[RoundEntity]:
    """History table rows, most recent first."""
    return list(rounds[:limit])
