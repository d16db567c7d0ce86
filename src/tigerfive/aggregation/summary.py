"""Analytics dashboard aggregation.

Assembles the dashboard payload from the pure mistake functions.
Domain logic is pure - the record list is passed in by the caller.
"""

from __future__ import annotations

from typing import Sequence

from tigerfive.aggregation import mistakes
from tigerfive.models.domain import CATEGORY_LABELS, TIGER_FIVE_FIELDS, TIGER_FIVE_GOAL, RoundEntity
from tigerfive.models.types import (
    AnalyticsSummary,
    GoalTally,
    MistakeFrequencyItem,
    RoundDetail,
    TrendSummary,
)


def round_to_detail(round: RoundEntity) -> RoundDetail:
    """Convert domain round to API model."""
    return RoundDetail(**round.to_dict())


def summarize_trends(
    rounds: Sequence[RoundEntity],
    window_size: int = mistakes.DEFAULT_TREND_WINDOW,
) -> TrendSummary:
    """Trend analysis with display labels for the Tiger Five categories."""
    return TrendSummary(
        window_size=window_size,
        trends=mistakes.trend(rounds, window_size),
        labels={name: CATEGORY_LABELS[name] for name in TIGER_FIVE_FIELDS},
    )


def frequency_items(rounds: Sequence[RoundEntity]) -> list[MistakeFrequencyItem]:
    return [
        MistakeFrequencyItem(name=name, count=count)
        for name, count in mistakes.mistake_frequency(rounds)
    ]


def summarize_rounds(
    rounds: Sequence[RoundEntity],
    goal: int = TIGER_FIVE_GOAL,
) -> AnalyticsSummary:
    """Compute the full analytics dashboard for a round history.

    An empty history gives has_data=False with no averages, no trends and
    empty lists, which the UI renders as "no rounds logged yet".

    Args:
        rounds: Rounds ordered most recent first.
        goal: Tiger Five goal per round.

    Returns:
        AnalyticsSummary for the history.
    """
    count, total = mistakes.below_goal_count(rounds, goal)

    return AnalyticsSummary(
        has_data=bool(rounds),
        total_rounds=len(rounds),
        recent_average=mistakes.recent_average(rounds, mistakes.DEFAULT_RECENT_COUNT),
        last_round_tiger_five=mistakes.last_round_score(rounds),
        below_goal=GoalTally(goal=goal, count=count, total=total),
        trends=mistakes.trend(rounds, mistakes.DEFAULT_TREND_WINDOW),
        mistake_frequency=frequency_items(rounds),
        chart=mistakes.chart_series(rounds, mistakes.DEFAULT_CHART_LIMIT),
        recent_rounds=[
            round_to_detail(r)
            for r in mistakes.recent_rounds(rounds, mistakes.DEFAULT_TABLE_LIMIT)
        ],
    )
