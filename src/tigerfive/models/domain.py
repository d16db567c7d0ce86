"""Domain models for the Tiger Five tracker.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and pydantic and are used
throughout the application; the JSON shape of a round uses the
camelCase field names that the byte store and the remote mirror expect.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


# ============================================================================
# Mistake Categories
# ============================================================================

TIGER_FIVE_GOAL = 6

# Order is fixed: trend and frequency output follow it
TIGER_FIVE_FIELDS: tuple[str, ...] = (
    "doubleBogeyPlus",
    "bogeyOnPar5",
    "threePutts",
    "bogeyInside150",
    "missedEasySaves",
)

TRACKED_FIELDS: tuple[str, ...] = TIGER_FIVE_FIELDS + ("badDrives",)

CATEGORY_LABELS: dict[str, str] = {
    "doubleBogeyPlus": "Double Bogey+",
    "bogeyOnPar5": "Bogey on Par 5",
    "threePutts": "3-Putts",
    "bogeyInside150": "Bogey <150yds",
    "missedEasySaves": "Missed Easy Saves",
    "badDrives": "Bad Drives",
}


# ============================================================================
# Round Domain
# ============================================================================


@dataclass(frozen=True)
class RoundEntity:
    """Domain model for one played round.

    ``tigerFive`` is a stored value. Build new rounds with ``create`` so the
    score is frozen from the mistake counts at creation time; rounds
    rehydrated from storage keep whatever score they were saved with.
    """

    id: int
    date: str
    course: str
    totalScore: int
    tigerFive: int
    doubleBogeyPlus: int = 0
    bogeyOnPar5: int = 0
    threePutts: int = 0
    bogeyInside150: int = 0
    missedEasySaves: int = 0
    badDrives: int = 0

    @classmethod
    def create(
        cls,
        *,
        id: int,
        date: str,
        course: str,
        totalScore: int,
        doubleBogeyPlus: int = 0,
        bogeyOnPar5: int = 0,
        threePutts: int = 0,
        bogeyInside150: int = 0,
        missedEasySaves: int = 0,
        badDrives: int = 0,
    ) -> RoundEntity:
        """Create a new round, freezing its Tiger Five total."""
        tiger_five = (
            doubleBogeyPlus + bogeyOnPar5 + threePutts + bogeyInside150 + missedEasySaves
        )
        return cls(
            id=id,
            date=date,
            course=course,
            totalScore=totalScore,
            tigerFive=tiger_five,
            doubleBogeyPlus=doubleBogeyPlus,
            bogeyOnPar5=bogeyOnPar5,
            threePutts=threePutts,
            bogeyInside150=bogeyInside150,
            missedEasySaves=missedEasySaves,
            badDrives=badDrives,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON object shape."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RoundEntity:
        """Rehydrate a stored round.

        Raises:
            KeyError: If a required field is missing.
            TypeError, ValueError: If a field cannot be coerced.
        """
        counts = {name: int(data.get(name) or 0) for name in TRACKED_FIELDS}
        return cls(
            id=int(data["id"]),
            date=str(data["date"]),
            course=str(data["course"]),
            totalScore=int(data["totalScore"]),
            tigerFive=int(data["tigerFive"]),
            **counts,
        )


# ============================================================================
# Remote Mirror Domain
# ============================================================================


@dataclass
class OperationLogEntry:
    """One remote mirror call as recorded in the operation log."""

    id: int
    timestamp: str
    method: str
    endpoint: str
    data: Any
    response: Any
