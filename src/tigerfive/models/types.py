"""Pydantic models for the Tiger Five API.

Field names of round payloads match the stored JSON shape (camelCase).
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class RoundSubmission(BaseModel):
    """Raw post-round entry as submitted by the form.

    ``totalScore`` stays optional so that presence is checked by the
    submission path rather than rejected as a schema error.
    """

    date: str | None = None
    course: str = ""
    totalScore: int | None = Field(default=None, ge=0)
    doubleBogeyPlus: int = Field(default=0, ge=0)
    bogeyOnPar5: int = Field(default=0, ge=0)
    threePutts: int = Field(default=0, ge=0)
    bogeyInside150: int = Field(default=0, ge=0)
    missedEasySaves: int = Field(default=0, ge=0)
    badDrives: int = Field(default=0, ge=0)


class RoundDetail(BaseModel):
    """Stored round for API response."""

    id: int
    date: str
    course: str
    totalScore: int
    doubleBogeyPlus: int
    bogeyOnPar5: int
    threePutts: int
    bogeyInside150: int
    missedEasySaves: int
    badDrives: int
    tigerFive: int


class RoundCreatedResponse(BaseModel):
    """Response for round submission."""

    round: RoundDetail
    persisted: bool
    warning: str | None
    message: str


class TigerFivePreview(BaseModel):
    """Live Tiger Five total for an unsaved entry."""

    tigerFive: int
    goal: int
    within_goal: bool


class MistakeFrequencyItem(BaseModel):
    """Total count for one tracked mistake category."""

    name: str
    count: int


class ChartPoint(BaseModel):
    """Per-round snapshot for chronological plotting."""

    round: str  # "R1", "R2", ...
    date: str
    tigerFive: int
    doubleBogeyPlus: int
    bogeyOnPar5: int
    threePutts: int
    bogeyInside150: int
    missedEasySaves: int
    badDrives: int


class GoalTally(BaseModel):
    """Rounds at or below the Tiger Five goal."""

    goal: int
    count: int
    total: int


class TrendSummary(BaseModel):
    """Percent change per category, recent window vs the one before it."""

    window_size: int
    trends: dict[str, float] | None  # category -> percent change
    labels: dict[str, str]


class AnalyticsSummary(BaseModel):
    """Full analytics dashboard payload."""

    has_data: bool
    total_rounds: int
    recent_average: float | None
    last_round_tiger_five: int | None
    below_goal: GoalTally
    trends: dict[str, float] | None
    mistake_frequency: list[MistakeFrequencyItem]
    chart: list[ChartPoint]
    recent_rounds: list[RoundDetail]


class MirrorOutcome(BaseModel):
    """Result of one remote mirror operation."""

    ok: bool
    operation: Literal["push", "fetch", "clear"]
    message: str
    response: Any = None
    error: str | None = None


class OperationLogItem(BaseModel):
    """Operation log entry for API response."""

    id: int
    timestamp: str
    method: str
    endpoint: str
    data: Any
    response: Any


class Preferences(BaseModel):
    """Display preferences."""

    dark_mode: bool
