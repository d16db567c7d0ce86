"""Post-round entry form.

A small state reducer over the raw form fields plus the submission path:
validate -> build round (freezing its Tiger Five) -> append locally ->
fire the remote mirror. Validation happens before anything is mutated.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import Future
from dataclasses import dataclass, field, fields, replace

from tigerfive.aggregation.mistakes import composite_score, is_within_goal
from tigerfive.core.errors import PersistenceWarning, RoundValidationError
from tigerfive.core.identity import next_round_id, today_iso
from tigerfive.mirror.client import RemoteMirror
from tigerfive.models.domain import TIGER_FIVE_GOAL, RoundEntity
from tigerfive.models.types import MirrorOutcome, RoundSubmission
from tigerfive.store.record_store import RecordStore

logger = logging.getLogger(__name__)

TEXT_FIELDS = frozenset({"date", "course"})

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class FormState:
    """Raw entry form fields. ``totalScore`` is None until typed."""

    date: str = field(default_factory=today_iso)
    course: str = ""
    totalScore: int | None = None
    doubleBogeyPlus: int = 0
    bogeyOnPar5: int = 0
    threePutts: int = 0
    bogeyInside150: int = 0
    missedEasySaves: int = 0
    badDrives: int = 0


@dataclass(frozen=True)
class FormPreview:
    """Live Tiger Five total shown while the form is filled in."""

    tiger_five: int
    goal: int
    within_goal: bool


@dataclass
class SubmissionResult:
    """Outcome of a successful submission."""

    round: RoundEntity
    persisted: bool
    warning: PersistenceWarning | None
    mirror: Future[MirrorOutcome]
    form: FormState


def parse_count(value: str | int | None) -> int:
    """Parse a numeric field the way the form input does.

    Leading integer digits are used ("12 putts" -> 12); anything else,
    including negatives, becomes 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(value, 0)
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


_FIELD_NAMES = frozenset(f.name for f in fields(FormState))


def apply_input(state: FormState, name: str, value: str | int | None) -> FormState:
    """Return a new form state with one field changed.

    Raises:
        KeyError: If name is not a form field.
    """
    if name not in _FIELD_NAMES:
        raise KeyError(name)
    if name in TEXT_FIELDS:
        return replace(state, **{name: "" if value is None else str(value)})
    return replace(state, **{name: parse_count(value)})


def reset_form() -> FormState:
    return FormState()


def preview(state: FormState, goal: int = TIGER_FIVE_GOAL) -> FormPreview:
    score = composite_score(state)
    return FormPreview(tiger_five=score, goal=goal, within_goal=is_within_goal(score, goal))


def validate(state: FormState) -> None:
    """Check required fields and the date format.

    Raises:
        RoundValidationError: If course or total score is missing (a blank
            course or a total score of 0 counts as missing), or if the date
            is not zero-padded YYYY-MM-DD.
    """
    missing = []
    if not state.course.strip():
        missing.append("course")
    if not state.totalScore:
        missing.append("totalScore")
    if missing:
        raise RoundValidationError("Please enter course name and total score", missing=missing)
    if not _ISO_DATE.fullmatch(state.date):
        raise RoundValidationError("Please enter the date as YYYY-MM-DD", invalid=["date"])


def form_from_submission(submission: RoundSubmission) -> FormState:
    """Build form state from an API submission."""
    state = FormState()
    for name, value in submission.model_dump().items():
        if name == "date" and not value:
            continue
        if name == "totalScore" and value is None:
            continue
        state = apply_input(state, name, value)
    return state


def build_round(state: FormState, round_id: int | None = None) -> RoundEntity:
    """Create the round for a validated form, freezing its Tiger Five."""
    return RoundEntity.create(
        id=round_id if round_id is not None else next_round_id(),
        date=state.date,
        course=state.course,
        totalScore=state.totalScore or 0,
        doubleBogeyPlus=state.doubleBogeyPlus,
        bogeyOnPar5=state.bogeyOnPar5,
        threePutts=state.threePutts,
        bogeyInside150=state.bogeyInside150,
        missedEasySaves=state.missedEasySaves,
        badDrives=state.badDrives,
    )


def submit_round(store: RecordStore, mirror: RemoteMirror, state: FormState) -> SubmissionResult:
    """Validate, store locally, and mirror a round.

    Raises:
        RoundValidationError: Before any mutation, if required fields are missing.
    """
    validate(state)

    round = build_round(state)
    appended = store.append(round)
    future = mirror.push(round)

    logger.info(f"Round {round.id} logged at {round.course} (Tiger Five {round.tigerFive})")
    return SubmissionResult(
        round=round,
        persisted=appended.persisted,
        warning=appended.warning,
        mirror=future,
        form=reset_form(),
    )
