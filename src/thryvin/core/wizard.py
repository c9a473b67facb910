"""Wizard controller: step navigation and completion."""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Sequence

from .answers import Answers, FinishedAnswers
from .catalog import DEFAULT_STEPS, StepDefinition
from .coach import CoachAssigner, CoachSelection
from .errors import ErrorKind, WizardError
from .exceptions import InvalidCatalogError, WizardCompletedError
from .schedule import DEFAULT_WINDOW_DAYS, ScheduleDay, generate_window
from .validation import MIN_AGE, latest_eligible_birth_date, validate_step

logger = logging.getLogger(__name__)

GENDER_FIELD = "gender"
STYLE_FIELD = "coaching_style"
COACH_STEP_ID = "coach"


class Outcome(str, Enum):
    """What a navigation request did."""

    ADVANCED = "advanced"
    BLOCKED = "blocked"
    RETREATED = "retreated"
    EXIT_REQUESTED = "exit_requested"
    COMPLETED = "completed"


@dataclass
class Completion:
    """Finished answers and the coach assigned to them."""

    answers: FinishedAnswers
    coach: CoachSelection


@dataclass
class WizardResult:
    outcome: Outcome
    error: WizardError | None = None
    completion: Completion | None = None


@dataclass
class WizardState:
    """Position within the step catalog."""

    step_count: int
    current_step_index: int = 0

    @property
    def progress_percent(self) -> float:
        return (self.current_step_index + 1) / self.step_count * 100

    @property
    def is_first(self) -> bool:
        return self.current_step_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_step_index == self.step_count - 1


class WizardController:
    """
    Drives one onboarding session through the step catalog.

    Each session owns its answers and state. Validation runs before every
    advance; a successful advance from the last step assigns a coach and
    completes the session.
    """

    def __init__(
        self,
        steps: Sequence[StepDefinition] = DEFAULT_STEPS,
        today: Callable[[], date] = date.today,
        assigner: CoachAssigner | None = None,
        min_age: int = MIN_AGE,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ):
        if not steps:
            raise InvalidCatalogError("Wizard requires at least one step")
        self.steps = tuple(steps)
        self.today = today
        self.assigner = assigner or CoachAssigner()
        self.min_age = min_age
        self.window_days = window_days
        self.answers = Answers()
        self.state = WizardState(step_count=len(self.steps))
        self.completion: Completion | None = None

    @property
    def current_step(self) -> StepDefinition:
        return self.steps[self.state.current_step_index]

    @property
    def completed(self) -> bool:
        return self.completion is not None

    def validate(self) -> WizardError | None:
        """Validate the current step without moving."""
        return validate_step(self.current_step, self.answers, self.today(), self.min_age)

    def advance(self) -> WizardResult:
        """
        Move to the next step, or complete from the last one.

        Returns:
            BLOCKED with the error when validation fails, ADVANCED after
            moving forward, COMPLETED with the completion on the last step
        """
        self._ensure_open()
        error = self.validate()
        if error is not None:
            logger.debug(f"Step {error.step_id} blocked: {error.kind.value}")
            return WizardResult(outcome=Outcome.BLOCKED, error=error)

        if self.state.is_last:
            self.completion = self._finalize()
            return WizardResult(outcome=Outcome.COMPLETED, completion=self.completion)

        self.state.current_step_index += 1
        logger.info(f"Advanced to step {self.current_step.id}")
        return WizardResult(outcome=Outcome.ADVANCED)

    def retreat(self) -> WizardResult:
        """Move back one step without validation, or request exit from the first."""
        self._ensure_open()
        if self.state.is_first:
            logger.info("Exit requested from first step")
            return WizardResult(outcome=Outcome.EXIT_REQUESTED)

        self.state.current_step_index -= 1
        logger.info(f"Returned to step {self.current_step.id}")
        return WizardResult(outcome=Outcome.RETREATED)

    def reroll_coach(self) -> WizardResult:
        """
        Replace the assigned coach with a different one from the same pool.

        When no other candidate exists the coach is kept and the result
        carries a reroll_exhausted error.
        """
        if self.completion is None:
            raise RuntimeError("No coach assigned before completion")
        coach = self.assigner.reroll(
            self.completion.coach.name,
            self.completion.answers.get(GENDER_FIELD),
            self.completion.answers.get(STYLE_FIELD),
        )
        exhausted = coach.name == self.completion.coach.name
        self.completion.coach = coach
        error = None
        if exhausted:
            error = WizardError(
                step_id=COACH_STEP_ID,
                kind=ErrorKind.REROLL_EXHAUSTED,
                message="No other coaches available for you.",
            )
        return WizardResult(
            outcome=Outcome.COMPLETED, error=error, completion=self.completion
        )

    def window(self) -> list[ScheduleDay]:
        """Dates available in the variable-by-week schedule mode."""
        return generate_window(self.today(), self.window_days)

    def toggle_date(self, iso_date: str) -> None:
        self.answers.schedule.toggle_date(iso_date, self.today(), self.window_days)

    def latest_birth_date(self) -> date:
        """Upper bound for a date of birth picker."""
        return latest_eligible_birth_date(self.today(), self.min_age)

    def _finalize(self) -> Completion:
        finished = self.answers.freeze()
        coach = self.assigner.assign(finished.get(GENDER_FIELD), finished.get(STYLE_FIELD))
        logger.info(f"Onboarding completed with coach {coach.name}")
        return Completion(answers=finished, coach=coach)

    def _ensure_open(self) -> None:
        if self.completion is not None:
            raise WizardCompletedError("Onboarding already completed")
