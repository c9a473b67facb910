"""Validation policy: decide whether the current step may be left."""

from datetime import date
from typing import Callable

from .answers import FEET_KEY, INCHES_KEY, Answers
from .catalog import StepDefinition, StepKind
from .errors import ErrorKind, WizardError
from .schedule import ScheduleMode

MIN_AGE = 16


def calculate_age(birth: date, today: date) -> int:
    """Age in whole years, counting a birthday only once it has occurred."""
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def latest_eligible_birth_date(today: date, min_age: int = MIN_AGE) -> date:
    """
    Most recent birth date that still satisfies the age gate.

    A 29 February anniversary in a non-leap year falls back to 28 February,
    which keeps this bound consistent with calculate_age.
    """
    try:
        return today.replace(year=today.year - min_age)
    except ValueError:
        return today.replace(year=today.year - min_age, day=28)


def _missing(step: StepDefinition, message: str) -> WizardError:
    return WizardError(
        step_id=step.id, kind=ErrorKind.REQUIRED_FIELD_MISSING, message=message
    )


def _validate_text_group(
    step: StepDefinition, answers: Answers, today: date, min_age: int
) -> WizardError | None:
    for spec in step.fields:
        if spec.type == "height" and answers.height_unit == "ft":
            filled = bool(answers.get(FEET_KEY)) and bool(answers.get(INCHES_KEY))
        else:
            filled = bool(answers.get(spec.key))
        if not filled:
            return _missing(step, "Please fill in all fields to continue.")

    if step.age_gate:
        birth = answers.get_date(step.date_field.key)
        if birth is not None and calculate_age(birth, today) < min_age:
            return WizardError(
                step_id=step.id,
                kind=ErrorKind.AGE_RESTRICTION,
                message=f"You must be at least {min_age} years old to use Thryvin.",
            )
    return None


def _validate_single_select(
    step: StepDefinition, answers: Answers, today: date, min_age: int
) -> WizardError | None:
    if answers.get(step.field) not in step.option_values():
        return _missing(step, "Please select an option to continue.")
    return None


def _validate_multi_select(
    step: StepDefinition, answers: Answers, today: date, min_age: int
) -> WizardError | None:
    if not answers.selection(step.field):
        return _missing(step, "Please select at least one option to continue.")
    return None


def _validate_free_text(
    step: StepDefinition, answers: Answers, today: date, min_age: int
) -> WizardError | None:
    return None


def _validate_schedule(
    step: StepDefinition, answers: Answers, today: date, min_age: int
) -> WizardError | None:
    schedule = answers.schedule
    if schedule.mode == ScheduleMode.SPECIFIC and not schedule.selected_days:
        return _missing(step, "Please select at least one training day.")
    if schedule.mode == ScheduleMode.DEPENDS and not schedule.specific_dates:
        return _missing(step, "Please pick at least one date you can train.")
    return None


_VALIDATORS: dict[
    StepKind, Callable[[StepDefinition, Answers, date, int], WizardError | None]
] = {
    StepKind.TEXT_GROUP: _validate_text_group,
    StepKind.SINGLE_SELECT: _validate_single_select,
    StepKind.MULTI_SELECT: _validate_multi_select,
    StepKind.FREE_TEXT: _validate_free_text,
    StepKind.SCHEDULE_EDITOR: _validate_schedule,
}


def validate_step(
    step: StepDefinition, answers: Answers, today: date, min_age: int = MIN_AGE
) -> WizardError | None:
    """
    Check the answers against a step.

    Args:
        step: Step being left
        answers: Current answers, never mutated
        today: Reference date for the age gate
        min_age: Minimum age in whole years

    Returns:
        None when the step passes, otherwise the first error found
    """
    return _VALIDATORS[step.kind](step, answers, today, min_age)
