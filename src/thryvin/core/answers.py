"""Answer store: the session-scoped record of onboarding answers."""

import logging
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from .catalog import FieldSpec, StepDefinition, StepKind
from .errors import ErrorKind, WizardError
from .exceptions import InvalidAnswerError
from .schedule import ScheduleMode, TrainingSchedule

logger = logging.getLogger(__name__)

FEET_KEY = "feet"
INCHES_KEY = "inches"


def _parse_number(field: str, raw: str) -> str:
    try:
        value = float(raw)
    except ValueError:
        raise InvalidAnswerError(field, f"'{raw}' is not a number")
    if value < 0:
        raise InvalidAnswerError(field, "must not be negative")
    return raw


class Answers(BaseModel):
    """
    Mutable answers collected during one onboarding session.

    Text, number and date answers live in ``values``; multi-select answers
    live in ``selections``. Height in feet is stored as the ``feet`` and
    ``inches`` pair instead of the height field itself.
    """

    model_config = {"validate_assignment": True}

    values: dict[str, str] = Field(default_factory=dict)
    selections: dict[str, list[str]] = Field(default_factory=dict)
    height_unit: Literal["cm", "ft"] = "cm"
    weight_unit: Literal["kg", "lbs"] = "kg"
    schedule: TrainingSchedule = Field(default_factory=TrainingSchedule)

    def get(self, key: str) -> str:
        """Return a stored value, or an empty string when unanswered."""
        return self.values.get(key, "")

    def get_date(self, key: str) -> date | None:
        raw = self.values.get(key)
        return date.fromisoformat(raw) if raw else None

    def selection(self, key: str) -> list[str]:
        return list(self.selections.get(key, []))

    def set_field(self, spec: FieldSpec, raw: str) -> None:
        """
        Store the answer for a text group or free text field.

        Empty input clears the answer. Dates must be ISO calendar dates and
        numeric fields must parse as non-negative numbers.

        Raises:
            InvalidAnswerError: If the value can never be valid for the field
        """
        value = raw.strip()
        if not value:
            self.values.pop(spec.key, None)
            return

        if spec.type == "date":
            try:
                value = date.fromisoformat(value).isoformat()
            except ValueError:
                raise InvalidAnswerError(spec.key, f"'{raw}' is not a valid date")
        elif spec.type in ("number", "weight"):
            _parse_number(spec.key, value)
        elif spec.type == "height":
            if self.height_unit == "ft":
                raise InvalidAnswerError(spec.key, "height is set in feet and inches")
            _parse_number(spec.key, value)

        self.values[spec.key] = value

    def set_height_imperial(self, feet: str, inches: str) -> None:
        """Store height as a feet/inches pair."""
        if self.height_unit != "ft":
            raise InvalidAnswerError(FEET_KEY, "height unit is not ft")
        for key, raw in ((FEET_KEY, feet), (INCHES_KEY, inches)):
            value = raw.strip()
            if value:
                self.values[key] = _parse_number(key, value)
            else:
                self.values.pop(key, None)

    def set_height_unit(self, unit: Literal["cm", "ft"]) -> None:
        """Switch height unit, dropping the representation of the other unit."""
        self.height_unit = unit
        if unit == "ft":
            self.values.pop("height", None)
        else:
            self.values.pop(FEET_KEY, None)
            self.values.pop(INCHES_KEY, None)

    def set_weight_unit(self, unit: Literal["kg", "lbs"]) -> None:
        self.weight_unit = unit

    def select(self, step: StepDefinition, value: str) -> None:
        """
        Record the answer of a single select step.

        Raises:
            InvalidAnswerError: If value is not one of the step's options
        """
        if step.kind != StepKind.SINGLE_SELECT:
            raise InvalidAnswerError(step.id, "not a single select step")
        if value not in step.option_values():
            raise InvalidAnswerError(step.field, f"unknown option '{value}'")
        self.values[step.field] = value

    def toggle_option(self, step: StepDefinition, value: str) -> WizardError | None:
        """
        Flip membership of an option in a multi select step.

        Adding beyond the step's max_select is rejected and reported as a
        SELECTION_LIMIT_EXCEEDED error; the selection is left untouched.
        """
        if step.kind != StepKind.MULTI_SELECT:
            raise InvalidAnswerError(step.id, "not a multi select step")
        if value not in step.option_values():
            raise InvalidAnswerError(step.field, f"unknown option '{value}'")

        current = self.selections.setdefault(step.field, [])
        if value in current:
            current.remove(value)
            return None

        if step.max_select is not None and len(current) >= step.max_select:
            logger.debug(f"Rejected '{value}' for {step.field}: limit {step.max_select}")
            return WizardError(
                step_id=step.id,
                kind=ErrorKind.SELECTION_LIMIT_EXCEEDED,
                message=f"You can select up to {step.max_select} options.",
            )

        current.append(value)
        return None

    def set_schedule_mode(self, mode: ScheduleMode | str) -> None:
        self.schedule.set_mode(mode)

    def freeze(self) -> "FinishedAnswers":
        """Take an immutable snapshot for hand-off."""
        return FinishedAnswers(
            values=tuple(sorted(self.values.items())),
            selections=tuple(
                sorted((k, tuple(v)) for k, v in self.selections.items())
            ),
            height_unit=self.height_unit,
            weight_unit=self.weight_unit,
            schedule_mode=self.schedule.mode,
            selected_days=tuple(self.schedule.selected_days),
            specific_dates=tuple(self.schedule.specific_dates),
        )


class FinishedAnswers(BaseModel):
    """
    Frozen answer record handed to the registration collaborator.

    Values and selections are stored as sorted key/value pairs so no part of
    the record can change after finalize. Read them through ``get`` and
    ``selection``.
    """

    model_config = {"frozen": True}

    values: tuple[tuple[str, str], ...]
    selections: tuple[tuple[str, tuple[str, ...]], ...]
    height_unit: Literal["cm", "ft"]
    weight_unit: Literal["kg", "lbs"]
    schedule_mode: ScheduleMode
    selected_days: tuple[str, ...]
    specific_dates: tuple[str, ...]

    def get(self, key: str) -> str:
        return dict(self.values).get(key, "")

    def selection(self, key: str) -> list[str]:
        return list(dict(self.selections).get(key, ()))
