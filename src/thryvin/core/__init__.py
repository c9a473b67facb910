"""Core onboarding functionality."""

from .answers import Answers, FinishedAnswers
from .catalog import (
    DEFAULT_STEPS,
    FieldSpec,
    OptionSpec,
    StepDefinition,
    StepKind,
    load_catalog,
)
from .coach import CoachAssigner, CoachSelection, coach_profile
from .errors import ErrorKind, WizardError
from .payload import build_registration_payload
from .schedule import ScheduleDay, ScheduleMode, TrainingSchedule, generate_window
from .validation import calculate_age, latest_eligible_birth_date, validate_step
from .wizard import Completion, Outcome, WizardController, WizardResult, WizardState

__all__ = [
    "Answers",
    "FinishedAnswers",
    "DEFAULT_STEPS",
    "FieldSpec",
    "OptionSpec",
    "StepDefinition",
    "StepKind",
    "load_catalog",
    "CoachAssigner",
    "CoachSelection",
    "coach_profile",
    "ErrorKind",
    "WizardError",
    "build_registration_payload",
    "ScheduleDay",
    "ScheduleMode",
    "TrainingSchedule",
    "generate_window",
    "calculate_age",
    "latest_eligible_birth_date",
    "validate_step",
    "Completion",
    "Outcome",
    "WizardController",
    "WizardResult",
    "WizardState",
]
