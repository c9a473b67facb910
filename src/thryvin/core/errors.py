"""Error values reported to the presentation layer."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Classification of recoverable wizard errors."""

    REQUIRED_FIELD_MISSING = "required_field_missing"
    AGE_RESTRICTION = "age_restriction"
    SELECTION_LIMIT_EXCEEDED = "selection_limit_exceeded"
    REROLL_EXHAUSTED = "reroll_exhausted"


@dataclass(frozen=True)
class WizardError:
    """A recoverable error, returned rather than raised."""

    step_id: str
    kind: ErrorKind
    message: str
