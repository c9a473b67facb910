"""Training schedule sub-model and the rolling date window."""

import logging
from datetime import date, timedelta
from enum import Enum

from pydantic import BaseModel, Field

from .exceptions import DateOutsideWindowError, InvalidAnswerError

logger = logging.getLogger(__name__)

WEEKDAYS = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]
DEFAULT_WINDOW_DAYS = 21

# Locale-independent short names.
WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


class ScheduleMode(str, Enum):
    """How the user describes when they can train."""

    FLEXIBLE = "flexible"
    SPECIFIC = "specific"
    DEPENDS = "depends"


class ScheduleDay(BaseModel):
    """One entry of the rolling date window."""

    model_config = {"frozen": True}

    iso: str
    weekday: str
    day: int
    month: str
    week: int


def generate_window(today: date, days: int = DEFAULT_WINDOW_DAYS) -> list[ScheduleDay]:
    """
    Build the consecutive date window starting at today.

    Args:
        today: First day of the window
        days: Number of days to generate

    Returns:
        One ScheduleDay per date, bucketed into weeks of seven days
    """
    window = []
    for offset in range(days):
        current = today + timedelta(days=offset)
        window.append(
            ScheduleDay(
                iso=current.isoformat(),
                weekday=WEEKDAY_NAMES[current.weekday()],
                day=current.day,
                month=MONTH_NAMES[current.month - 1],
                week=offset // 7 + 1,
            )
        )
    return window


class TrainingSchedule(BaseModel):
    """Training availability in one of three mutually exclusive modes."""

    mode: ScheduleMode = ScheduleMode.FLEXIBLE
    selected_days: list[str] = Field(default_factory=lambda: list(WEEKDAYS))
    specific_dates: list[str] = Field(default_factory=list)

    def set_mode(self, mode: ScheduleMode | str) -> None:
        """Switch mode, resetting the previous mode's selection."""
        mode = ScheduleMode(mode)
        if mode == ScheduleMode.FLEXIBLE:
            self.selected_days = list(WEEKDAYS)
        else:
            self.selected_days = []
        self.specific_dates = []
        self.mode = mode
        logger.debug(f"Schedule mode set to {mode.value}")

    def toggle_day(self, day: str) -> None:
        """
        Flip membership of a weekday in specific mode.

        Raises:
            InvalidAnswerError: If not in specific mode or the day is unknown
        """
        self._require_mode(ScheduleMode.SPECIFIC, "selected_days")
        if day not in WEEKDAYS:
            raise InvalidAnswerError("selected_days", f"unknown weekday '{day}'")
        if day in self.selected_days:
            self.selected_days.remove(day)
        else:
            self.selected_days.append(day)
        self.selected_days.sort(key=WEEKDAYS.index)

    def toggle_date(
        self, iso_date: str, today: date, days: int = DEFAULT_WINDOW_DAYS
    ) -> None:
        """
        Flip membership of a date in depends mode.

        Raises:
            InvalidAnswerError: If not in depends mode
            DateOutsideWindowError: If the date is not in the window for today
        """
        self._require_mode(ScheduleMode.DEPENDS, "specific_dates")
        allowed = {d.iso for d in generate_window(today, days)}
        if iso_date not in allowed:
            raise DateOutsideWindowError(iso_date)
        if iso_date in self.specific_dates:
            self.specific_dates.remove(iso_date)
        else:
            self.specific_dates.append(iso_date)
        self.specific_dates.sort()

    def _require_mode(self, mode: ScheduleMode, field: str) -> None:
        if self.mode != mode:
            raise InvalidAnswerError(
                field, f"only editable in {mode.value} mode, not {self.mode.value}"
            )

    def is_complete(self) -> bool:
        """Whether the current mode has the selection it needs."""
        if self.mode == ScheduleMode.SPECIFIC:
            return bool(self.selected_days)
        if self.mode == ScheduleMode.DEPENDS:
            return bool(self.specific_dates)
        return True
