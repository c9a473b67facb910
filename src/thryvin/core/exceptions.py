"""Custom exceptions for thryvin."""


class InvalidAnswerError(ValueError):
    """Raised when a value can never be stored for a field."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid answer for '{field}': {reason}")
        self.field = field
        self.reason = reason


class DateOutsideWindowError(ValueError):
    """Raised when a training date is not part of the scheduling window."""

    def __init__(self, iso_date: str):
        super().__init__(f"Date {iso_date} is outside the scheduling window")
        self.iso_date = iso_date


class InvalidCatalogError(Exception):
    """Raised when a step catalog is malformed."""
    pass


class WizardCompletedError(RuntimeError):
    """Raised when navigating a wizard that has already completed."""
    pass


class NoCoachAvailableError(LookupError):
    """Raised when a coach pool has no candidates for a gender and style."""

    def __init__(self, gender: str, style: str):
        super().__init__(f"No coach available for '{gender}' / '{style}'")
        self.gender = gender
        self.style = style
