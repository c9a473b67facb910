"""Registration payload built from finished answers."""

from typing import Any

from .answers import FEET_KEY, INCHES_KEY, FinishedAnswers
from .coach import CoachSelection

CM_PER_INCH = 2.54
KG_PER_LB = 0.45359237


def _to_int(raw: str) -> int | None:
    """Parse values like '60' or '75+'."""
    try:
        return int(raw.rstrip("+"))
    except ValueError:
        return None


def _to_float(raw: str) -> float | None:
    try:
        return float(raw)
    except ValueError:
        return None


def height_cm(answers: FinishedAnswers) -> float | None:
    """Height normalised to centimetres, if answered."""
    if answers.height_unit == "ft":
        feet = _to_float(answers.get(FEET_KEY))
        inches = _to_float(answers.get(INCHES_KEY))
        if feet is None or inches is None:
            return None
        return round((feet * 12 + inches) * CM_PER_INCH, 1)
    return _to_float(answers.get("height"))


def weight_kg(answers: FinishedAnswers) -> float | None:
    """Weight normalised to kilograms, if answered."""
    weight = _to_float(answers.get("weight"))
    if weight is None:
        return None
    if answers.weight_unit == "lbs":
        return round(weight * KG_PER_LB, 1)
    return weight


def build_registration_payload(
    answers: FinishedAnswers, coach: CoachSelection
) -> dict[str, Any]:
    """
    Shape finished answers for the account-creation collaborator.

    Keys follow the registration API's camelCase naming. The primary goal
    is the first fitness goal picked.
    """
    fitness_goals = answers.selection("fitness_goals")
    payload: dict[str, Any] = {
        "name": answers.get("name"),
        "gender": answers.get("gender"),
        "dateOfBirth": answers.get("date_of_birth"),
        "heightUnit": answers.height_unit,
        "weightUnit": answers.weight_unit,
        "heightCm": height_cm(answers),
        "weightKg": weight_kg(answers),
        "experience": answers.get("experience"),
        "fitnessGoals": fitness_goals,
        "goal": fitness_goals[0] if fitness_goals else None,
        "nutritionGoals": answers.selection("nutrition_goals"),
        "equipment": answers.selection("equipment"),
        "trainingSchedule": answers.schedule_mode.value,
        "selectedDays": list(answers.selected_days),
        "specificDates": list(answers.specific_dates),
        "trainingDays": _to_int(answers.get("training_days")),
        "sessionDuration": _to_int(answers.get("session_duration")),
        "injuriesDescription": answers.get("injuries_description"),
        "coachingStyle": coach.style,
        "coachName": coach.name,
    }
    if answers.height_unit == "ft":
        payload["heightFt"] = answers.get(FEET_KEY)
        payload["heightIn"] = answers.get(INCHES_KEY)
    return payload
