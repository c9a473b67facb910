"""Step catalog: the ordered, static definition of the onboarding flow."""

from enum import Enum
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .exceptions import InvalidCatalogError


class StepKind(str, Enum):
    """Taxonomy tag deciding which editing and validation rules apply."""

    TEXT_GROUP = "text_group"
    SINGLE_SELECT = "single_select"
    MULTI_SELECT = "multi_select"
    FREE_TEXT = "free_text"
    SCHEDULE_EDITOR = "schedule_editor"


class FieldSpec(BaseModel):
    """An input field of a text group or free text step."""

    model_config = {"frozen": True}

    key: str
    label: str
    type: Literal["text", "number", "date", "height", "weight"] = "text"
    placeholder: str = ""


class OptionSpec(BaseModel):
    """A selectable option of a select step."""

    model_config = {"frozen": True}

    value: str
    label: str
    subtitle: str = ""


class StepDefinition(BaseModel):
    """A single onboarding step. Defined once, never mutated."""

    model_config = {"frozen": True}

    id: str
    kind: StepKind
    title: str = ""
    subtitle: str = ""
    field: str | None = None
    fields: tuple[FieldSpec, ...] = ()
    options: tuple[OptionSpec, ...] = ()
    max_select: int | None = Field(default=None, gt=0)
    age_gate: bool = False

    @model_validator(mode="after")
    def validate_shape(self) -> "StepDefinition":
        """Check that the step carries what its kind needs."""
        if self.kind in (StepKind.TEXT_GROUP, StepKind.FREE_TEXT):
            if not self.fields:
                raise ValueError(f"step '{self.id}' requires fields")
        if self.kind in (StepKind.SINGLE_SELECT, StepKind.MULTI_SELECT):
            if not self.field:
                raise ValueError(f"step '{self.id}' requires a field")
            if not self.options:
                raise ValueError(f"step '{self.id}' requires options")
        if self.max_select is not None and self.kind != StepKind.MULTI_SELECT:
            raise ValueError("max_select is only valid on multi_select steps")
        if self.age_gate:
            if self.kind != StepKind.TEXT_GROUP or self.date_field is None:
                raise ValueError(
                    f"step '{self.id}': age_gate needs a text_group with a date field"
                )
        return self

    @property
    def date_field(self) -> FieldSpec | None:
        for spec in self.fields:
            if spec.type == "date":
                return spec
        return None

    def option_values(self) -> list[str]:
        return [option.value for option in self.options]


def _options(*items: tuple[str, str, str]) -> tuple[OptionSpec, ...]:
    return tuple(OptionSpec(value=v, label=l, subtitle=s) for v, l, s in items)


DEFAULT_STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(
        id="name",
        kind=StepKind.TEXT_GROUP,
        title="Welcome to Thryvin!",
        subtitle="First things first...",
        fields=(
            FieldSpec(key="name", label="What should we call you?", placeholder="Your name"),
        ),
    ),
    StepDefinition(
        id="gender",
        kind=StepKind.SINGLE_SELECT,
        title="Gender",
        subtitle="This helps us match you with a coach",
        field="gender",
        options=_options(
            ("male", "Male", ""),
            ("female", "Female", ""),
            ("other", "Other / prefer not to say", ""),
        ),
    ),
    StepDefinition(
        id="birthdate",
        kind=StepKind.TEXT_GROUP,
        title="Date of Birth",
        subtitle="You must be at least 16 to use Thryvin",
        fields=(
            FieldSpec(
                key="date_of_birth",
                label="Date of birth",
                type="date",
                placeholder="YYYY-MM-DD",
            ),
        ),
        age_gate=True,
    ),
    StepDefinition(
        id="body_metrics",
        kind=StepKind.TEXT_GROUP,
        title="Personal Details",
        subtitle="Help us personalize your journey",
        fields=(
            FieldSpec(key="height", label="Height", type="height", placeholder="e.g., 175"),
            FieldSpec(key="weight", label="Weight", type="weight", placeholder="e.g., 70"),
        ),
    ),
    StepDefinition(
        id="experience",
        kind=StepKind.SINGLE_SELECT,
        title="Fitness Experience",
        subtitle="Tell us about your fitness background",
        field="experience",
        options=_options(
            ("beginner", "Beginner", "New to working out"),
            ("intermediate", "Intermediate", "6+ months experience"),
            ("advanced", "Advanced", "2+ years experience"),
        ),
    ),
    StepDefinition(
        id="fitness_goals",
        kind=StepKind.MULTI_SELECT,
        title="Fitness Goals",
        subtitle="Pick up to 3",
        field="fitness_goals",
        max_select=3,
        options=_options(
            ("weight_loss", "Weight Loss", "Burn fat and get lean"),
            ("muscle_gain", "Muscle Gain", "Build strength and size"),
            ("endurance", "Endurance", "Improve stamina"),
            ("flexibility", "Flexibility", "Move better"),
            ("general_fitness", "General Fitness", "Stay healthy and active"),
            ("sports_performance", "Sports Performance", "Train for your sport"),
        ),
    ),
    StepDefinition(
        id="nutrition_goals",
        kind=StepKind.MULTI_SELECT,
        title="Nutrition Goals",
        subtitle="Pick up to 3",
        field="nutrition_goals",
        max_select=3,
        options=_options(
            ("eat_healthier", "Eat Healthier", "More whole foods"),
            ("more_protein", "More Protein", "Support recovery"),
            ("calorie_control", "Calorie Control", "Stay in a deficit"),
            ("meal_prep", "Meal Prep", "Plan ahead"),
            ("less_sugar", "Less Sugar", "Cut back on sweets"),
            ("hydration", "Hydration", "Drink more water"),
        ),
    ),
    StepDefinition(
        id="equipment",
        kind=StepKind.MULTI_SELECT,
        title="Available Equipment",
        subtitle="What do you have access to?",
        field="equipment",
        options=_options(
            ("gym", "Full Gym", "Access to gym equipment"),
            ("dumbbells", "Dumbbells", ""),
            ("barbell", "Barbell", ""),
            ("kettlebells", "Kettlebells", ""),
            ("resistance_bands", "Resistance Bands", ""),
            ("pull_up_bar", "Pull-up Bar", ""),
            ("bodyweight", "Bodyweight Only", "No equipment needed"),
        ),
    ),
    StepDefinition(
        id="training_schedule",
        kind=StepKind.SCHEDULE_EDITOR,
        title="When can you train?",
        subtitle="We'll plan around your availability",
    ),
    StepDefinition(
        id="frequency",
        kind=StepKind.SINGLE_SELECT,
        title="Training Frequency",
        subtitle="How many days per week?",
        field="training_days",
        options=_options(
            ("3", "3 Days/Week", "Good for beginners"),
            ("4", "4 Days/Week", "Balanced approach"),
            ("5", "5 Days/Week", "Dedicated training"),
            ("6", "6 Days/Week", "High commitment"),
        ),
    ),
    StepDefinition(
        id="duration",
        kind=StepKind.SINGLE_SELECT,
        title="Session Duration",
        subtitle="How long per workout?",
        field="session_duration",
        options=_options(
            ("30", "30 Minutes", "Quick sessions"),
            ("45", "45 Minutes", "Standard length"),
            ("60", "60 Minutes", "Extended training"),
            ("75+", "75+ Minutes", "Long sessions"),
        ),
    ),
    StepDefinition(
        id="injuries",
        kind=StepKind.FREE_TEXT,
        title="Injuries or Limitations",
        subtitle="Any physical concerns?",
        fields=(
            FieldSpec(
                key="injuries_description",
                label="Injuries or limitations",
                placeholder='e.g., Lower back pain, knee injury (or "None")',
            ),
        ),
    ),
    StepDefinition(
        id="coaching",
        kind=StepKind.SINGLE_SELECT,
        title="Coaching Style",
        subtitle="How would you like to be coached?",
        field="coaching_style",
        options=_options(
            ("motivational", "Motivational", "Energetic and encouraging"),
            ("technical", "Technical", "Detailed and precise"),
            ("disciplined", "Disciplined", "Structured and no-nonsense"),
            ("balanced", "Balanced", "Mix of all styles"),
        ),
    ),
)


def load_catalog(path: Path) -> tuple[StepDefinition, ...]:
    """
    Load a step catalog from a YAML file.

    The file holds a top-level ``steps`` list, each entry shaped like a
    StepDefinition.

    Raises:
        InvalidCatalogError: If the file is malformed or ids repeat
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    raw_steps = data.get("steps") if isinstance(data, dict) else None
    if not raw_steps:
        raise InvalidCatalogError(f"No steps defined in {path}")

    try:
        steps = tuple(StepDefinition.model_validate(raw) for raw in raw_steps)
    except ValidationError as e:
        raise InvalidCatalogError(f"Invalid step in {path}: {e}") from e

    seen: set[str] = set()
    for step in steps:
        if step.id in seen:
            raise InvalidCatalogError(f"Duplicate step id: {step.id}")
        seen.add(step.id)

    return steps
