"""Shared test fixtures for thryvin test suite."""

import random
from datetime import date
from pathlib import Path
from typing import Callable

import pytest

from thryvin.core.answers import Answers
from thryvin.core.catalog import DEFAULT_STEPS, StepDefinition, StepKind
from thryvin.core.coach import CoachAssigner
from thryvin.core.wizard import WizardController
from thryvin.utils.config import Config

TODAY = date(2024, 1, 1)


class FirstChoiceRng:
    """Random stand-in that always draws the first candidate."""

    def __init__(self):
        self.seen: list[list[str]] = []

    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[0]


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def steps() -> dict[str, StepDefinition]:
    """Default steps keyed by id."""
    return {step.id: step for step in DEFAULT_STEPS}


@pytest.fixture
def answers() -> Answers:
    return Answers()


@pytest.fixture
def first_choice_rng() -> FirstChoiceRng:
    return FirstChoiceRng()


@pytest.fixture
def controller(first_choice_rng: FirstChoiceRng) -> WizardController:
    """Wizard over the default catalog with a fixed clock."""
    return WizardController(
        today=lambda: TODAY,
        assigner=CoachAssigner(first_choice_rng),  # type: ignore[arg-type]
    )


@pytest.fixture
def seeded_assigner() -> CoachAssigner:
    return CoachAssigner(random.Random(42))


@pytest.fixture
def fill_current_step() -> Callable[[WizardController], None]:
    """Answer the wizard's current step with valid data."""

    def fill(wizard: WizardController) -> None:
        step = wizard.current_step
        answers = wizard.answers
        if step.kind in (StepKind.TEXT_GROUP, StepKind.FREE_TEXT):
            for spec in step.fields:
                value = {
                    "date": "1990-05-20",
                    "height": "180",
                    "weight": "75",
                    "number": "1",
                }.get(spec.type, "Sam")
                answers.set_field(spec, value)
        elif step.kind == StepKind.SINGLE_SELECT:
            answers.select(step, step.options[0].value)
        elif step.kind == StepKind.MULTI_SELECT:
            if not answers.selection(step.field):
                answers.toggle_option(step, step.options[0].value)

    return fill


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config with workspace pointing to tmp_path."""
    return Config(workspace=tmp_path)
