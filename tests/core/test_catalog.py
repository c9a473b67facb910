"""Tests for the step catalog."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from thryvin.core.catalog import (
    DEFAULT_STEPS,
    FieldSpec,
    OptionSpec,
    StepDefinition,
    StepKind,
    load_catalog,
)
from thryvin.core.exceptions import InvalidCatalogError


class TestDefaultSteps:
    """Tests for the built-in catalog."""

    def test_ids_are_unique(self):
        ids = [step.id for step in DEFAULT_STEPS]
        assert len(ids) == len(set(ids))

    def test_goal_steps_capped_at_three(self, steps):
        assert steps["fitness_goals"].max_select == 3
        assert steps["nutrition_goals"].max_select == 3

    def test_equipment_is_unbounded(self, steps):
        assert steps["equipment"].kind == StepKind.MULTI_SELECT
        assert steps["equipment"].max_select is None

    def test_birthdate_is_age_gated(self, steps):
        step = steps["birthdate"]
        assert step.age_gate is True
        assert step.date_field.key == "date_of_birth"

    def test_gender_options(self, steps):
        assert steps["gender"].option_values() == ["male", "female", "other"]

    def test_coaching_styles_match_coach_pool(self, steps):
        from thryvin.core.coach import COACH_POOL

        assert set(steps["coaching"].option_values()) == set(COACH_POOL["male"])

    def test_steps_are_immutable(self, steps):
        with pytest.raises(ValidationError):
            steps["name"].title = "Changed"


class TestStepShape:
    """Tests for kind-dependent shape validation."""

    def test_text_group_requires_fields(self):
        with pytest.raises(ValidationError, match="requires fields"):
            StepDefinition(id="x", kind=StepKind.TEXT_GROUP)

    def test_select_requires_options(self):
        with pytest.raises(ValidationError, match="requires options"):
            StepDefinition(id="x", kind=StepKind.SINGLE_SELECT, field="x")

    def test_max_select_only_on_multi_select(self):
        with pytest.raises(ValidationError, match="max_select"):
            StepDefinition(
                id="x",
                kind=StepKind.SINGLE_SELECT,
                field="x",
                options=(OptionSpec(value="a", label="A"),),
                max_select=2,
            )

    def test_age_gate_requires_date_field(self):
        with pytest.raises(ValidationError, match="age_gate"):
            StepDefinition(
                id="x",
                kind=StepKind.TEXT_GROUP,
                fields=(FieldSpec(key="name", label="Name"),),
                age_gate=True,
            )

    def test_schedule_editor_needs_nothing(self):
        step = StepDefinition(id="when", kind=StepKind.SCHEDULE_EDITOR)
        assert step.fields == ()


class TestLoadCatalog:
    """Tests for loading catalogs from YAML."""

    def _write(self, tmp_path: Path, data) -> Path:
        path = tmp_path / "steps.yaml"
        path.write_text(yaml.dump(data))
        return path

    def test_loads_steps_in_order(self, tmp_path):
        path = self._write(
            tmp_path,
            {
                "steps": [
                    {
                        "id": "name",
                        "kind": "text_group",
                        "fields": [{"key": "name", "label": "Name"}],
                    },
                    {
                        "id": "goals",
                        "kind": "multi_select",
                        "field": "fitness_goals",
                        "max_select": 2,
                        "options": [
                            {"value": "a", "label": "A"},
                            {"value": "b", "label": "B"},
                        ],
                    },
                ]
            },
        )

        steps = load_catalog(path)

        assert [s.id for s in steps] == ["name", "goals"]
        assert steps[1].kind == StepKind.MULTI_SELECT
        assert steps[1].max_select == 2

    def test_rejects_empty_file(self, tmp_path):
        path = tmp_path / "steps.yaml"
        path.write_text("")

        with pytest.raises(InvalidCatalogError, match="No steps"):
            load_catalog(path)

    def test_rejects_invalid_step(self, tmp_path):
        path = self._write(tmp_path, {"steps": [{"id": "x", "kind": "unknown"}]})

        with pytest.raises(InvalidCatalogError, match="Invalid step"):
            load_catalog(path)

    def test_rejects_duplicate_ids(self, tmp_path):
        step = {"id": "when", "kind": "schedule_editor"}
        path = self._write(tmp_path, {"steps": [step, step]})

        with pytest.raises(InvalidCatalogError, match="Duplicate step id"):
            load_catalog(path)
