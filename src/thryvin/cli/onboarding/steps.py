"""Interactive prompts, one class per step kind."""

import questionary
from rich.console import Console
from rich.markup import escape

from thryvin.core.catalog import FieldSpec, StepDefinition, StepKind
from thryvin.core.errors import WizardError
from thryvin.core.exceptions import InvalidAnswerError
from thryvin.core.schedule import WEEKDAYS, ScheduleMode
from thryvin.core.wizard import WizardController

SCHEDULE_MODE_CHOICES = [
    questionary.Choice("I'm flexible - any day works", value=ScheduleMode.FLEXIBLE.value),
    questionary.Choice("Specific days each week", value=ScheduleMode.SPECIFIC.value),
    questionary.Choice("It depends on the week", value=ScheduleMode.DEPENDS.value),
]


class BaseStep:
    """Base class for step prompts."""

    def __init__(self, step: StepDefinition, console: Console):
        self.step = step
        self.console = console

    def run(self, wizard: WizardController) -> bool:
        """Collect input for the step. Return True on success, False to abort."""
        raise NotImplementedError

    def _notify(self, error: WizardError | None) -> None:
        if error is not None:
            self.console.print(f"[yellow]{error.message}[/yellow]")


class TextGroupStep(BaseStep):
    """Prompt for every field of a text group, including unit choices."""

    def run(self, wizard: WizardController) -> bool:
        for spec in self.step.fields:
            if not self._ask_field(wizard, spec):
                return False
        return True

    def _ask_field(self, wizard: WizardController, spec: FieldSpec) -> bool:
        answers = wizard.answers

        if spec.type == "height":
            unit = questionary.select(
                "Height unit:", choices=["cm", "ft"], default=answers.height_unit
            ).ask()
            if unit is None:
                return False
            answers.set_height_unit(unit)
            if unit == "ft":
                return self._ask_imperial_height(wizard)

        if spec.type == "weight":
            unit = questionary.select(
                "Weight unit:", choices=["kg", "lbs"], default=answers.weight_unit
            ).ask()
            if unit is None:
                return False
            answers.set_weight_unit(unit)

        label = spec.label
        if spec.type == "date":
            label = f"{label} (YYYY-MM-DD)"
            if self.step.age_gate:
                label = f"{label}, on or before {wizard.latest_birth_date().isoformat()}"
        elif spec.type == "height":
            label = f"{label} ({answers.height_unit})"
        elif spec.type == "weight":
            label = f"{label} ({answers.weight_unit})"

        while True:
            value = questionary.text(f"{label}:", default=answers.get(spec.key)).ask()
            if value is None:
                return False
            try:
                answers.set_field(spec, value)
                return True
            except InvalidAnswerError as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")

    def _ask_imperial_height(self, wizard: WizardController) -> bool:
        answers = wizard.answers
        while True:
            feet = questionary.text("Height (feet):", default=answers.get("feet")).ask()
            if feet is None:
                return False
            inches = questionary.text(
                "Height (inches):", default=answers.get("inches")
            ).ask()
            if inches is None:
                return False
            try:
                answers.set_height_imperial(feet, inches)
                return True
            except InvalidAnswerError as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")


class SingleSelectStep(BaseStep):
    """Prompt for one option."""

    def run(self, wizard: WizardController) -> bool:
        current = wizard.answers.get(self.step.field)
        choices = [
            questionary.Choice(
                title=f"{o.label} - {o.subtitle}" if o.subtitle else o.label,
                value=o.value,
            )
            for o in self.step.options
        ]
        value = questionary.select(
            self.step.title or "Select an option:",
            choices=choices,
            default=current or None,
        ).ask()
        if value is None:
            return False
        wizard.answers.select(self.step, value)
        return True


class MultiSelectStep(BaseStep):
    """Prompt for a set of options, applying the selection cap per option."""

    def run(self, wizard: WizardController) -> bool:
        answers = wizard.answers
        current = answers.selection(self.step.field)
        title = self.step.title or "Select options:"
        if self.step.max_select:
            title = f"{title} (up to {self.step.max_select})"

        picked = questionary.checkbox(
            title,
            choices=[
                questionary.Choice(
                    title=f"{o.label} - {o.subtitle}" if o.subtitle else o.label,
                    value=o.value,
                    checked=o.value in current,
                )
                for o in self.step.options
            ],
        ).ask()
        if picked is None:
            return False

        for value in current:
            if value not in picked:
                answers.toggle_option(self.step, value)
        for value in picked:
            if value not in current:
                self._notify(answers.toggle_option(self.step, value))
        return True


class FreeTextStep(BaseStep):
    """Prompt for optional free text."""

    def run(self, wizard: WizardController) -> bool:
        for spec in self.step.fields:
            value = questionary.text(
                f"{spec.label} (optional):", default=wizard.answers.get(spec.key)
            ).ask()
            if value is None:
                return False
            wizard.answers.set_field(spec, value)
        return True


class ScheduleEditorStep(BaseStep):
    """Prompt for the schedule mode and its mode-specific selection."""

    def run(self, wizard: WizardController) -> bool:
        schedule = wizard.answers.schedule
        mode = questionary.select(
            self.step.title or "When can you train?",
            choices=SCHEDULE_MODE_CHOICES,
            default=schedule.mode.value,
        ).ask()
        if mode is None:
            return False
        if mode != schedule.mode.value:
            schedule.set_mode(mode)

        if schedule.mode == ScheduleMode.SPECIFIC:
            return self._pick_days(wizard)
        if schedule.mode == ScheduleMode.DEPENDS:
            return self._pick_dates(wizard)
        return True

    def _pick_days(self, wizard: WizardController) -> bool:
        schedule = wizard.answers.schedule
        current = list(schedule.selected_days)
        picked = questionary.checkbox(
            "Which days can you train?",
            choices=[
                questionary.Choice(day.capitalize(), value=day, checked=day in current)
                for day in WEEKDAYS
            ],
        ).ask()
        if picked is None:
            return False
        for day in WEEKDAYS:
            if (day in current) != (day in picked):
                schedule.toggle_day(day)
        return True

    def _pick_dates(self, wizard: WizardController) -> bool:
        schedule = wizard.answers.schedule
        current = list(schedule.specific_dates)
        window = wizard.window()
        picked = questionary.checkbox(
            "Which dates can you train?",
            choices=[
                questionary.Choice(
                    f"Week {d.week} - {d.weekday} {d.day} {d.month}",
                    value=d.iso,
                    checked=d.iso in current,
                )
                for d in window
            ],
        ).ask()
        if picked is None:
            return False
        for d in window:
            if (d.iso in current) != (d.iso in picked):
                wizard.toggle_date(d.iso)
        return True


STEP_PROMPTS: dict[StepKind, type[BaseStep]] = {
    StepKind.TEXT_GROUP: TextGroupStep,
    StepKind.SINGLE_SELECT: SingleSelectStep,
    StepKind.MULTI_SELECT: MultiSelectStep,
    StepKind.FREE_TEXT: FreeTextStep,
    StepKind.SCHEDULE_EDITOR: ScheduleEditorStep,
}
