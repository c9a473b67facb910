"""Onboarding wizard orchestrator."""

import logging
import random
from datetime import date
from typing import Callable

import questionary
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from thryvin.cli.onboarding.steps import STEP_PROMPTS
from thryvin.core.catalog import DEFAULT_STEPS, StepDefinition, load_catalog
from thryvin.core.coach import CoachAssigner, coach_profile
from thryvin.core.payload import build_registration_payload
from thryvin.core.wizard import Completion, Outcome, WizardController
from thryvin.utils.config import Config

logger = logging.getLogger(__name__)


class OnboardingWizard:
    """Guides a new user through onboarding in the terminal."""

    def __init__(self, config: Config, today: Callable[[], date] = date.today):
        self.config = config
        steps: tuple[StepDefinition, ...] = DEFAULT_STEPS
        if config.catalog_path is not None:
            steps = load_catalog(config.catalog_path)
        self.controller = WizardController(
            steps,
            today=today,
            assigner=CoachAssigner(random.Random(config.coach_seed)),
            min_age=config.min_age,
            window_days=config.schedule_window_days,
        )

    def run(self) -> bool:
        """Run the onboarding flow. Returns True if a profile was saved."""
        console = Console()

        console.print("\n[bold magenta]Welcome to Thryvin![/bold magenta]")
        console.print("Let's build your training profile.\n")

        while not self.controller.completed:
            step = self.controller.current_step
            state = self.controller.state
            console.print(
                f"\n[dim]Step {state.current_step_index + 1} of {state.step_count}"
                f" ({state.progress_percent:.0f}%)[/dim]"
            )
            console.print(f"[bold]{step.title}[/bold]")
            if step.subtitle:
                console.print(f"[dim]{step.subtitle}[/dim]")

            prompt = STEP_PROMPTS[step.kind](step, console)
            if not prompt.run(self.controller):
                return self._cancel(console)

            action = questionary.select(
                "",
                choices=["Complete" if state.is_last else "Next", "Back"],
            ).ask()
            if action is None:
                return self._cancel(console)

            if action == "Back":
                result = self.controller.retreat()
                if result.outcome == Outcome.EXIT_REQUESTED:
                    return self._cancel(console)
                continue

            result = self.controller.advance()
            if result.outcome == Outcome.BLOCKED:
                console.print(f"[red]{result.error.message}[/red]")

        completion = self.controller.completion
        if not self._reveal_coach(console, completion):
            return self._cancel(console)

        self._save_profile(completion)
        console.print("\n[green]Profile saved![/green]")
        console.print(f"Profile file: {self.config.profile_path}\n")
        return True

    def _reveal_coach(self, console: Console, completion: Completion) -> bool:
        """Show the assigned coach and let the user switch until they keep one."""
        while True:
            coach = completion.coach
            profile = coach_profile(coach.style)
            console.print(
                Panel(
                    Text.assemble(
                        (f"{coach.name}\n", "bold cyan"),
                        (f"{profile.personality}\n\n", "italic"),
                        profile.description,
                    ),
                    title="Meet your coach",
                    border_style="magenta",
                )
            )

            choice = questionary.select(
                "Happy with your coach?",
                choices=["Keep this coach", "Switch coach"],
            ).ask()
            if choice is None:
                return False
            if choice == "Keep this coach":
                return True

            result = self.controller.reroll_coach()
            if result.error is not None:
                console.print(f"[yellow]{result.error.message}[/yellow]")

    def _save_profile(self, completion: Completion) -> None:
        """Write the registration payload to the profile file."""
        payload = build_registration_payload(completion.answers, completion.coach)
        profile_path = self.config.profile_path
        profile_path.parent.mkdir(parents=True, exist_ok=True)
        with open(profile_path, "w") as f:
            yaml.dump(payload, f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved onboarding profile to {profile_path}")

    def _cancel(self, console: Console) -> bool:
        console.print("[yellow]Onboarding cancelled.[/yellow]")
        return False
