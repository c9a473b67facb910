"""CLI commands previewing the schedule window and coach assignment."""

import random
from datetime import date

import typer
from rich.console import Console

from thryvin.core.coach import CoachAssigner, coach_profile
from thryvin.core.schedule import generate_window


def parse_day(value: str | None) -> date:
    """Parse an ISO date option, defaulting to today."""
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not an ISO date (YYYY-MM-DD)")


def window_command(ctx: typer.Context, today: str | None = None) -> None:
    """Print the rolling training date window."""
    config = ctx.obj.get("config")
    start = parse_day(today)
    console = Console()

    console.print(
        typer.style(f"Training window from {start.isoformat()}", bold=True, fg="cyan")
    )

    week = 0
    for day in generate_window(start, config.schedule_window_days):
        if day.week != week:
            week = day.week
            console.print(f"\n{typer.style(f'Week {week}', bold=True)}")
        console.print(f"  {day.iso}  {day.weekday} {day.day} {day.month}")


def coach_command(
    ctx: typer.Context,
    gender: str,
    style: str,
    exclude: str | None = None,
    seed: int | None = None,
) -> None:
    """Assign a coach, or reroll one excluding the current name."""
    config = ctx.obj.get("config")
    if seed is None:
        seed = config.coach_seed
    assigner = CoachAssigner(random.Random(seed))

    if exclude:
        coach = assigner.reroll(exclude, gender, style)
    else:
        coach = assigner.assign(gender, style)

    profile = coach_profile(coach.style)
    console = Console()
    console.print(f"[bold cyan]{coach.name}[/bold cyan] ({coach.style})")
    console.print(profile.personality)
