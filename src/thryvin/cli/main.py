"""CLI interface for thryvin using Typer."""

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from thryvin.cli.onboard import onboard_command
from thryvin.cli.preview import coach_command, window_command
from thryvin.utils.config import Config

app = typer.Typer(
    name="thryvin",
    help="Thryvin: fitness onboarding and coach assignment",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


def load_config_callback(ctx: typer.Context, workspace: str):
    """Load configuration and store it in the context."""
    try:
        cfg = Config.load(Path(workspace))
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@app.callback()
def main(
    ctx: typer.Context,
    workspace: str = typer.Option(
        Path.home() / ".thryvin",
        "--workspace",
        "-w",
        help="Path to workspace directory",
        callback=load_config_callback,
    ),
) -> None:
    """
    Thryvin: fitness onboarding and coach assignment.

    Configuration is loaded from ~/.thryvin/ by default.
    Use --workspace to specify a custom workspace directory.
    """
    pass


@app.command()
def onboard(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Echo log records to stderr")
    ] = False,
) -> None:
    """Run interactive onboarding and save the resulting profile."""
    onboard_command(ctx, verbose=verbose)


@app.command()
def window(
    ctx: typer.Context,
    today: Annotated[
        str | None,
        typer.Option("--today", help="First day of the window (YYYY-MM-DD)"),
    ] = None,
) -> None:
    """Show the rolling training date window."""
    window_command(ctx, today=today)


@app.command()
def coach(
    ctx: typer.Context,
    gender: Annotated[
        str, typer.Option("--gender", "-g", help="male, female or other")
    ] = "other",
    style: Annotated[
        str, typer.Option("--style", "-s", help="Coaching style")
    ] = "balanced",
    exclude: Annotated[
        str | None,
        typer.Option("--exclude", help="Current coach name to reroll away from"),
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for a reproducible draw")
    ] = None,
) -> None:
    """Assign a coach for a gender and coaching style."""
    coach_command(ctx, gender=gender, style=style, exclude=exclude, seed=seed)


if __name__ == "__main__":
    app()
