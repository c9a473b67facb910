"""Onboard CLI command."""

import typer

from thryvin.cli.onboarding import OnboardingWizard
from thryvin.core.exceptions import InvalidCatalogError
from thryvin.utils.logging import setup_logging


def onboard_command(ctx: typer.Context, verbose: bool = False) -> None:
    """Run the interactive onboarding wizard."""
    config = ctx.obj.get("config")
    setup_logging(config, console_output=verbose)

    try:
        wizard = OnboardingWizard(config)
    except InvalidCatalogError as e:
        typer.echo(f"Invalid step catalog: {e}", err=True)
        raise typer.Exit(1)

    if not wizard.run():
        raise typer.Exit(1)
