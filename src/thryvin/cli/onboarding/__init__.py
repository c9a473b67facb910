"""Interactive onboarding for the terminal."""

from thryvin.cli.onboarding.wizard import OnboardingWizard

__all__ = ["OnboardingWizard"]
