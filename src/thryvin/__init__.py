"""Thryvin onboarding wizard and coach assignment."""
