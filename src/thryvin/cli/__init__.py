"""Command line interface for thryvin."""
