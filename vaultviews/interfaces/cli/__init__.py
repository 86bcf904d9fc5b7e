"""CLI interface."""
