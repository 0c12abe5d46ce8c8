"""Command-line interface for fintrack."""
