"""Command-line interface for worklog."""
