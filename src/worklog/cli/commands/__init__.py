"""CLI commands for worklog."""
