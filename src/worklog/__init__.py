"""Worklog: daily activity log with month reports and share links."""

__version__ = "0.1.0"


# Load the CLI on first access so importing the package stays cheap
def __getattr__(name):
    if name == "main":
        from worklog.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
