"""taskdeck - markdown task list dashboard for a personal workspace."""

__version__ = "0.1.0"
