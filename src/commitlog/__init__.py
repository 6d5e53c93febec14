"""commitlog - structured commit history for dashboards, parsed from git log."""

__version__ = "0.1.0"
