"""AWS context manager - profile, account and explorer region state."""

__version__ = "0.1.0"
