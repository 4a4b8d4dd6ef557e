"""Profile selection step for multi-stage authentication flows."""

__version__ = "0.1.0"
