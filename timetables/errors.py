"""
Errors raised while turning a dataset into a stacked time-series plot.
All of them are raised before anything is drawn.
"""


class TtplotError(Exception):
    """Base class for ttplot errors."""


class MissingTimeAxisError(TtplotError, ValueError):
    """Table has no datetime or duration column to use as row times."""


class UnsupportedTimeRepresentationError(TtplotError, TypeError):
    """Time values are neither datetime-like nor duration-like."""


class UnsupportedPlatformError(TtplotError, RuntimeError):
    """Installed matplotlib cannot plot datetime/duration axes."""
