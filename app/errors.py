"""Errors raised by the time API."""


class TimeApiError(Exception):
    """Base error for the time API."""


class ClockReadError(TimeApiError):
    """The clock could not supply the current instant."""
