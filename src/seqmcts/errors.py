"""Errors raised by the search engine."""


class ConfigurationError(ValueError):
    """Raised when a search is configured in a way that cannot run.

    The search aborts before any iteration executes.
    """
