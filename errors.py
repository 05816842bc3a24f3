"""
Error kinds raised by hoshi. All of them end the run; none is retried.
"""


class HoshiError(Exception):
    """Base class for fatal hoshi errors."""

    exit_code = 1


class ConfigurationError(HoshiError):
    """The active user or another required setting cannot be determined."""

    exit_code = 3


class TerminalSizeError(ConfigurationError):
    """The terminal width is unavailable."""

    exit_code = 1


class RetrievalError(HoshiError):
    """A page could not be fetched or decoded."""

    exit_code = 4


class RetrievalCancelled(HoshiError):
    """The user interrupted star retrieval."""

    exit_code = 130
