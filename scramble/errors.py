"""
Exceptions raised by the engine.

Validation failures are NOT exceptions (they come back as `Rejected`
outcomes); these cover configuration and environment problems only.
"""


class WordPoolError(RuntimeError):
    """The start-word pool is missing, unreadable, or empty."""


class OracleUnavailableError(RuntimeError):
    """A spell oracle cannot answer for the requested language."""


class SessionError(RuntimeError):
    """Operation is not valid in the session's current phase."""
