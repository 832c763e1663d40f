"""Domain error types."""


class EngineUnavailableError(Exception):
    """Raised when no recognition engine can be built at startup."""


class EngineStartRejectedError(Exception):
    """Raised by an engine that refuses a start command (already running, exhausted, ...)."""


class PersistenceError(Exception):
    """Raised by a key/value store when the draft cannot be read or written."""
