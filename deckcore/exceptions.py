from typing import Optional


class DeckError(Exception):
    """Base exception for errors raised by deckcore."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class InvalidArgumentError(DeckError, ValueError):
    """Raised when an operation rejects one of its arguments before mutating
    anything (e.g. a negative count)."""

    pass


class ConfigurationError(DeckError):
    """Raised when deckcore settings (env vars or .env) cannot be loaded."""

    pass
