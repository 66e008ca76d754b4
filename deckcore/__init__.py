"""Deckcore - A generic, shuffleable deck collection."""

from .deck import Deck
from .random_source import (
    BaseRandomSource,
    PseudoRandomSource,
    RandomSourceConfig,
    get_default_source,
)
from .config import Settings, get_settings
from .exceptions import ConfigurationError, DeckError, InvalidArgumentError

__all__ = [
    "Deck",
    "BaseRandomSource",
    "PseudoRandomSource",
    "RandomSourceConfig",
    "get_default_source",
    "Settings",
    "get_settings",
    "DeckError",
    "ConfigurationError",
    "InvalidArgumentError",
]
