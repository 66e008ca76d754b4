"""
Centralized configuration management for deckcore.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import ENV_PREFIX


class Settings(BaseSettings):
    """
    Defines library settings, loaded from environment variables or .env files.
    """
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    # --- Randomness ---
    # Seed for the single process-wide source that decks built without a
    # random_source share (see random_source.get_default_source). Set
    # DECKCORE_SHUFFLE_SEED for reproducible runs; unset seeds from the OS.
    # Read lazily on the first shuffle of such a deck, never at construction.
    shuffle_seed: Optional[int] = None


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Returns the process-wide Settings instance. Call
    get_settings.cache_clear() to re-read the environment."""
    return Settings()
