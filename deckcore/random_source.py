# deckcore/random_source.py

"""
Defines the BaseRandomSource abstract class and the PseudoRandomSource used by
Deck.shuffle to draw uniform integers.
"""

import logging
import random
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import get_settings
from .constants import EMPTY_RANGE_MESSAGE
from .exceptions import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)


class BaseRandomSource(ABC):
    """
    Abstract base class for the randomness providers a Deck can shuffle with.
    """

    @abstractmethod
    def randrange(self, start: int, stop: int) -> int:
        """
        Returns an integer drawn uniformly from the closed-open range [start, stop).

        Args:
            start: Lowest value that may be returned.
            stop: One past the highest value that may be returned.

        Raises:
            InvalidArgumentError: If stop <= start.
        """
        pass


class RandomSourceConfig(BaseModel):
    """Configuration for the PseudoRandomSource."""

    model_config = ConfigDict(extra="forbid")

    seed: Optional[int] = Field(
        default=None,
        description="Seed for the underlying generator. None seeds from the OS.",
    )


class PseudoRandomSource(BaseRandomSource):
    """
    Mersenne Twister backed source built on a private random.Random instance.
    Not suitable for anything needing cryptographic randomness.
    """

    def __init__(self, config: Optional[RandomSourceConfig] = None):
        if config is None:
            config = RandomSourceConfig()
        self.config = config
        self._rng = random.Random(config.seed)
        if config.seed is not None:
            logger.debug(f"Seeded PseudoRandomSource with {config.seed}")

    def randrange(self, start: int, stop: int) -> int:
        if stop <= start:
            raise InvalidArgumentError(
                f"{EMPTY_RANGE_MESSAGE} (got start={start}, stop={stop})"
            )
        return self._rng.randrange(start, stop)


@lru_cache(maxsize=None)
def get_default_source() -> PseudoRandomSource:
    """
    Returns the process-wide source shared by decks built without one.

    Seeded once from Settings.shuffle_seed, so a seeded run is reproducible
    while separate decks still consume different parts of the same stream.
    Call get_default_source.cache_clear() to re-read settings and reseed.

    Raises:
        ConfigurationError: If the settings cannot be loaded (e.g. a
            non-integer DECKCORE_SHUFFLE_SEED).
    """
    try:
        seed = get_settings().shuffle_seed
    except ValidationError as e:
        logger.error(f"Invalid deckcore settings: {e}")
        raise ConfigurationError(
            "Invalid deckcore settings; check DECKCORE_* variables",
            original_exception=e,
        ) from e
    return PseudoRandomSource(RandomSourceConfig(seed=seed))
