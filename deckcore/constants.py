"""
Deck constants.

Static values shared across deckcore modules. No runtime configuration here;
see deckcore.config for environment-driven settings.
"""

# Message carried by InvalidArgumentError for negative bulk counts.
NEGATIVE_COUNT_MESSAGE: str = "count must be non-negative"

# Message carried by InvalidArgumentError for an empty random range.
EMPTY_RANGE_MESSAGE: str = "randrange() requires stop > start"

# Prefix for environment variables read by deckcore.config.Settings.
ENV_PREFIX: str = "DECKCORE_"
