"""
This module defines the Deck class, a generic ordered collection with a "top"
(the most recently placed end) that supports shuffling, drawing, peeking and
predicate-based extraction of opaque items.
"""

import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .constants import NEGATIVE_COUNT_MESSAGE
from .exceptions import InvalidArgumentError
from .random_source import BaseRandomSource, get_default_source

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[T], bool]


def _validate_count(count: int) -> None:
    if count < 0:
        logger.debug(f"Rejected negative count: {count}")
        raise InvalidArgumentError(NEGATIVE_COUNT_MESSAGE)


class Deck(Generic[T]):
    """
    A mutable, ordered sequence of items.

    Index 0 of the backing list is the bottom and the last index is the top.
    Single-item queries return None when there is nothing to return; bulk
    queries return a (possibly short) list. Only negative counts are errors.

    Not thread-safe: callers sharing a Deck must serialize access themselves.
    """

    def __init__(
        self,
        initial: Optional[Iterable[T]] = None,
        random_source: Optional[BaseRandomSource] = None,
    ):
        """
        Create a deck holding a copy of `initial`, bottom first.

        Parameters:
            initial (Optional[Iterable[T]]): Items in bottom-to-top order. The
                deck keeps its own copy, so later changes to the caller's
                sequence are not visible through the deck.
            random_source (Optional[BaseRandomSource]): Provider of uniform
                integers used by shuffle(). When omitted, the process-wide
                default source is looked up on the first shuffle(), so
                building a deck never reads settings.
        """
        self._items: List[T] = list(initial) if initial is not None else []
        self.random_source: Optional[BaseRandomSource] = random_source

    def _source(self) -> BaseRandomSource:
        if self.random_source is not None:
            return self.random_source
        return get_default_source()

    # --- Reordering ---

    def shuffle(self) -> None:
        """
        Reorder all items uniformly at random, in place (Fisher-Yates).

        Walks i from the top index down to 1, swapping item i with an item j
        drawn from [0, i]. A deck of n items consumes exactly n - 1 draws from
        the random source; decks of 0 or 1 items consume none.
        """
        items = self._items
        if len(items) < 2:
            return
        source = self._source()
        for i in range(len(items) - 1, 0, -1):
            j = source.randrange(0, i + 1)
            items[i], items[j] = items[j], items[i]
        logger.debug(f"Shuffled deck of {len(items)} items.")

    # --- Top access ---

    def draw(self) -> Optional[T]:
        """Remove and return the top item, or None if the deck is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def draw_many(self, count: int) -> List[T]:
        """
        Remove and return up to `count` items from the top, topmost first.

        Asking for more items than the deck holds returns everything that is
        left and empties the deck.

        Raises:
            InvalidArgumentError: If count is negative.
        """
        _validate_count(count)
        drawn = [self._items.pop() for _ in range(min(count, len(self._items)))]
        logger.debug(f"Drew {len(drawn)} of {count} requested items.")
        return drawn

    def peek(self) -> Optional[T]:
        """Return the top item without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[-1]

    def peek_many(self, count: int) -> List[T]:
        """
        Return up to `count` items from the top, topmost first, without
        removing them.

        Raises:
            InvalidArgumentError: If count is negative.
        """
        _validate_count(count)
        start = max(len(self._items) - count, 0)
        return self._items[start:][::-1]

    # --- Predicate extraction ---

    def _find_from_top(self, predicate: Predicate[T]) -> Optional[int]:
        for index in range(len(self._items) - 1, -1, -1):
            if predicate(self._items[index]):
                return index
        return None

    def pull(self, predicate: Predicate[T]) -> Optional[T]:
        """
        Remove and return the item nearest the top for which `predicate` is
        true. Returns None if nothing matches.

        The deck is only mutated once a match has been found, so a predicate
        that raises leaves the deck untouched.
        """
        index = self._find_from_top(predicate)
        if index is None:
            logger.debug("Pull found no matching item.")
            return None
        logger.debug(f"Pulled item at position {index}.")
        return self._items.pop(index)

    def pull_many(self, count: int, predicate: Predicate[T]) -> List[T]:
        """
        Pull up to `count` matching items, one pull at a time, each scan
        starting again from the top.

        Args:
            count: Maximum number of items to pull.
            predicate: Called with candidate items; truthy means "take it".

        Returns:
            The pulled items in the order they were found (nearest the top
            first). Shorter than `count` once no matches remain.

        Raises:
            InvalidArgumentError: If count is negative.
        """
        _validate_count(count)
        pulled: List[T] = []
        while len(pulled) < count:
            index = self._find_from_top(predicate)
            if index is None:
                break
            pulled.append(self._items.pop(index))
        logger.debug(f"Pulled {len(pulled)} of {count} requested items.")
        return pulled

    def pull_all(self, predicate: Predicate[T]) -> List[T]:
        """
        Remove and return every matching item, nearest the top first.
        Items that do not match keep their relative order.
        """
        pulled: List[T] = []
        kept: List[T] = []
        for item in reversed(self._items):
            if predicate(item):
                pulled.append(item)
            else:
                kept.append(item)
        kept.reverse()
        self._items[:] = kept
        logger.debug(f"Pulled all {len(pulled)} matching items.")
        return pulled

    def remove(self, predicate: Predicate[T]) -> None:
        """Discard every item for which `predicate` is true."""
        self.pull_all(predicate)

    # --- Insertion ---

    def place_on_top(self, item: T) -> None:
        self._items.append(item)

    def place_on_bottom(self, item: T) -> None:
        self._items.insert(0, item)

    # --- Inspection ---

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def to_list(self) -> List[T]:
        """Return a bottom-to-top copy of the contents. Safe to mutate."""
        return list(self._items)

    # --- Consumption ---

    def drain(self) -> Iterator[T]:
        """
        Lazily draw items from the top until the deck is empty.

        Every item yielded has already been removed from the deck. The
        generator reads the live deck on each step, so items placed on top
        while it is suspended are drawn next. Once exhausted the deck is
        empty and a new drain() yields nothing.
        """
        logger.debug(f"Draining deck of {len(self._items)} items.")
        while not self.is_empty():
            yield self.draw()
        logger.debug("Deck drained.")

    def __iter__(self) -> Iterator[T]:
        # Destructive: iterating a Deck draws from it.
        return self.drain()

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"Deck(size={len(self._items)}, items={self._items!r})"
