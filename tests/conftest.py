import pytest
from typing import Generator, List, Optional

from deckcore.config import get_settings
from deckcore.deck import Deck
from deckcore.random_source import BaseRandomSource, get_default_source


# each test runs with cwd in its temp dir so a stray .env cannot leak in
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Temporarily change the process working directory to the test's tmpdir.

    Parameters:
        request: The pytest `request` fixture used to obtain the per-test `tmpdir` fixture.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    with tmpdir.as_cwd():
        yield


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch) -> Generator[None, None, None]:
    """Clear DECKCORE_* overrides, the cached Settings and the shared default
    random source around each test."""
    monkeypatch.delenv("DECKCORE_SHUFFLE_SEED", raising=False)
    get_settings.cache_clear()
    get_default_source.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_source.cache_clear()


class ScriptedRandomSource(BaseRandomSource):
    """
    Random source for tests: returns queued values (or `start` once the queue
    runs dry) and records every (start, stop) it was asked for.
    """

    def __init__(self, values: Optional[List[int]] = None):
        self.values = list(values or [])
        self.calls: List[tuple] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        if self.values:
            return self.values.pop(0)
        return start


@pytest.fixture
def scripted_source() -> ScriptedRandomSource:
    return ScriptedRandomSource()


@pytest.fixture
def deck_factory(scripted_source: ScriptedRandomSource):
    """
    Build decks wired to the shared `scripted_source` fixture.

    Returns:
        Callable[..., Deck]: `deck_factory(items)` returns a Deck over a copy of `items`.
    """

    def _create(items=None) -> Deck:
        return Deck(items, random_source=scripted_source)

    return _create