"""Shared fixtures for wordgoal tests."""

import logging

import pytest

from tests.fakes import Recorder
from wordgoal.domain import Rect
from wordgoal.store import MemoryStore, Preferences
from wordgoal.window import DeferredQueue, StaticDisplayLayout


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def queue() -> DeferredQueue:
    return DeferredQueue()


@pytest.fixture
def single_display() -> StaticDisplayLayout:
    screen = Rect(0, 0, 1200, 800)
    return StaticDisplayLayout(rects=[screen], main=screen)


@pytest.fixture
def dual_display() -> StaticDisplayLayout:
    left = Rect(0, 0, 1440, 875)
    right = Rect(1440, -200, 1920, 1055)
    return StaticDisplayLayout(rects=[left, right], main=left)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def preferences(store: MemoryStore) -> Preferences:
    return Preferences(store)
