"""Preferences persistence for wordgoal.

Key classes:
- KeyValueStore: Interface for durable get/set of named values
- MemoryStore: In-memory store
- JsonFileStore: JSON file store
- Preferences: Typed, range-enforcing facade over a store
"""

from wordgoal.store.backends import JsonFileStore, KeyValueStore, MemoryStore
from wordgoal.store.preferences import (
    KEY_EDITOR_FONT_SIZE,
    KEY_FOCUS_MODE,
    KEY_WINDOW_HEIGHT,
    KEY_WINDOW_WIDTH,
    KEY_WINDOW_X,
    KEY_WINDOW_Y,
    KEY_WORD_LIMIT,
    Preferences,
    parse_word_limit_text,
)

__all__ = [
    "KEY_EDITOR_FONT_SIZE",
    "KEY_FOCUS_MODE",
    "KEY_WINDOW_HEIGHT",
    "KEY_WINDOW_WIDTH",
    "KEY_WINDOW_X",
    "KEY_WINDOW_Y",
    "KEY_WORD_LIMIT",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "Preferences",
    "parse_word_limit_text",
]
