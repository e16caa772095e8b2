"""Typed preferences over a key-value store.

Preferences owns the persisted key names and the range rules applied to
them: word goals are clamped to [1, 10000], editor font sizes to [8, 72].
Out-of-range or malformed stored values are normalized on read, never
rejected.
"""

import logging
import math
from typing import Any

from wordgoal.config import CounterConfig, EditorConfig
from wordgoal.domain import WindowGeometry
from wordgoal.store.backends import KeyValueStore

logger = logging.getLogger(__name__)

KEY_WINDOW_WIDTH = "lastWindowWidth"
KEY_WINDOW_HEIGHT = "lastWindowHeight"
KEY_WINDOW_X = "lastWindowX"
KEY_WINDOW_Y = "lastWindowY"
KEY_WORD_LIMIT = "wordLimit"
KEY_EDITOR_FONT_SIZE = "editorFontSize"
KEY_FOCUS_MODE = "focusMode"


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_word_limit_text(text: str) -> int | None:
    """Parse a typed word goal, or return None if it is not a whole number."""
    try:
        return int(text.strip())
    except ValueError:
        return None


class Preferences:
    """Typed access to persisted application preferences.

    Example:
        prefs = Preferences(MemoryStore())
        prefs.word_limit = 20000
        prefs.word_limit  # 10000
    """

    def __init__(
        self,
        store: KeyValueStore,
        counter: CounterConfig | None = None,
        editor: EditorConfig | None = None,
    ) -> None:
        self._store = store
        self._counter = counter or CounterConfig()
        self._editor = editor or EditorConfig()

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # Word goal

    @property
    def word_limit(self) -> int:
        raw = _as_number(self._store.get(KEY_WORD_LIMIT))
        if raw is None or not raw.is_integer():
            return self._counter.default_word_limit
        return self._counter.clamp(int(raw))

    @word_limit.setter
    def word_limit(self, value: int) -> None:
        clamped = self._counter.clamp(value)
        if clamped != value:
            logger.debug("Clamped word limit %d -> %d", value, clamped)
        self._store.set(KEY_WORD_LIMIT, clamped)

    def parse_word_limit(self, text: str) -> int:
        """Apply a word goal typed by the user.

        Args:
            text: Raw field contents

        Returns:
            The word goal now in effect; unchanged if ``text`` is not an integer
        """
        value = parse_word_limit_text(text)
        if value is None:
            logger.debug("Ignoring invalid word limit %r", text)
            return self.word_limit
        self.word_limit = value
        return self.word_limit

    # Window geometry

    @property
    def window_geometry(self) -> WindowGeometry:
        def read(key: str) -> float:
            value = _as_number(self._store.get(key, 0.0))
            return 0.0 if value is None else value

        return WindowGeometry(
            width=read(KEY_WINDOW_WIDTH),
            height=read(KEY_WINDOW_HEIGHT),
            origin_x=read(KEY_WINDOW_X),
            origin_y=read(KEY_WINDOW_Y),
        )

    def store_window_size(self, width: float, height: float) -> None:
        self._store.set(KEY_WINDOW_WIDTH, float(width))
        self._store.set(KEY_WINDOW_HEIGHT, float(height))

    def store_window_origin(self, x: float, y: float) -> None:
        self._store.set(KEY_WINDOW_X, float(x))
        self._store.set(KEY_WINDOW_Y, float(y))

    # Editor

    @property
    def editor_font_size(self) -> float:
        value = _as_number(self._store.get(KEY_EDITOR_FONT_SIZE))
        if value is None:
            return self._editor.default_font_size
        return self._editor.clamp(value)

    @editor_font_size.setter
    def editor_font_size(self, value: float) -> None:
        self._store.set(KEY_EDITOR_FONT_SIZE, self._editor.clamp(value))

    def increase_font_size(self) -> float:
        self.editor_font_size = self.editor_font_size + self._editor.font_size_step
        return self.editor_font_size

    def decrease_font_size(self) -> float:
        self.editor_font_size = self.editor_font_size - self._editor.font_size_step
        return self.editor_font_size

    def reset_font_size(self) -> float:
        self.editor_font_size = self._editor.default_font_size
        return self.editor_font_size

    @property
    def focus_mode(self) -> bool:
        return bool(self._store.get(KEY_FOCUS_MODE, False))

    @focus_mode.setter
    def focus_mode(self, value: bool) -> None:
        self._store.set(KEY_FOCUS_MODE, bool(value))

    def toggle_focus_mode(self) -> bool:
        self.focus_mode = not self.focus_mode
        return self.focus_mode

    def reset_defaults(self) -> None:
        """Restore the default font size and word goal."""
        self.reset_font_size()
        self.word_limit = self._counter.default_word_limit
