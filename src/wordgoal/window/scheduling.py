"""Single-context scheduling and static display layouts.

DeferredQueue is a minimal run loop for one UI-affine context: work items are
queued with ``call_soon`` and executed in FIFO order one tick at a time. Items
queued while a tick is running wait for the next tick, which is what lets a
readiness check retry "once per scheduling tick" instead of spinning.
"""

import logging
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from wordgoal.domain import Rect

logger = logging.getLogger(__name__)


class DeferredQueue:
    """FIFO deferred-execution queue.

    Example:
        queue = DeferredQueue()
        queue.call_soon(print, "hello")
        queue.run_once()
    """

    def __init__(self) -> None:
        self._items: deque[tuple[Callable[..., Any], tuple[Any, ...]]] = deque()
        self._ticks = 0

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        """Queue ``callback(*args)`` for a later tick."""
        self._items.append((callback, args))

    def run_once(self) -> int:
        """Run the items that were queued before this tick started.

        Returns:
            Number of items executed
        """
        batch = len(self._items)
        for _ in range(batch):
            callback, args = self._items.popleft()
            callback(*args)
        self._ticks += 1
        return batch

    def run_until_idle(self, max_ticks: int = 1000) -> int:
        """Run ticks until the queue is empty or ``max_ticks`` is reached.

        Args:
            max_ticks: Upper bound on ticks, guarding against endless retries

        Returns:
            Number of ticks executed
        """
        ticks = 0
        while self._items and ticks < max_ticks:
            self.run_once()
            ticks += 1
        if self._items:
            logger.debug("Queue still busy after %d ticks (%d pending)", ticks, len(self._items))
        return ticks

    @property
    def pending(self) -> int:
        return len(self._items)

    @property
    def ticks(self) -> int:
        return self._ticks


@dataclass
class StaticDisplayLayout:
    """A fixed display layout.

    Attributes:
        rects: Visible frames of all displays
        main: Visible frame of the main display (None if unknown)
    """

    rects: Sequence[Rect] = field(default_factory=list)
    main: Rect | None = None

    def visible_rects(self) -> Sequence[Rect]:
        return list(self.rects)

    def main_visible_rect(self) -> Rect | None:
        return self.main
