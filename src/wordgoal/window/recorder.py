"""Persistence callbacks for window geometry."""

import logging

from wordgoal.domain import MIN_PERSISTED_SIZE, Point, Size
from wordgoal.store import Preferences
from wordgoal.utils.logging import GeometryStats

logger = logging.getLogger(__name__)


class GeometryRecorder:
    """Reads the stored geometry and writes back reported changes.

    Sizes below ``min_size`` in either dimension are neither restored nor
    stored. An origin of exactly (0, 0) is treated as "never stored".
    """

    def __init__(
        self,
        preferences: Preferences,
        min_size: float = MIN_PERSISTED_SIZE,
        stats: GeometryStats | None = None,
    ) -> None:
        self._preferences = preferences
        self._min_size = min_size
        self._stats = stats if stats is not None else GeometryStats()

    @property
    def initial_size(self) -> Size | None:
        return self._preferences.window_geometry.stored_size(self._min_size)

    @property
    def initial_origin(self) -> Point | None:
        return self._preferences.window_geometry.stored_origin()

    def on_size_change(self, size: Size) -> None:
        if not size.at_least(self._min_size):
            self._stats.ignored_size_reports += 1
            logger.debug("Ignoring undersized window size %s", size.to_tuple())
            return
        self._preferences.store_window_size(size.width, size.height)

    def on_origin_change(self, origin: Point) -> None:
        self._preferences.store_window_origin(origin.x, origin.y)
