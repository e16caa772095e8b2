"""Window geometry manager.

Bridges a persisted size/position record and a live window, in both
directions:

1. Wait (by deferred retry) until the owning view is mounted in a window
2. Apply the persisted size once and a clamped persisted origin
3. Report the window's size/origin back on every resize, resize-end and move

All work runs on the scheduler's UI-affine context. The manager never owns the
window or the host view; both are held through weak references.
"""

import logging
import weakref
from collections.abc import Callable
from enum import Enum
from types import TracebackType

from wordgoal.domain import Point, Rect, Size
from wordgoal.utils.logging import GeometryStats
from wordgoal.window.placement import DEFAULT_VISIBLE_RECT, adjusted_origin
from wordgoal.window.protocols import (
    DisplayLayout,
    LiveWindow,
    Scheduler,
    Subscription,
    WindowEvent,
    WindowHost,
)

logger = logging.getLogger(__name__)

SizeCallback = Callable[[Size], None]
OriginCallback = Callable[[Point], None]


class AttachState(str, Enum):
    """Connection state of a WindowGeometryManager."""

    UNATTACHED = "unattached"
    ATTACHED = "attached"


class WindowGeometryManager:
    """Tracks one live window's geometry for a single owning session.

    Example:
        manager = WindowGeometryManager(
            initial_size=Size(800, 600),
            initial_origin=Point(120, 80),
            on_size_change=recorder.on_size_change,
            on_origin_change=recorder.on_origin_change,
            scheduler=queue,
            displays=layout,
        )
        with manager:
            manager.attach(view)
            queue.run_until_idle()
    """

    def __init__(
        self,
        initial_size: Size | None,
        initial_origin: Point | None,
        on_size_change: SizeCallback,
        on_origin_change: OriginCallback,
        scheduler: Scheduler,
        displays: DisplayLayout,
        default_visible_rect: Rect = DEFAULT_VISIBLE_RECT,
        stats: GeometryStats | None = None,
    ) -> None:
        self._initial_size = initial_size
        self._initial_origin = initial_origin
        self._on_size_change = on_size_change
        self._on_origin_change = on_origin_change
        self._scheduler = scheduler
        self._displays = displays
        self._default_visible_rect = default_visible_rect
        self._stats = stats if stats is not None else GeometryStats()

        self._window_ref: weakref.ref[LiveWindow] | None = None
        self._host_ref: weakref.ref[WindowHost] | None = None
        self._subscriptions: list[Subscription] = []
        self._did_apply_initial_size = False

    @property
    def state(self) -> AttachState:
        if self.window is None:
            return AttachState.UNATTACHED
        return AttachState.ATTACHED

    @property
    def window(self) -> LiveWindow | None:
        """The attached window, or None if unattached or already gone."""
        if self._window_ref is None:
            return None
        return self._window_ref()

    @property
    def subscription_count(self) -> int:
        return len(self._subscriptions)

    @property
    def stats(self) -> GeometryStats:
        return self._stats

    def attach(self, host: WindowHost) -> None:
        """Connect to the window hosting ``host`` once it exists.

        The readiness check always runs on the scheduler, never inline. A
        later call to attach supersedes any check still pending for an
        earlier host.

        Args:
            host: The owning view
        """
        host_ref = weakref.ref(host)
        self._host_ref = host_ref
        self._scheduler.call_soon(self._try_connect, host_ref)

    def _try_connect(self, host_ref: "weakref.ref[WindowHost]") -> None:
        if host_ref is not self._host_ref:
            return
        host = host_ref()
        if host is None:
            logger.debug("Host view released before its window appeared")
            return

        self._stats.attach_attempts += 1
        window = host.window()
        if window is None:
            # Try again next tick.
            self._stats.attach_retries += 1
            self._scheduler.call_soon(self._try_connect, host_ref)
            return

        if self.window is window:
            return

        self._connect(window)

    def _connect(self, window: LiveWindow) -> None:
        self._window_ref = weakref.ref(window)
        self._install_observers(window)
        self._apply_initial_size_if_needed(window)
        self._apply_initial_origin_if_needed(window)

        logger.debug("Attached to window 0x%x", id(window))
        self._report_size(window)
        self._report_origin(window)

    def _apply_initial_size_if_needed(self, window: LiveWindow) -> None:
        if self._did_apply_initial_size or self._initial_size is None:
            return
        self._did_apply_initial_size = True
        logger.debug("Applying initial size %s", self._initial_size.to_tuple())
        window.set_content_size(self._initial_size)

    def _apply_initial_origin_if_needed(self, window: LiveWindow) -> None:
        if self._initial_origin is None:
            return
        # Frame size already reflects any initial content size.
        frame_size = window.frame().size
        origin = adjusted_origin(
            self._initial_origin,
            frame_size,
            self._displays,
            self._default_visible_rect,
        )
        window.set_frame_origin(origin)

    def _install_observers(self, window: LiveWindow) -> None:
        self._remove_observers()

        manager_ref = weakref.ref(self)
        window_ref = weakref.ref(window)

        def on_resize() -> None:
            manager, live = manager_ref(), window_ref()
            if manager is None or live is None:
                return
            manager._report_size(live)

        def on_move() -> None:
            manager, live = manager_ref(), window_ref()
            if manager is None or live is None:
                return
            manager._report_origin(live)

        self._subscriptions.append(window.subscribe(WindowEvent.RESIZE, on_resize))
        self._subscriptions.append(window.subscribe(WindowEvent.RESIZE_END, on_resize))
        self._subscriptions.append(window.subscribe(WindowEvent.MOVE, on_move))

    def _remove_observers(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.cancel()

    def _report_size(self, window: LiveWindow) -> None:
        self._stats.size_reports += 1
        self._on_size_change(window.content_size())

    def _report_origin(self, window: LiveWindow) -> None:
        self._stats.origin_reports += 1
        self._on_origin_change(window.frame().origin)

    def detach(self) -> None:
        """Remove all observers and forget the window and any pending host."""
        self._remove_observers()
        self._window_ref = None
        self._host_ref = None

    def close(self) -> None:
        """Tear down the session. Equivalent to detach()."""
        self.detach()

    def __enter__(self) -> "WindowGeometryManager":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
