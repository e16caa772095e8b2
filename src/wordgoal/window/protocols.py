"""Collaborator interfaces for window geometry management.

The host UI framework supplies concrete implementations; tests use fakes.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Protocol

from wordgoal.domain import Point, Rect, Size


class WindowEvent(str, Enum):
    """Window notifications the geometry manager listens for."""

    RESIZE = "resize"
    RESIZE_END = "resize_end"
    MOVE = "move"


EventHandler = Callable[[], None]


class Subscription(Protocol):
    """Handle for one event registration."""

    def cancel(self) -> None:
        """Remove the registration. Must be safe to call more than once."""
        ...


class LiveWindow(Protocol):
    """A live window owned by the host framework."""

    def content_size(self) -> Size:
        ...

    def frame(self) -> Rect:
        ...

    def set_content_size(self, size: Size) -> None:
        ...

    def set_frame_origin(self, origin: Point) -> None:
        ...

    def subscribe(self, event: WindowEvent, handler: EventHandler) -> Subscription:
        """Register ``handler`` for ``event``, delivered on the UI context."""
        ...


class WindowHost(Protocol):
    """The view that will eventually be mounted in a window."""

    def window(self) -> LiveWindow | None:
        """The hosting window, or None while the view is not yet mounted."""
        ...


class DisplayLayout(Protocol):
    """Visible frames of the connected displays."""

    def visible_rects(self) -> Sequence[Rect]:
        ...

    def main_visible_rect(self) -> Rect | None:
        ...


class Scheduler(Protocol):
    """Deferred-execution queue bound to the UI-affine context.

    ``asyncio.AbstractEventLoop`` satisfies this interface.
    """

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> Any:
        ...
