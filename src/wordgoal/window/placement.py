"""Window placement against the current display layout.

This module keeps a restored window on screen:
- Choosing the display rectangle that should host a desired origin
- Clamping an origin so the whole frame fits inside that rectangle

All functions are pure; the display layout is queried once per call and never
cached, since monitors can change between launches.
"""

import logging
from collections.abc import Sequence

from wordgoal.domain import Point, Rect, Size
from wordgoal.window.protocols import DisplayLayout

logger = logging.getLogger(__name__)

DEFAULT_VISIBLE_RECT = Rect(0.0, 0.0, 1200.0, 800.0)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper], favoring lower if the range is inverted.

    Examples:
        >>> clamp(-50.0, 0.0, 800.0)
        0.0
        >>> clamp(10.0, 0.0, -200.0)
        0.0
    """
    if upper < lower:
        return lower
    return min(max(value, lower), upper)


def select_visible_rect(
    origin: Point,
    visible_rects: Sequence[Rect],
    main_rect: Rect | None = None,
    default: Rect = DEFAULT_VISIBLE_RECT,
) -> Rect:
    """Pick the display rectangle a window at ``origin`` should land on.

    Preference order: the first rectangle containing the origin, then the main
    display, then the first rectangle available, then ``default``.

    Args:
        origin: Desired window origin
        visible_rects: Visible frames of all connected displays
        main_rect: Visible frame of the main display, if known
        default: Fallback when no display information is available

    Returns:
        The chosen rectangle
    """
    for rect in visible_rects:
        if rect.contains(origin):
            return rect
    if main_rect is not None:
        return main_rect
    if visible_rects:
        return visible_rects[0]
    return default


def clamp_origin(desired: Point, frame_size: Size, rect: Rect) -> Point:
    """Clamp an origin so a frame of ``frame_size`` stays within ``rect``.

    A frame larger than the rectangle is pinned to the rectangle's minimum edge.

    Args:
        desired: Requested origin
        frame_size: Size of the window frame
        rect: Target visible rectangle

    Returns:
        Clamped origin

    Examples:
        >>> clamp_origin(Point(-50, 900), Size(400, 300), Rect(0, 0, 1200, 800))
        Point(x=0, y=500)
    """
    return Point(
        x=clamp(desired.x, rect.min_x, rect.max_x - frame_size.width),
        y=clamp(desired.y, rect.min_y, rect.max_y - frame_size.height),
    )


def adjusted_origin(
    desired: Point,
    frame_size: Size,
    displays: DisplayLayout,
    default: Rect = DEFAULT_VISIBLE_RECT,
) -> Point:
    """Compute an on-screen origin using the live display layout.

    Args:
        desired: Requested origin (usually the persisted one)
        frame_size: Current window frame size
        displays: Display layout provider, queried fresh
        default: Fallback rectangle when no displays are reported

    Returns:
        Origin clamped into the chosen display's visible frame
    """
    target = select_visible_rect(
        desired,
        list(displays.visible_rects()),
        displays.main_visible_rect(),
        default,
    )
    origin = clamp_origin(desired, frame_size, target)
    if origin != desired:
        logger.debug(
            "Clamped origin %s -> %s within %s",
            desired.to_tuple(),
            origin.to_tuple(),
            target.to_dict(),
        )
    return origin
