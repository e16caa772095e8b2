"""Core geometric types for window placement.

This module defines the value types shared by the placement algorithms and the
window geometry manager:
- Point: A 2D point in screen coordinates
- Size: A width/height pair
- Rect: An axis-aligned rectangle (a display's visible frame or a window frame)
- WindowGeometry: The persisted size/position record of the document window

Coordinates follow the bottom-left origin convention of the host window system;
nothing here depends on which way the y axis grows.
"""

from dataclasses import dataclass
from typing import Any

# Minimum width and height (logical units) worth persisting or restoring.
MIN_PERSISTED_SIZE = 300.0


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D screen space.

    Attributes:
        x: X coordinate in logical units
        y: Y coordinate in logical units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Size:
    """A width/height pair in logical units."""

    width: float
    height: float

    def at_least(self, minimum: float) -> bool:
        """Check that both dimensions reach ``minimum``.

        Args:
            minimum: Smallest acceptable width and height

        Returns:
            True if width and height are both >= minimum
        """
        return self.width >= minimum and self.height >= minimum

    def to_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Size":
        return cls(width=float(data["width"]), height=float(data["height"]))


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle.

    Attributes:
        x: Minimum x (left edge)
        y: Minimum y
        width: Horizontal extent
        height: Vertical extent
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def is_empty(self) -> bool:
        """Check whether the rectangle encloses no area."""
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        """Check if a point lies inside the rectangle.

        The lower edges are inclusive and the upper edges exclusive, so two
        displays sharing an edge never both claim a point on it. An empty
        rectangle contains nothing.

        Args:
            point: The point to test

        Returns:
            True if the point is inside the rectangle
        """
        if self.is_empty():
            return False
        return (
            self.min_x <= point.x < self.max_x
            and self.min_y <= point.y < self.max_y
        )

    def with_origin(self, origin: Point) -> "Rect":
        """Return a copy of this rectangle moved to ``origin``."""
        return Rect(origin.x, origin.y, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rect":
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


@dataclass(frozen=True, slots=True)
class WindowGeometry:
    """Persisted size and position of the document window.

    Stored as four independent scalars. A fresh install has all four at zero.

    Attributes:
        width: Last content width (0 if never stored)
        height: Last content height (0 if never stored)
        origin_x: Last frame origin x
        origin_y: Last frame origin y
    """

    width: float = 0.0
    height: float = 0.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def stored_size(self, minimum: float = MIN_PERSISTED_SIZE) -> Size | None:
        """Get the stored size if it is usable.

        Args:
            minimum: Smallest width and height considered usable

        Returns:
            The stored Size, or None if either dimension is below minimum
        """
        size = Size(self.width, self.height)
        if not size.at_least(minimum):
            return None
        return size

    def stored_origin(self) -> Point | None:
        """Get the stored origin unless it is the (0, 0) "never stored" sentinel."""
        if self.origin_x == 0 and self.origin_y == 0:
            return None
        return Point(self.origin_x, self.origin_y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "origin_x": self.origin_x,
            "origin_y": self.origin_y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WindowGeometry":
        return cls(
            width=float(data.get("width", 0.0)),
            height=float(data.get("height", 0.0)),
            origin_x=float(data.get("origin_x", 0.0)),
            origin_y=float(data.get("origin_y", 0.0)),
        )
