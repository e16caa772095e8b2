"""Domain models for wordgoal.

This module contains the value types used by window placement and geometry
persistence. All models are frozen dataclasses with slots, serializable to
plain dictionaries.

Key classes:
- Point: A 2D point in screen coordinates
- Size: A width/height pair
- Rect: An axis-aligned rectangle
- WindowGeometry: The persisted window size/position record
"""

from wordgoal.domain.geometry import (
    MIN_PERSISTED_SIZE,
    Point,
    Rect,
    Size,
    WindowGeometry,
)

__all__: list[str] = [
    # Constants
    "MIN_PERSISTED_SIZE",
    # Core types
    "Point",
    "Rect",
    "Size",
    "WindowGeometry",
]
