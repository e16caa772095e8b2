"""Progress toward a word goal.

Derives remaining/over-limit counts, the fill fraction and a color hue from a
word count and a word limit. The hue runs green -> yellow -> orange as the
fraction goes 0 -> 0.7 -> 1.0; past the limit the renderer switches to a fixed
red instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from wordgoal.core.word_count import count_words

MIN_WORD_LIMIT = 1
MAX_WORD_LIMIT = 10000
DEFAULT_WORD_LIMIT = 500

# Hues on a [0, 1] wheel.
GREEN_HUE = 1.0 / 3.0
YELLOW_HUE = 1.0 / 6.0
ORANGE_HUE = 1.0 / 12.0
RED_HUE = 0.0

YELLOW_STOP = 0.7


class ProgressTint(str, Enum):
    """How the progress bar should be colored."""

    NORMAL = "normal"
    OVER_LIMIT = "over_limit"


def clamped_word_limit(value: int) -> int:
    """Clamp a word limit into [MIN_WORD_LIMIT, MAX_WORD_LIMIT].

    Examples:
        >>> clamped_word_limit(0)
        1
        >>> clamped_word_limit(10001)
        10000
    """
    return min(MAX_WORD_LIMIT, max(MIN_WORD_LIMIT, value))


def progress_hue(fraction: float) -> float:
    """Interpolate the progress hue for a fill fraction.

    Linear from green to yellow over [0, 0.7], then yellow to orange over
    [0.7, 1.0]. Out-of-range fractions are clamped first.

    Args:
        fraction: Fill fraction

    Returns:
        Hue on a [0, 1] wheel
    """
    p = max(0.0, min(1.0, fraction))
    if p <= YELLOW_STOP:
        t = p / YELLOW_STOP
        return GREEN_HUE + (YELLOW_HUE - GREEN_HUE) * t
    t = (p - YELLOW_STOP) / (1.0 - YELLOW_STOP)
    return YELLOW_HUE + (ORANGE_HUE - YELLOW_HUE) * t


@dataclass(frozen=True, slots=True)
class ProgressState:
    """Snapshot of progress for one (count, limit) pair.

    Attributes:
        count: Words written
        limit: Word goal
        remaining: Words left before the goal (0 once reached)
        over_by: Words past the goal (0 until exceeded)
        fraction: Fill fraction in [0, 1]
        is_over_limit: Whether count exceeds limit
        color_hue: Hue for the bar; RED_HUE when over the limit
    """

    count: int
    limit: int
    remaining: int
    over_by: int
    fraction: float
    is_over_limit: bool
    color_hue: float

    @property
    def tint(self) -> ProgressTint:
        return ProgressTint.OVER_LIMIT if self.is_over_limit else ProgressTint.NORMAL

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "limit": self.limit,
            "remaining": self.remaining,
            "over_by": self.over_by,
            "fraction": self.fraction,
            "is_over_limit": self.is_over_limit,
            "color_hue": self.color_hue,
            "tint": self.tint.value,
        }


def compute_progress(count: int, limit: int) -> ProgressState:
    """Compute progress for a word count against a limit.

    The limit is expected to be clamped by the caller; a non-positive limit
    still yields a fraction of 0.0 rather than dividing by zero.

    Args:
        count: Words written (non-negative)
        limit: Word goal

    Returns:
        ProgressState for the pair
    """
    is_over_limit = count > limit
    fraction = min(1.0, count / limit) if limit > 0 else 0.0
    return ProgressState(
        count=count,
        limit=limit,
        remaining=max(0, limit - count),
        over_by=max(0, count - limit),
        fraction=fraction,
        is_over_limit=is_over_limit,
        color_hue=RED_HUE if is_over_limit else progress_hue(fraction),
    )


def evaluate_text(text: str, limit: int) -> ProgressState:
    """Count words in text and compute progress against a clamped limit."""
    return compute_progress(count_words(text), clamped_word_limit(limit))
