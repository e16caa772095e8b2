"""Text algorithms for wordgoal.

This module contains:

- Word counting with dash-aware separator rules
- Progress toward a word goal (remaining/over counts, fill fraction, hue)

All functions are pure, synchronous and safe to call from any thread.

Key functions:
- normalize_separators: Turn separator dashes into spaces
- count_words: Count words in a string
- clamped_word_limit: Clamp a word goal into [1, 10000]
- compute_progress: Derive a ProgressState from (count, limit)
- progress_hue: Green -> yellow -> orange interpolation
"""

from wordgoal.core.progress import (
    DEFAULT_WORD_LIMIT,
    MAX_WORD_LIMIT,
    MIN_WORD_LIMIT,
    ProgressState,
    ProgressTint,
    clamped_word_limit,
    compute_progress,
    evaluate_text,
    progress_hue,
)
from wordgoal.core.word_count import count_words, normalize_separators, tokenize

__all__ = [
    # Constants
    "DEFAULT_WORD_LIMIT",
    "MAX_WORD_LIMIT",
    "MIN_WORD_LIMIT",
    # Progress
    "ProgressState",
    "ProgressTint",
    "clamped_word_limit",
    "compute_progress",
    "evaluate_text",
    "progress_hue",
    # Word counting
    "count_words",
    "normalize_separators",
    "tokenize",
]
