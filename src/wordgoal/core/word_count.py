"""Dash-aware word counting.

A "word" is a maximal run of non-whitespace characters after dash
normalization:

- A single '-' joins two strings into one word ("well-being" counts as 1).
- Any run of 2+ '-' ("--", "---") acts like an em dash and splits words.
- En dash (U+2013) and em dash (U+2014) split words.

All functions are pure and safe to call from any thread.
"""

import re

EM_DASH = "—"
EN_DASH = "–"

# Dashes that always separate words, regardless of what surrounds them.
_DASH_TRANSLATION = str.maketrans({EM_DASH: " ", EN_DASH: " "})

# A maximal run of two or more hyphen-minus characters.
_HYPHEN_RUN = re.compile(r"-{2,}")


def normalize_separators(text: str) -> str:
    """Replace dash-like word separators with single spaces.

    Em and en dashes become one space each. Every maximal run of two or more
    hyphens becomes a single space in one pass, so no residual "--" can be
    left behind. Single hyphens are kept.

    Args:
        text: Input text

    Returns:
        Text with separator dashes replaced by spaces

    Examples:
        >>> normalize_separators("a---b")
        'a b'
        >>> normalize_separators("well-being")
        'well-being'
        >>> normalize_separators("end—start")
        'end start'
    """
    return _HYPHEN_RUN.sub(" ", text.translate(_DASH_TRANSLATION))


def tokenize(text: str) -> list[str]:
    """Split text into word tokens.

    Args:
        text: Input text

    Returns:
        Non-empty tokens, split on any run of Unicode whitespace
    """
    return normalize_separators(text).split()


def count_words(text: str) -> int:
    """Count words in text.

    Args:
        text: Input text (any Unicode string)

    Returns:
        Number of words; 0 for empty or all-whitespace text

    Examples:
        >>> count_words("A well-being check--twice – done.")
        5
        >>> count_words("   ")
        0
    """
    return len(tokenize(text))
