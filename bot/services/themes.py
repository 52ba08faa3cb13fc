# bot/services/themes.py
"""Theme idea validation and final theme generation."""

import random
from collections.abc import Iterable

THEME_WORD_COUNT = 2


def is_valid_idea(text: str) -> bool:
    """A theme idea must be exactly one whitespace-delimited word."""
    return len(text.split()) == 1


def pick_theme_words(
    ideas: Iterable[str],
    rng: random.Random | None = None,
    count: int = THEME_WORD_COUNT,
) -> list[str] | None:
    """
    Pick distinct submissions at random, in random order.

    Args:
        ideas: Submitted ideas, one per submitter
        rng: Random source, defaults to the module-level generator
        count: Number of submissions to combine

    Returns:
        The picked ideas, or None if fewer than ``count`` were submitted
    """
    pool = list(ideas)
    if len(pool) < count:
        return None
    # random.sample returns its picks in selection order, which is random
    return (rng or random).sample(pool, count)


def generate_theme(ideas: Iterable[str], rng: random.Random | None = None) -> str | None:
    """Combine two random submissions into the final theme text."""
    words = pick_theme_words(ideas, rng=rng)
    if words is None:
        return None
    return " ".join(words)


def format_all_ideas(ideas: Iterable[str]) -> str:
    """Comma-separated list of every submitted idea, safe to put in a code block."""
    # A zero width space after each backtick keeps ideas from closing the block
    return ", ".join(idea.replace("`", "`\u200b") for idea in ideas)
