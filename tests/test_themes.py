# tests/test_themes.py
import random

from bot.services.themes import format_all_ideas, generate_theme, is_valid_idea, pick_theme_words


def test_single_word_is_valid() -> None:
    assert is_valid_idea("Gravity")
    assert is_valid_idea("  Gravity\n")


def test_multiple_words_or_empty_are_invalid() -> None:
    assert not is_valid_idea("Low gravity")
    assert not is_valid_idea("")
    assert not is_valid_idea("   ")


def test_generate_theme_needs_two_ideas() -> None:
    assert generate_theme([]) is None
    assert generate_theme(["Only"]) is None


def test_generate_theme_uses_two_distinct_ideas() -> None:
    ideas = ["Space", "Time", "Loop", "Cats"]
    rng = random.Random(1234)
    for _ in range(50):
        words = pick_theme_words(ideas, rng=rng)
        assert words is not None
        assert len(words) == 2
        assert words[0] != words[1]
        assert set(words) <= set(ideas)


def test_generate_theme_order_varies() -> None:
    """Both orderings of a two-idea pool should come up."""
    rng = random.Random(0)
    seen = {generate_theme(["Space", "Time"], rng=rng) for _ in range(100)}
    assert seen == {"Space Time", "Time Space"}


def test_format_all_ideas() -> None:
    assert format_all_ideas(["Space", "Time"]) == "Space, Time"
    assert format_all_ideas([]) == ""


def test_format_all_ideas_breaks_up_backticks() -> None:
    assert "```" not in format_all_ideas(["```evil", "Loop"])
