"""Round 0: empathy, bridge for olympians and the nine game."""

from collections import Counter

HAND_SIZE = 13
MAX_COPIES = 4
FIGURE_POINTS = {"J": 1, "Q": 2, "K": 3, "A": 4}


class CheatingError(ValueError):
    """Raised when a bridge hand cannot be a legitimate one."""


def _is_digit(char):
    return "0" <= char <= "9"


def empathy(n, p):
    """Return how many people understand each other: all ``n`` of them.

    Both values are read as whole numbers; the second one never changes
    the answer.
    """
    people = int(n)
    int(p)
    return people


def bridge_score(cards):
    """Count the honour points of a hand, raising CheatingError for a bad hand."""
    cards = list(cards)
    if len(cards) != HAND_SIZE:
        raise CheatingError(f"expected {HAND_SIZE} cards, got {len(cards)}")

    seen = Counter()
    score = 0
    for card in cards:
        if not card or len(card) > 2:
            raise CheatingError(f"malformed card {card!r}")
        first = card[0]
        if first in FIGURE_POINTS:
            score += FIGURE_POINTS[first]
        elif not _is_digit(first):
            raise CheatingError(f"unknown card {card!r}")
        if len(card) == 2 and not _is_digit(card[1]):
            raise CheatingError(f"unknown card {card!r}")
        if seen[card] >= MAX_COPIES:
            raise CheatingError(f"too many copies of {card!r}")
        seen[card] += 1
    return score


def game_answers(values):
    """Return the complement to nine of every value."""
    return [9 - value for value in values]