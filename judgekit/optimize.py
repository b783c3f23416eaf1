"""Search and optimisation puzzles: cutting, packing and choosing."""

import re
from collections import Counter
from itertools import combinations

_EXPRESSION = re.compile(r"\d+(?:[+-]\d+)*")


def max_cable_length(cables, needed):
    """Return the longest length into which ``cables`` cut at least ``needed`` pieces.

    Returns 0 when not even pieces of length 1 suffice.
    """
    if needed < 1:
        raise ValueError("needed must be positive")
    low, high, best = 1, max(cables, default=0), 0
    while low <= high:
        mid = (low + high) // 2
        if sum(cable // mid for cable in cables) >= needed:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def blackjack(cards, limit):
    """Return the largest sum of three cards not above ``limit``, or 0."""
    return max(
        (total for total in map(sum, combinations(cards, 3)) if total <= limit),
        default=0,
    )


def sugar_bags(n):
    """Return the fewest 3 kg and 5 kg bags weighing exactly ``n``, or None."""
    if n < 0:
        raise ValueError("weight must not be negative")
    for fives in range(n // 5, -1, -1):
        rest = n - 5 * fives
        if rest % 3 == 0:
            return fives + rest // 3
    return None


def knapsack(items, capacity):
    """Return the best total value of ``(weight, value)`` items within ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 1:
            raise ValueError("item weights must be positive")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def word_math(words):
    """Return the largest sum when each letter is given a distinct digit."""
    weights = Counter()
    for word in words:
        if not re.fullmatch(r"[A-Z]+", word):
            raise ValueError(f"words must be upper-case letters: {word!r}")
        for place, letter in enumerate(reversed(word)):
            weights[letter] += 10 ** place
    if len(weights) > 10:
        raise ValueError("at most ten distinct letters can be given digits")
    ordered = sorted(weights.values(), reverse=True)
    return sum(weight * digit for weight, digit in zip(ordered, range(9, -1, -1)))


def _terms(text):
    return [int(term) for term in re.split(r"[+-]", text)]


def min_expression(expression):
    """Return the smallest value the expression takes once brackets are added."""
    if not _EXPRESSION.fullmatch(expression):
        raise ValueError(f"not an expression of numbers, + and -: {expression!r}")
    head, minus, tail = expression.partition("-")
    total = sum(_terms(head))
    if minus:
        total -= sum(_terms(tail))
    return total