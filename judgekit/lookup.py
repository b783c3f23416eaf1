"""Membership queries over cards and names."""

from bisect import bisect_left


def contains_sorted(items, key):
    """Return True if ``key`` is in the ascending sequence ``items``."""
    index = bisect_left(items, key)
    return index < len(items) and items[index] == key


def card_membership(cards, queries):
    """Return 1 for each query found among ``cards`` and 0 otherwise."""
    ordered = sorted(cards)
    return [int(contains_sorted(ordered, query)) for query in queries]


def count_in_set(words, queries):
    """Return how many of ``queries`` appear in ``words``."""
    known = set(words)
    return sum(query in known for query in queries)


def heard_and_seen(heard, seen):
    """Return, in dictionary order, the names of ``seen`` that are also in ``heard``."""
    ordered = sorted(heard)
    return sorted(name for name in seen if contains_sorted(ordered, name))