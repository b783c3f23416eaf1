"""Count the points where two circles on an integer grid meet."""

INFINITE = -1
"""Returned when the two circles coincide and meet everywhere."""


def count_intersections(x1, y1, r1, x2, y2, r2):
    """Return how many points two circles share: 0, 1, 2, or INFINITE.

    Integer arithmetic on squared lengths is used throughout, so tangency
    is detected exactly.
    """
    dx = x1 - x2
    dy = y1 - y2
    dist_sq = dx * dx + dy * dy

    if dist_sq == 0:
        return INFINITE if r1 == r2 else 0

    outer_sq = (r1 + r2) ** 2
    inner_sq = (r1 - r2) ** 2

    if dist_sq in (outer_sq, inner_sq):
        return 1
    if inner_sq < dist_sq < outer_sq:
        return 2
    return 0