"""Decide the winner of the take-one-or-three stone game."""

FIRST_PLAYER = "SK"
SECOND_PLAYER = "CY"


def winner(n):
    """Return the name of the player who takes the last of ``n`` stones."""
    if n < 1:
        raise ValueError("there must be at least one stone")
    return FIRST_PLAYER if n % 2 else SECOND_PLAYER