"""Sum the hidden numbers buried in a line of text."""

import re

MAX_DIGITS = 6
_DIGIT_RUN = re.compile(r"[0-9]+")


def hidden_sum(text, length):
    """Sum every run of digits within the first ``length`` characters.

    Runs longer than MAX_DIGITS digits are not hidden numbers and are skipped.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    return sum(
        int(run)
        for run in _DIGIT_RUN.findall(text[:length])
        if len(run) <= MAX_DIGITS
    )