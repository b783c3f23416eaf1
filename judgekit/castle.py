"""Count the guards a castle needs so that every row and column is watched."""

GUARD = "X"


def _validated(rows):
    rows = list(rows)
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ValueError("castle rows must all have the same width")
    return rows


def empty_lines(rows):
    """Return (rows without a guard, columns without a guard)."""
    rows = _validated(rows)
    empty_rows = sum(GUARD not in row for row in rows)
    empty_cols = sum(GUARD not in column for column in zip(*rows))
    return empty_rows, empty_cols


def guards_needed(rows):
    """Return the fewest guards to add so every row and column has one."""
    return max(empty_lines(rows))