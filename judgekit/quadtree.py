"""Cut coloured paper into uniform squares by repeated quartering."""

WHITE = 0
BLUE = 1


def _count(rows, top, left, size):
    colour = rows[top][left]
    uniform = all(
        rows[r][c] == colour
        for r in range(top, top + size)
        for c in range(left, left + size)
    )
    if uniform:
        return (0, 1) if colour == BLUE else (1, 0)
    half = size // 2
    white = blue = 0
    for dr in (0, half):
        for dc in (0, half):
            w, b = _count(rows, top + dr, left + dc, half)
            white += w
            blue += b
    return white, blue


def count_squares(grid):
    """Return (white squares, blue squares) after quartering until each is one colour."""
    rows = [list(row) for row in grid]
    side = len(rows)
    if side == 0 or side & (side - 1):
        raise ValueError("grid side must be a power of two")
    if any(len(row) != side for row in rows):
        raise ValueError("grid must be square")
    if any(cell not in (WHITE, BLUE) for row in rows for cell in row):
        raise ValueError("cells must be 0 (white) or 1 (blue)")
    return _count(rows, 0, 0, side)