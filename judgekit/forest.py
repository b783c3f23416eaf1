"""Simulate trees growing, dying and spreading over the seasons."""

INITIAL_NUTRIENT = 5
SPREAD_AGE = 5
SAPLING_AGE = 1

_NEIGHBOURS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Forest:
    """An N by N plot of land holding trees of various ages.

    ``refill`` gives the nutrient added to each cell every winter.
    Trees are given as ``(row, col, age)`` with 1-based positions;
    ``trees[r][c]`` holds the ages in the 0-based cell (r, c).
    """

    def __init__(self, refill, trees=()):
        self.refill = [list(row) for row in refill]
        self.size = len(self.refill)
        if any(len(row) != self.size for row in self.refill):
            raise ValueError("refill must be a square grid")
        self.nutrients = [[INITIAL_NUTRIENT] * self.size for _ in range(self.size)]
        self.trees = [[[] for _ in range(self.size)] for _ in range(self.size)]
        self._dead = [[0] * self.size for _ in range(self.size)]
        for row, col, age in trees:
            if not (1 <= row <= self.size and 1 <= col <= self.size):
                raise ValueError(f"tree at ({row}, {col}) is outside the forest")
            if age < 1:
                raise ValueError("tree age must be positive")
            self.trees[row - 1][col - 1].append(age)

    def _cells(self):
        return ((r, c) for r in range(self.size) for c in range(self.size))

    def spring(self):
        """Trees eat nutrients youngest first and age; those that cannot eat die."""
        for r, c in self._cells():
            survivors = []
            for age in sorted(self.trees[r][c]):
                if age <= self.nutrients[r][c]:
                    self.nutrients[r][c] -= age
                    survivors.append(age + 1)
                else:
                    self._dead[r][c] += age // 2
            self.trees[r][c] = survivors

    def summer(self):
        """Dead trees turn into nutrient for their cell."""
        for r, c in self._cells():
            self.nutrients[r][c] += self._dead[r][c]
            self._dead[r][c] = 0

    def fall(self):
        """Trees whose age is a multiple of five seed the eight cells around them."""
        breeders = {
            (r, c): sum(1 for age in self.trees[r][c] if age % SPREAD_AGE == 0)
            for r, c in self._cells()
        }
        for (r, c), count in breeders.items():
            if not count:
                continue
            for dr, dc in _NEIGHBOURS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < self.size and 0 <= nc < self.size:
                    self.trees[nr][nc].extend([SAPLING_AGE] * count)

    def winter(self):
        """Every cell receives its refill of nutrient."""
        for r, c in self._cells():
            self.nutrients[r][c] += self.refill[r][c]

    def advance_year(self):
        """Run the four seasons in order."""
        self.spring()
        self.summer()
        self.fall()
        self.winter()

    def tree_count(self):
        """Return the number of living trees."""
        return sum(len(self.trees[r][c]) for r, c in self._cells())


def surviving_trees(refill, trees, years):
    """Return how many trees are alive after ``years`` years."""
    if years < 0:
        raise ValueError("years must not be negative")
    forest = Forest(refill, trees)
    for _ in range(years):
        forest.advance_year()
    return forest.tree_count()