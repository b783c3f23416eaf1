# judgekit

Solutions to well-known programming-contest exercises. The topics are geometry, grids, searching, graphs, number theory, dynamic programming and small simulations. Each solution is a plain function, or in one case a small class. It takes Python values and returns Python values, so you can call it from other code, a notebook or a test suite. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `judgekit.circles`

- `count_intersections(x1, y1, r1, x2, y2, r2)` returns how many points two circles share: `0`, `1`, `2`, or `INFINITE` (`-1`) when the circles coincide.
- The comparison uses exact integer arithmetic on squared distances.

### `judgekit.castle`

A castle map is a sequence of equal-width strings, and `"X"` marks a guard.

- `empty_lines(rows)` returns `(rows without a guard, columns without a guard)`.
- `guards_needed(rows)` returns the larger of those two counts.
- Both raise `ValueError` when the rows differ in width.

### `judgekit.parity_code`

Letters `A` to `H` are sent as six-bit code words, listed in `CODEWORDS`.

- `decode_symbol(bits)` returns the letter whose code word differs from `bits` in at most one place.
- `decode(message, length)` decodes the first `length` words of `message`.
- When a word cannot be read, both functions raise `DecodeError`, a subclass of `ValueError`. For a failure inside a message, its `position` attribute holds the 1-based index of the first unreadable word.

### `judgekit.secret_sum`

- `hidden_sum(text, length)` sums every run of digits within the first `length` characters of `text`.
- Runs longer than six digits (`MAX_DIGITS`) are skipped.

### `judgekit.stone_game`

- `winner(n)` returns `"SK"` if the first player takes the last of `n` stones, and `"CY"` otherwise.

### `judgekit.lookup`

- `contains_sorted(items, key)` is a binary-search membership test on an ascending sequence.
- `card_membership(cards, queries)` returns `1` or `0` for each query.
- `count_in_set(words, queries)` counts the queries found in `words`.
- `heard_and_seen(heard, seen)` returns the names found in both sequences, in dictionary order.

### `judgekit.graphs`

- `most_hackable(n, trusts)` returns, in ascending order, the computers whose hacking reaches the most machines.
- `tree_parents(n, edges)` returns the parents of nodes `2..n` in a tree rooted at node 1.
- `infected_count(n, links)` returns how many computers other than computer 1 a worm on computer 1 reaches.
- `can_reach(grid)` tells whether the bottom-right cell can be reached from the top-left cell. It moves only right or down, through cells holding `1`.
- `longest_unique_path(board)` returns the most cells a walk from the top-left corner can visit without repeating a letter. The board holds upper-case letters.

### `judgekit.forest`

`Forest(refill, trees)` simulates trees on an N×N plot. `trees` holds 1-based `(row, col, age)` entries. Every cell starts with 5 units of nutrient.

- `spring()`: each tree eats as much nutrient as its age, youngest first, and grows one year older. A tree that cannot eat dies.
- `summer()`: each dead tree adds half its age, rounded down, to its cell.
- `fall()`: each tree whose age is a multiple of five seeds its eight neighbouring cells.
- `winter()`: each cell receives its `refill` amount.

`advance_year()` runs the four seasons in order, and `tree_count()` counts the living trees. `surviving_trees(refill, trees, years)` gives the tree count after `years` years.

### `judgekit.quadtree`

- `count_squares(grid)` takes a square grid of `0` (white) and `1` (blue) whose side is a power of two.
- It returns `(white, blue)`: the number of single-colour squares left after quartering until every square is one colour.

### `judgekit.numbers`

- `palindrome_partitions(n)` counts the recursively palindromic partitions of `n`.
- `is_prime(n)` tests whether `n` is prime.
- `goldbach_pair(n)` returns the two primes with the smallest difference that sum to `n`.
- `mod_pow(base, exponent, modulus)` raises `base` to `exponent` modulo `modulus` by repeated squaring.
- `cain_year(m, n, x, y)` returns the year labelled `<x:y>`, or `None` if there is no such year.

### `judgekit.optimize`

- `max_cable_length(cables, needed)` returns the longest piece length that yields at least `needed` pieces, or `0`.
- `blackjack(cards, limit)` returns the largest sum of three cards not above `limit`, or `0`.
- `sugar_bags(n)` returns the fewest 3 kg and 5 kg bags that weigh exactly `n`, or `None`.
- `knapsack(items, capacity)` returns the best value from `(weight, value)` items within `capacity`.
- `word_math(words)` returns the largest sum of upper-case words when each letter is given a distinct digit.
- `min_expression(expression)` returns the smallest value an expression of `+` and `-` can take once brackets are added.

### `judgekit.sequences`

- `stack_sequence(target)` returns the `"+"` and `"-"` operations that produce `target` from 1, 2, 3, … with one stack. It raises `StackSequenceError` when that is impossible.
- `min_heap_responses(operations)` runs a min-heap and returns what each removal yields: the smallest value held, or `0` when the heap is empty.
- `max_meetings(meetings)` counts the most non-overlapping `(start, end)` meetings that fit in one room.
- `parse_array(text)` turns text such as `"[1,2,3]"` into a list.
- `format_array(values)` turns a list back into that form.
- `run_ac(program, values)` runs `R` (reverse) and `D` (drop first) commands over the values. It raises `ProgramError` on a drop from an empty array.
- `keylog(keys)` rebuilds a password from key strokes, where `<` and `>` move the cursor and `-` is backspace.

## Examples

```python
from judgekit.circles import count_intersections
from judgekit.numbers import mod_pow, goldbach_pair
from judgekit.optimize import min_expression, sugar_bags
from judgekit.sequences import keylog

count_intersections(0, 0, 13, 40, 0, 37)   # 2
mod_pow(10, 11, 12)                        # 4
goldbach_pair(8)                           # (3, 5)
min_expression("55-50+40")                 # -35
sugar_bags(18)                             # 4
keylog("<<BP<A>>Cd-")                      # "BAPC"
```

Invalid input raises `ValueError`, or one of the subclasses named above.

## What the package does not do

There is no command-line program. Nothing reads problem input from standard input or prints answers in a contest's output format. To use the package that way, parse the input yourself and call the functions.