"""Stack, heap, queue and scheduling puzzles over sequences."""

import heapq
from collections import deque

PUSH = "+"
POP = "-"

REVERSE = "R"
DROP = "D"

CURSOR_LEFT = "<"
CURSOR_RIGHT = ">"
BACKSPACE = "-"


class StackSequenceError(ValueError):
    """Raised when a sequence cannot be produced with a single stack."""


class ProgramError(ValueError):
    """Raised when an AC program drops from an empty array."""


def stack_sequence(target):
    """Return the pushes and pops that produce ``target`` from 1, 2, 3, ...

    Numbers are pushed in ascending order. Raises StackSequenceError when
    the sequence cannot be produced.
    """
    stack = []
    operations = []
    next_number = 1
    for wanted in target:
        while next_number <= wanted:
            stack.append(next_number)
            operations.append(PUSH)
            next_number += 1
        if not stack or stack[-1] != wanted:
            raise StackSequenceError(f"{wanted} cannot be popped in this order")
        stack.pop()
        operations.append(POP)
    return operations


def min_heap_responses(operations):
    """Run min-heap operations and return what each removal yields.

    A positive number is inserted; anything else removes and reports the
    smallest number held, or 0 when the heap is empty.
    """
    heap = []
    responses = []
    for value in operations:
        if value > 0:
            heapq.heappush(heap, value)
        else:
            responses.append(heapq.heappop(heap) if heap else 0)
    return responses


def max_meetings(meetings):
    """Return the most ``(start, end)`` meetings that fit in one room without overlap.

    A meeting may start at the moment the previous one ends.
    """
    ordered = sorted(meetings, key=lambda meeting: (meeting[1], meeting[0]))
    if any(start < 0 or end < start for start, end in ordered):
        raise ValueError("meetings need 0 <= start <= end")
    finish = 0
    count = 0
    for start, end in ordered:
        if start >= finish:
            finish = end
            count += 1
    return count


def parse_array(text):
    """Parse ``[a,b,c]`` into a list of integers; ``[]`` gives an empty list."""
    text = text.strip()
    if len(text) < 2 or text[0] != "[" or text[-1] != "]":
        raise ValueError(f"not a bracketed array: {text!r}")
    inner = text[1:-1]
    if not inner:
        return []
    try:
        return [int(item) for item in inner.split(",")]
    except ValueError:
        raise ValueError(f"array items must be integers: {text!r}") from None


def run_ac(program, values):
    """Run an AC program of R (reverse) and D (drop first) over ``values``.

    Raises ProgramError when D meets an empty array.
    """
    items = deque(values)
    reversed_ = False
    for command in program:
        if command == REVERSE:
            reversed_ = not reversed_
        elif command == DROP:
            if not items:
                raise ProgramError("cannot drop from an empty array")
            if reversed_:
                items.pop()
            else:
                items.popleft()
        else:
            raise ValueError(f"unknown command: {command!r}")
    return list(reversed(items)) if reversed_ else list(items)


def format_array(values):
    """Format integers as ``[a,b,c]``."""
    return "[" + ",".join(str(value) for value in values) + "]"


def keylog(keys):
    """Return the password typed by ``keys``, honouring cursor moves and backspace."""
    left = []
    right = []
    for key in keys:
        if key == CURSOR_LEFT:
            if left:
                right.append(left.pop())
        elif key == CURSOR_RIGHT:
            if right:
                left.append(right.pop())
        elif key == BACKSPACE:
            if left:
                left.pop()
        else:
            left.append(key)
    return "".join(left) + "".join(reversed(right))