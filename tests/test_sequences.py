import pytest

from judgekit.sequences import (
    ProgramError,
    StackSequenceError,
    format_array,
    keylog,
    max_meetings,
    min_heap_responses,
    parse_array,
    run_ac,
    stack_sequence,
)


def _replay(operations):
    stack, popped, number = [], [], 1
    for op in operations:
        if op == "+":
            stack.append(number)
            number += 1
        else:
            popped.append(stack.pop())
    return popped


def test_stack_sequence_worked_example():
    target = [4, 3, 6, 8, 7, 5, 2, 1]
    assert "".join(stack_sequence(target)) == "++++--++-++-----"


@pytest.mark.parametrize("target", [[1, 2, 3], [3, 2, 1], [2, 1, 4, 3], []])
def test_stack_sequence_replays_to_target(target):
    ops = stack_sequence(target)
    assert _replay(ops) == target
    assert ops.count("+") == ops.count("-") == len(target)


def test_stack_sequence_impossible():
    with pytest.raises(StackSequenceError):
        stack_sequence([1, 2, 5, 3, 4])


def test_stack_sequence_error_is_value_error():
    with pytest.raises(ValueError):
        stack_sequence([3, 1, 2])


def test_min_heap_empty_gives_zero():
    assert min_heap_responses([0, 0]) == [0, 0]


def test_min_heap_returns_smallest_first():
    values = [5, 3, 9, 1]
    responses = min_heap_responses(values + [0] * 5)
    assert responses == sorted(values) + [0]


def test_min_heap_interleaved():
    assert min_heap_responses([2, 0, 1, 7, 0, 0, 0]) == [2, 1, 7, 0]


def test_max_meetings_worked_example():
    meetings = [
        (1, 4), (3, 5), (0, 6), (5, 7), (3, 8), (5, 9),
        (6, 10), (8, 11), (8, 12), (2, 13), (12, 14),
    ]
    assert max_meetings(meetings) == 4


def test_max_meetings_touching_and_empty():
    assert max_meetings([]) == 0
    assert max_meetings([(1, 2), (2, 3), (3, 4)]) == 3


def test_max_meetings_zero_length_after_end():
    assert max_meetings([(2, 2), (1, 2)]) == 2


def test_max_meetings_rejects_backwards():
    with pytest.raises(ValueError):
        max_meetings([(5, 1)])


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4], [10, 0, 42]])
def test_array_round_trip(values):
    assert parse_array(format_array(values)) == values


def test_parse_array_empty():
    assert parse_array("[]") == []


@pytest.mark.parametrize("text", ["1,2", "[1,,2]", "[a]", ""])
def test_parse_array_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_array(text)


def test_run_ac_reverse_then_drop():
    assert run_ac("RDD", [1, 2, 3, 4]) == [2, 1]


def test_run_ac_double_reverse_is_identity():
    assert run_ac("RR", [1, 2, 3]) == [1, 2, 3]


def test_run_ac_drop_everything():
    assert run_ac("DD", [1, 2]) == []


def test_run_ac_error_on_empty():
    with pytest.raises(ProgramError):
        run_ac("D", [])


def test_run_ac_error_after_exhausting():
    with pytest.raises(ProgramError):
        run_ac("RDDD", [1, 2])


def test_run_ac_unknown_command():
    with pytest.raises(ValueError):
        run_ac("X", [1])


def test_keylog_worked_example():
    assert keylog("<<BP<A>>Cd-") == "BAPC"


def test_keylog_plain_text():
    assert keylog("ThIsIsS3Cr3t") == "ThIsIsS3Cr3t"


def test_keylog_ignores_moves_at_edges():
    assert keylog("<-ab>>") == "ab"


def test_keylog_backspace_removes_left_of_cursor():
    assert keylog("abc<-") == "ac"