import pytest

from judgekit.optimize import (
    blackjack,
    knapsack,
    max_cable_length,
    min_expression,
    sugar_bags,
    word_math,
)


def test_max_cable_length_example():
    assert max_cable_length([802, 743, 457, 539], 11) == 200


@pytest.mark.parametrize(
    "cables, needed", [([10, 15, 20], 4), ([1, 1, 1], 3), ([1000], 7), ([9, 2], 2)]
)
def test_max_cable_length_is_tight(cables, needed):
    length = max_cable_length(cables, needed)
    assert sum(c // length for c in cables) >= needed
    assert sum(c // (length + 1) for c in cables) < needed


def test_max_cable_length_impossible():
    assert max_cable_length([1, 1], 3) == 0


def test_max_cable_length_rejects():
    with pytest.raises(ValueError):
        max_cable_length([5], 0)


def test_blackjack_example():
    assert blackjack([5, 6, 7, 8, 9], 21) == 21


def test_blackjack_never_exceeds_limit():
    cards = [93, 181, 245, 214, 315, 36, 185, 138, 216, 295]
    assert blackjack(cards, 500) <= 500


def test_blackjack_nothing_fits():
    assert blackjack([10, 20, 30], 59) == 0
    assert blackjack([1, 2], 100) == 0


def test_sugar_bags_impossible():
    assert sugar_bags(4) is None
    assert sugar_bags(7) is None


def test_sugar_bags_multiples_of_five():
    for n in range(5, 500, 5):
        assert sugar_bags(n) == n // 5


def test_sugar_bags_counts_are_valid_and_minimal():
    for n in range(8, 300):
        bags = sugar_bags(n)
        assert any(5 * f + 3 * (bags - f) == n for f in range(bags + 1))
        fewer = bags - 1
        assert not any(5 * f + 3 * (fewer - f) == n for f in range(fewer + 1))


def test_knapsack_example():
    assert knapsack([(6, 13), (4, 8), (3, 6), (5, 12)], 7) == 14


def test_knapsack_edges():
    assert knapsack([(3, 10)], 0) == 0
    assert knapsack([(3, 10)], 3) == 10
    assert knapsack([(4, 10)], 3) == 0


def test_knapsack_monotone_in_capacity():
    items = [(2, 3), (3, 4), (4, 5), (5, 6)]
    values = [knapsack(items, c) for c in range(15)]
    assert values == sorted(values)


def test_knapsack_rejects():
    with pytest.raises(ValueError):
        knapsack([(0, 1)], 5)
    with pytest.raises(ValueError):
        knapsack([], -1)


def test_word_math_single_letter():
    assert word_math(["A"]) == 9


def test_word_math_ignores_letter_names_and_order():
    assert word_math(["GCF", "ACDEB"]) == word_math(["ACDEB", "GCF"])
    assert word_math(["AB", "CA"]) == word_math(["XY", "ZX"])


def test_word_math_rejects():
    with pytest.raises(ValueError):
        word_math(["abc"])
    with pytest.raises(ValueError):
        word_math(["ABCDEFGHIJK"])


def test_min_expression_brackets_after_minus():
    assert min_expression("55-50+40") == 55 - (50 + 40)


def test_min_expression_without_minus():
    assert min_expression("10+20+30") == 10 + 20 + 30


def test_min_expression_leading_zeros():
    assert min_expression("00009-00009") == 9 - 9


@pytest.mark.parametrize("text", ["", "1++2", "-1", "3*4", "5-"])
def test_min_expression_rejects(text):
    with pytest.raises(ValueError):
        min_expression(text)