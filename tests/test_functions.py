import operator

import pytest

from lemonlab.functions import Circle, calculate, defer_order, get_sequence, maximum, swap


@pytest.mark.parametrize("a, b", [(100, 200), (200, 100), (-3, -7), (5, 5)])
def test_maximum_is_one_of_inputs_and_not_smaller(a, b):
    result = maximum(a, b)
    assert result in (a, b)
    assert result >= a and result >= b


def test_maximum_example():
    assert maximum(100, 200) == 200


def test_swap_reverses():
    assert swap("hello", "world") == ("world", "hello")


def test_swap_twice_is_identity():
    assert swap(*swap(1, "x")) == (1, "x")


def test_get_sequence_counts_from_one():
    next_number = get_sequence()
    assert [next_number(), next_number(), next_number()] == [1, 2, 3]


def test_get_sequence_counters_are_independent():
    first = get_sequence()
    first()
    first()
    second = get_sequence()
    assert second() == 1
    assert first() == 3


def test_calculate_with_add():
    assert calculate(lambda a, b: a + b, 2, 8) == 10


def test_calculate_with_lambda_difference():
    assert calculate(lambda a, b: a - b, 10, 4) == 6


def test_calculate_passes_arguments_in_order():
    assert calculate(operator.sub, 3, 9) == -calculate(operator.sub, 9, 3)


def test_circle_area_example():
    assert Circle(10.0).area() == pytest.approx(314.0)


def test_circle_area_scales_with_square_of_radius():
    assert Circle(6.0).area() == pytest.approx(4 * Circle(3.0).area())


def test_defer_order():
    assert defer_order() == [
        "main::hello go 1",
        "main::hello go 2",
        "returnFunc",
        "deferFunc",
        "func3",
        "func2",
        "func1",
        "main end",
    ]