import pytest

from algosuite.numbers import (
    climb_stairs,
    fib,
    is_palindrome_number,
    pascal_triangle,
    reverse_integer,
    tribonacci,
)


@pytest.mark.parametrize("x", [123, -123, 7, -8, 1534, 2147447412])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


def test_reverse_integer_keeps_sign():
    assert reverse_integer(-45) < 0
    assert reverse_integer(45) > 0


def test_reverse_integer_drops_trailing_zeros():
    assert reverse_integer(120) == reverse_integer(12)


@pytest.mark.parametrize("x", [1534236469, -2147483648, 1000000003])
def test_reverse_integer_overflow_gives_zero(x):
    assert reverse_integer(x) == 0


@pytest.mark.parametrize(
    "x,expected",
    [(121, True), (-121, False), (10, False), (0, True), (1221, True), (123, False)],
)
def test_is_palindrome_number(x, expected):
    assert is_palindrome_number(x) is expected


def test_fib_base_and_recurrence():
    assert fib(0) == 0
    assert fib(1) == 1
    for n in range(2, 40):
        assert fib(n) == fib(n - 1) + fib(n - 2)


def test_climb_stairs_matches_shifted_fib():
    assert climb_stairs(0) == 1
    for n in range(1, 40):
        assert climb_stairs(n) == fib(n + 1)


def test_tribonacci_base_and_recurrence():
    assert [tribonacci(n) for n in range(3)] == [0, 1, 1]
    for n in range(3, 38):
        assert tribonacci(n) == tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


@pytest.mark.parametrize("func", [fib, tribonacci, climb_stairs])
def test_negative_input_raises(func):
    with pytest.raises(ValueError):
        func(-1)


def test_pascal_triangle_shape_and_sums():
    rows = pascal_triangle(10)
    assert len(rows) == 10
    for i, row in enumerate(rows):
        assert len(row) == i + 1
        assert sum(row) == 2**i
        assert row == row[::-1]
        assert row[0] == row[-1] == 1
    for above, row in zip(rows, rows[1:]):
        for j in range(1, len(row) - 1):
            assert row[j] == above[j - 1] + above[j]


def test_pascal_triangle_empty():
    assert pascal_triangle(0) == []
    assert pascal_triangle(1) == [[1]]