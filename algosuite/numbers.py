"""Integer utilities: digit reversal, palindromes and simple recurrences."""

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if _INT32_MIN <= result <= _INT32_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Report whether ``x`` reads the same in both directions; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    _require_non_negative(n)
    prev, curr = 1, 1
    for _ in range(n - 1):
        prev, curr = curr, prev + curr
    return curr


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for i in range(num_rows):
        if rows:
            above = rows[-1]
            row = [1, *(a + b for a, b in zip(above, above[1:])), 1] if i > 0 else [1]
        else:
            row = [1]
        rows.append(row)
    return rows


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0."""
    _require_non_negative(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def tribonacci(n: int) -> int:
    """Return the ``n``-th Tribonacci number, starting 0, 1, 1."""
    _require_non_negative(n)
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a