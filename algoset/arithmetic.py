"""Integer and numeric routines: Fibonacci, digit sums, powers, roots and Roman numerals."""

from __future__ import annotations

import math

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_ROMAN_SYMBOLS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def add_digits(num: int) -> int:
    """Sum the decimal digits repeatedly until one digit is left; 0 for num <= 0."""
    while num > 9:
        num = sum(int(d) for d in str(num))
    return max(num, 0)


def power(x: float, n: int) -> float:
    """``x`` raised to the integer ``n`` by repeated squaring."""
    if n < 0:
        return 1 / power(x, -n)
    result = 1.0
    while n:
        if n % 2:
            result *= x
            n -= 1
        else:
            x *= x
            n //= 2
    return result


def is_perfect_number(num: int) -> bool:
    """Tell whether ``num`` equals the sum of its positive divisors below itself.

    For num <= 0 there are no such divisors, so only 0 qualifies.
    """
    if num <= 0:
        return num == 0
    total = 0
    for d in range(1, math.isqrt(num) + 1):
        if num % d == 0:
            total += d
            other = num // d
            if other != d:
                total += other
    return total - num == num


def int_sqrt(x: int) -> int:
    """The largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign; 0 if that leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def int_to_roman(num: int) -> str:
    """Write ``num`` in Roman numerals; non-positive numbers give an empty string."""
    parts = []
    for value, symbol in _ROMAN_SYMBOLS:
        count, num = divmod(num, value) if num > 0 else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral; a symbol before a larger one is subtracted."""
    if not s:
        raise ValueError("empty Roman numeral")
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman symbol: {exc.args[0]!r}") from None
    total = values[-1]
    for current, following in zip(values, values[1:]):
        total += -current if current < following else current
    return total