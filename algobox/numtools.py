"""Small number-theoretic checks and big-number arithmetic."""

from __future__ import annotations

import functools
import math
from collections.abc import Iterable


def is_buzz_number(n: int) -> bool:
    """A buzz number is divisible by 7 or has 7 as its last digit."""
    return n % 7 == 0 or (n > 0 and n % 10 == 7)


def gcd_of(numbers: Iterable[int]) -> int:
    """Greatest common divisor of all the numbers, by repeated division."""
    values = list(numbers)
    if not values:
        raise ValueError("gcd_of needs at least one number")
    return functools.reduce(math.gcd, values)


def _digit_sum(n: int) -> int:
    return sum(int(digit) for digit in str(n))


def is_happy_number(n: int) -> bool:
    """Sum the digits repeatedly until one digit is left; happy if it is 1."""
    while n > 9:
        n = _digit_sum(n)
    return n == 1


def is_palindrome_number(n: int) -> bool:
    """Tell whether the decimal form of n reads the same backwards."""
    text = str(n)
    return text == text[::-1]


@functools.lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n == 0:
        return 0
    if n <= 2:
        return 1
    if n % 2:
        k = (n + 1) // 2
        return _fib(k) ** 2 + _fib(k - 1) ** 2
    k = n // 2
    return (2 * _fib(k - 1) + _fib(k)) * _fib(k)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number by fast doubling, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _fib(n)


_SMALL_BITS = 10_000


def _decimal(n: int) -> str:
    """Decimal digits of a non-negative int of any size."""
    if n.bit_length() < _SMALL_BITS:
        return str(n)
    width = max(1, n.bit_length() * 3 // 20)
    high, low = divmod(n, 10**width)
    return _decimal(high) + _decimal(low).rjust(width, "0")


def power(base: int, exponent: int) -> str:
    """base raised to exponent, as a string of decimal digits of any length."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if base < 0:
        raise ValueError("base must not be negative")
    if exponent == 0:
        return "1"
    return _decimal(base**exponent)