"""Prime sieves and prime factorisation."""

from __future__ import annotations

from math import isqrt


def sieve(limit: int) -> list[bool]:
    """Sieve of Eratosthenes: entry i tells whether i is prime, for 0..limit."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    flags = [True] * (limit + 1)
    for i in range(min(2, limit + 1)):
        flags[i] = False
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            multiples = range(i * i, limit + 1, i)
            flags[i * i :: i] = [False] * len(multiples)
    return flags


def primes_up_to(limit: int) -> list[int]:
    """All primes from 2 to limit, in increasing order."""
    return [n for n, is_prime in enumerate(sieve(limit)) if is_prime]


def prime_factorization(number: int) -> list[tuple[int, int]]:
    """Prime factors of number with their exponents, smallest prime first."""
    if number < 1:
        raise ValueError("number must be positive")
    factors: list[tuple[int, int]] = []
    remaining = number
    for prime in primes_up_to(number):
        if remaining == 1:
            break
        count = 0
        while remaining % prime == 0:
            remaining //= prime
            count += 1
        if count:
            factors.append((prime, count))
    return factors