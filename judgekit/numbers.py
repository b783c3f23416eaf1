"""Number-theory helpers: partitions, primes, powers and calendars."""

from math import isqrt


def palindrome_partitions(n):
    """Return the number of recursively palindromic partitions of ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    table = [0, 1]
    for k in range(2, n + 1):
        table.append(1 + sum(table[: k // 2 + 1]))
    return table[n]


def is_prime(n):
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def goldbach_pair(n):
    """Return primes (a, b), a <= b, a + b == n, with the smallest difference."""
    if n < 4 or n % 2:
        raise ValueError("n must be an even number of at least 4")
    for a in range(n // 2, 1, -1):
        if is_prime(a) and is_prime(n - a):
            return a, n - a
    raise ValueError(f"no prime pair sums to {n}")


def mod_pow(base, exponent, modulus):
    """Return base ** exponent reduced by ``modulus``, by repeated squaring.

    An exponent of zero gives 1, whatever the modulus.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    result = 1
    square = base % modulus
    while exponent:
        if exponent & 1:
            result = result * square % modulus
        square = square * square % modulus
        exponent >>= 1
    return result % modulus


def cain_year(m, n, x, y):
    """Return the year labelled <x:y> in the Cain calendar, or None if none exists."""
    if not (1 <= x <= m and 1 <= y <= n):
        raise ValueError("x must be in 1..m and y in 1..n")
    last = m * n
    for year in range(x, last + 1, m):
        if year % n == y % n:
            return year
    return None