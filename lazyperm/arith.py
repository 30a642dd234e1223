"""
Exact integer arithmetic for permutation indexing.

Permutation indices live in [0, n!), which leaves the range of machine integers at n = 21, so everything here works
on Python's unbounded integers and never goes through floating point.
"""
from __future__ import annotations

import math
import operator
import random
from typing import Iterator


def check_count(n, name: str = 'n') -> int:
    """Coerce n to a non-negative int, raising ValueError for negative, boolean or non-integral values."""
    if isinstance(n, bool):
        raise ValueError(f"{name} must be a non-negative integer, got {n!r}")
    try:
        n = operator.index(n)
    except TypeError:
        raise ValueError(f"{name} must be a non-negative integer, got {n!r}") from None

    if n < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {n!r}")

    return n


def factorial(n: int) -> int:
    """
    The exact value of n!.

    >>> [factorial(n) for n in range(7)]
    [1, 1, 2, 6, 24, 120, 720]
    >>> factorial(25)
    15511210043330985984000000
    """
    n = check_count(n)

    result = 1
    for k in range(2, n + 1):
        result *= k

    return result


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by Euclid's algorithm. The result is never negative, and gcd(0, x) = |x|.

    >>> gcd(12, 18), gcd(-12, 18), gcd(0, 7), gcd(0, 0)
    (6, 6, 7, 0)
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b

    return a


def is_coprime(a: int, b: int) -> bool:
    return gcd(a, b) == 1


def coprimes(n: int, limit: int | None = None) -> Iterator[int]:
    """
    Lazily yield the integers in [1, limit) which are coprime to n, in increasing order. The limit defaults to n.

    >>> list(coprimes(12))
    [1, 5, 7, 11]
    >>> list(coprimes(6, limit=20))
    [1, 5, 7, 11, 13, 17, 19]
    """
    limit = n if limit is None else limit
    for i in range(1, limit):
        if is_coprime(n, i):
            yield i


def random_below(max: int, rand: random.Random | None = None) -> int:
    """
    Return an integer drawn uniformly from [0, max). An empty range (max <= 0) gives 0.

    We draw exactly as many random bits as max has, and throw away any draw which lands at or above max. Each
    draw succeeds with probability at least 1/2, and the accepted values are uniform no matter how large max is.
    """
    rand = rand if rand is not None else random.Random()
    max = operator.index(max)
    if max <= 0:
        return 0

    bits = max.bit_length()
    while True:
        value = rand.getrandbits(bits)
        if value < max:
            return value


def log2_factorial(n: int) -> float:
    """Approximate log2(n!), for reporting the size of a permutation space without printing all of its digits."""
    return math.lgamma(check_count(n) + 1) / math.log(2)
