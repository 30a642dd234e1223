"""
The factorial number system, as a bijection between [0, n!) and the permutations of [0, n).

An index i is written in the mixed radix 1, 2, ..., n, giving a component vector (c[0], ..., c[n-1]) with
0 <= c[k] <= k, and i = c[0]*0! + c[1]*1! + ... + c[n-1]*(n-1)!. The first component is always 0, and the last one
(radix n) is the most significant.

A component vector is a Lehmer code read backwards: c[k] counts how many of the positions after position n-1-k hold
a smaller value. Decoding therefore puts permutations in lexicographic order of their index, with index 0 the
identity and index n!-1 the reversal.

>>> [unrank(i, 3) for i in range(6)]
[(0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)]
"""
from __future__ import annotations

from typing import Sequence

from .arith import check_count
from .permutations import inverse


def encode(i: int, n: int) -> tuple[int, ...]:
    """
    Write i in the factorial number system with n components, dividing by each radix 1, 2, ..., n in turn. Only
    defined for i in [0, n!); the caller is responsible for the range.

    >>> encode(0, 3), encode(3, 3), encode(5, 3)
    ((0, 0, 0), (0, 1, 1), (0, 1, 2))
    >>> encode(0, 0)
    ()
    """
    n = check_count(n)

    components = []
    for radix in range(1, n + 1):
        i, r = divmod(i, radix)
        components.append(r)

    return tuple(components)


def index_of(components: Sequence[int]) -> int:
    """
    The index whose factorial number system components are given, i.e. the inverse of encode().

    >>> index_of((0, 1, 2))
    5
    """
    index = 0
    for k in range(len(components) - 1, -1, -1):
        index = index * (k + 1) + components[k]

    return index


def decode(components: Sequence[int]) -> tuple[int, ...]:
    """
    Turn a component vector into a permutation in word notation.

    We build up the positions of the permutation ordered by the values they will hold, inserting position n-1-k at
    index c[k] for k = 0, 1, ..., n-1. At step k the sequence holds k positions, so the c[k] <= k bound is exactly
    the set of places to insert into. The finished sequence maps values to positions, and its inverse is the word.

    >>> decode((0, 1, 1))
    (1, 2, 0)
    """
    n = len(components)
    by_value: list[int] = []
    for k, c in enumerate(components):
        assert 0 <= c <= k, f"Component {c} at index {k} is out of range."
        by_value.insert(c, n - 1 - k)

    return inverse(by_value)


def lehmer_code(perm: Sequence[int]) -> tuple[int, ...]:
    """
    Recover the component vector of a permutation, i.e. the inverse of decode(). This is the O(n^2) method, which is
    fine for the permutations that we can reasonably look at.

    >>> lehmer_code((1, 2, 0))
    (0, 1, 1)
    """
    n = len(perm)
    return tuple(
        sum(1 for q in range(pos + 1, n) if perm[q] < perm[pos])
        for pos in range(n - 1, -1, -1)
    )


def unrank(i: int, n: int) -> tuple[int, ...]:
    """The permutation of [0, n) with lexicographic index i."""
    return decode(encode(i, n))


def rank(perm: Sequence[int]) -> int:
    """
    The lexicographic index of a permutation, so that rank(unrank(i, n)) == i.

    >>> rank(()), rank((0, 1, 2, 3)), rank((3, 2, 1, 0))
    (0, 0, 23)
    """
    return index_of(lehmer_code(perm))
