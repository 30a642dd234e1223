"""
Functions for working with permutations of the positions [0, n).

A permutation x is always in "word" notation, the array [x(0), ..., x(n-1)]. Functions accept any sequence of ints
and return permutations as tuples. Applied to a sequence of items, the word is read as a gather: position p of the
output receives items[x(p)].
"""
from __future__ import annotations

import functools
import operator
from typing import Sequence, TypeVar

T = TypeVar('T')


def is_permutation(word: Sequence[int]) -> bool:
    """
    Check that word is a permutation of the integers [0, n) where n = len(word).

    >>> words = [(), (0, 1), (0, 2), (0, 0, 2), (2, 1, 0)]
    >>> [is_permutation(word) for word in words]
    [True, True, False, False, True]
    """

    if len(word) == 0:
        return True

    # Every entry lies in [0, n), and the bitwise-or of 1 << x over the entries is 2^n - 1 exactly when no entry is
    # repeated.
    if min(word) != 0 or max(word) != len(word) - 1:
        return False

    mask = functools.reduce(operator.or_, (1 << x for x in word), 0)
    return mask == 2**len(word) - 1


def identity(n: int) -> tuple[int, ...]:
    """
    The identity permutation of S_n, which is also the lexicographically first.

    >>> [identity(n) for n in [0, 1, 2, 3]]
    [(), (0,), (0, 1), (0, 1, 2)]
    """
    return tuple(range(n))


def longest_element(n: int) -> tuple[int, ...]:
    """
    The reversing permutation, which is the lexicographically last.

    >>> longest_element(3)
    (2, 1, 0)
    """
    return tuple(n-i-1 for i in range(n))


def inverse(perm: Sequence[int]) -> tuple[int, ...]:
    """
    The inverse of a permutation.

    >>> inverse((2, 0, 1))
    (1, 2, 0)
    >>> inverse(())
    ()
    """
    inv = [0] * len(perm)
    for i, pi in enumerate(perm):
        inv[pi] = i

    return tuple(inv)


def compose(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """
    Compose two permutations (x, y) -> xy. This composition is right-to-left, i.e. the result applies y, then x.

    >>> compose((1, 2, 0), inverse((1, 2, 0)))
    (0, 1, 2)
    """
    if len(x) != len(y):
        raise ValueError(f"Cannot compose permutations of different lengths {len(x)} and {len(y)}")

    return tuple(x[j] for j in y)


def apply(perm: Sequence[int], items: Sequence[T]) -> list[T]:
    """
    Rearrange items by the permutation: position p of the result is items[perm[p]]. Only the n reads
    items[perm[0]], ..., items[perm[n-1]] are made.

    >>> apply((2, 0, 1), ['a', 'b', 'c'])
    ['c', 'a', 'b']
    """
    if len(perm) != len(items):
        raise ValueError(f"Cannot apply a permutation of length {len(perm)} to {len(items)} items")

    return [items[j] for j in perm]
