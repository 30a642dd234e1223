"""
Lazy traversals of all the permutations of a sequence.

>>> [''.join(p) for p in permute('abc', 'descending')]
['abc', 'acb', 'bac', 'bca', 'cab', 'cba']
"""
from __future__ import annotations

import dataclasses
import functools
import random
from typing import Iterable, Iterator, Sequence, TypeVar

from . import fns
from .arith import check_count, factorial
from .orders import PermutationOrder, index_sequence
from .permutations import apply, identity, longest_element

T = TypeVar('T')


@dataclasses.dataclass(frozen=True)
class PermutationSpace:
    """The n! permutations of the positions [0, n), addressed by their lexicographic index."""
    n: int

    def __post_init__(self):
        check_count(self.n)

    @functools.cache
    def order(self) -> int:
        return factorial(self.n)

    def id(self) -> tuple[int, ...]:
        return identity(self.n)

    def longest_element(self) -> tuple[int, ...]:
        return longest_element(self.n)

    def unrank(self, i: int) -> tuple[int, ...]:
        if not 0 <= i < self.order():
            raise ValueError(f"Index {i} is outside [0, {self.n}!)")
        return fns.unrank(i, self.n)

    def rank(self, perm: Sequence[int]) -> int:
        if len(perm) != self.n:
            raise ValueError(f"Cannot rank a permutation of length {len(perm)} in S_{self.n}")
        return fns.rank(perm)

    def indices(self, order: PermutationOrder, rand: random.Random | None = None) -> Iterator[int]:
        return index_sequence(self.n, order, rand)

    def elements(self, order: PermutationOrder = 'descending', rand: random.Random | None = None) -> Iterable[tuple[int, ...]]:
        """Iterate over the permutations in word notation, computing each one only when it is asked for."""
        return (fns.unrank(i, self.n) for i in self.indices(order, rand))

    def nth(self, items: Sequence[T], i: int) -> list[T]:
        """
        The items rearranged by the permutation with index i.

        >>> PermutationSpace(3).nth('abc', 3)
        ['b', 'c', 'a']
        """
        return apply(self.unrank(i), items)


def permute(
    items: Sequence[T],
    order: PermutationOrder = 'descending',
    rand: random.Random | None = None,
) -> Iterator[list[T]]:
    """
    Lazily yield all len(items)! rearrangements of items, in the given order. The items are opaque: they are never
    compared or copied up front, only read by index as each permutation is built, so a consumer which stops after
    k permutations has caused k * len(items) reads.

    The order is checked immediately, but no index is generated until the first permutation is requested.

    >>> list(permute([], 'random'))
    [[]]
    >>> list(permute(['x'], 'ascending'))
    [['x']]
    """
    space = PermutationSpace(len(items))
    return (apply(perm, items) for perm in space.elements(order, rand))
