"""
Strategies for walking the index space [0, n!) of the permutations of n things.

Each strategy is a generator function: it yields exactly n! indices on demand, keeps all of its state to itself, and
cannot be restarted. Walking a different order means asking for a fresh generator.
"""
from __future__ import annotations

import random
from typing import Iterator, Literal

from .arith import coprimes, factorial, is_coprime, random_below

PermutationOrder = Literal['ascending', 'descending', 'random']
ORDERS: tuple[PermutationOrder, ...] = ('ascending', 'descending', 'random')

# How many random candidates to try before falling back to an increment of 1. The coprimes to n! have density about
# 0.56 / ln(n), so running out of attempts has vanishing probability for any n we could ever traverse.
INCREMENT_ATTEMPTS = 10_000


def ascending_indices(n: int) -> Iterator[int]:
    """
    Yield n!-1, n!-2, ..., 0.

    Note that the indices come out in decreasing order despite the name, so the permutations appear in reverse
    lexicographic order. The naming has been kept as it is in the published interface; descending_indices() is the
    one which counts up.

    >>> list(ascending_indices(3))
    [5, 4, 3, 2, 1, 0]
    """
    i = factorial(n)
    while i > 0:
        i -= 1
        yield i


def descending_indices(n: int) -> Iterator[int]:
    """
    Yield 0, 1, ..., n!-1, i.e. the permutations in lexicographic order. See the note on ascending_indices().

    >>> list(descending_indices(3))
    [0, 1, 2, 3, 4, 5]
    """
    count = factorial(n)
    i = 0
    while i < count:
        yield i
        i += 1


def choose_increment(
    modulus: int,
    rand: random.Random | None = None,
    method: Literal['sample', 'scan'] = 'sample',
    attempts: int = INCREMENT_ATTEMPTS,
) -> int:
    """
    Choose a step uniformly from the integers in [1, modulus) which are coprime to modulus. Stepping by it modulo
    modulus visits every residue once before coming back around.

    The 'sample' method draws random candidates until one is coprime, and is the only option once modulus is large.
    The 'scan' method walks all of the coprimes, replacing its choice with the k-th coprime seen with probability 1/k
    (reservoir sampling). Either way, 1 is always a valid answer and is returned when there is nothing else to pick.

    >>> choose_increment(1), choose_increment(2)
    (1, 1)
    >>> choose_increment(6, rand=random.Random(0), method='scan') in {1, 5}
    True
    """
    rand = rand if rand is not None else random.Random()
    if modulus <= 2:
        return 1

    if method == 'sample':
        for _ in range(attempts):
            candidate = 1 + random_below(modulus - 1, rand)
            if is_coprime(modulus, candidate):
                return candidate
        return 1

    if method == 'scan':
        increment = 1
        for seen, candidate in enumerate(coprimes(modulus), start=1):
            if random_below(seen, rand) == 0:
                increment = candidate
        return increment

    raise ValueError(f"Unknown increment method {method!r}, expected 'sample' or 'scan'")


def random_indices(
    n: int,
    rand: random.Random | None = None,
    method: Literal['sample', 'scan'] = 'sample',
) -> Iterator[int]:
    """
    Yield every index in [0, n!) exactly once, in a random order.

    We pick a uniform starting point and a step coprime to n!, then walk start, start + step, start + 2*step, ...
    modulo n! until we arrive back at the start. Only the current position is ever stored. The first index is uniform
    over [0, n!) whatever step was chosen.
    """
    rand = rand if rand is not None else random.Random()
    count = factorial(n)
    increment = choose_increment(count, rand, method=method)
    start = random_below(count, rand)

    current = start
    while True:
        yield current
        current = (current + increment) % count
        if current == start:
            break


def index_sequence(n: int, order: PermutationOrder, rand: random.Random | None = None) -> Iterator[int]:
    """
    A fresh generator of the indices of S_n in the given order. An unknown order is rejected here, before anything
    has been generated.
    """
    if order == 'ascending':
        return ascending_indices(n)
    if order == 'descending':
        return descending_indices(n)
    if order == 'random':
        return random_indices(n, rand)

    raise ValueError(f"Unknown permutation order {order!r}, expected one of {', '.join(ORDERS)}")
