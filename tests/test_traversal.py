import collections.abc
import itertools
import random

import pytest

from lazyperm import PermutationSpace, cards, permute
from lazyperm.arith import factorial
from lazyperm.orders import ORDERS


class CountingSequence(collections.abc.Sequence):
    """A sequence which records how many times its items have been read."""

    def __init__(self, items):
        self.items = list(items)
        self.reads = 0

    def __len__(self):
        return len(self.items)

    def __getitem__(self, i):
        self.reads += 1
        return self.items[i]


def test_descending_example():
    assert list(permute(['a', 'b', 'c'], 'descending')) == [
        ['a', 'b', 'c'],
        ['a', 'c', 'b'],
        ['b', 'a', 'c'],
        ['b', 'c', 'a'],
        ['c', 'a', 'b'],
        ['c', 'b', 'a'],
    ]


def test_ascending_is_reversed_descending():
    # The "ascending" order walks the indices from the top, so the permutations come out in reverse.
    items = ['a', 'b', 'c', 'd']
    ascending = list(permute(items, 'ascending'))
    descending = list(permute(items, 'descending'))
    assert len(ascending) == len(descending) == 24
    assert ascending == descending[::-1]
    assert ascending[0] == ['d', 'c', 'b', 'a']


@pytest.mark.parametrize('n', [1, 2, 3, 4, 5])
def test_coverage(n):
    items = [f'item{i}' for i in range(n)]
    every = set(itertools.permutations(items))
    for order in ORDERS:
        perms = [tuple(perm) for perm in permute(items, order, random.Random(n))]
        assert len(perms) == factorial(n)
        assert set(perms) == every


@pytest.mark.parametrize('n', [4, 5])
def test_random_has_no_repeats(n):
    seen = set()
    for perm in permute(range(n), 'random', random.Random(8)):
        assert tuple(perm) not in seen
        seen.add(tuple(perm))
    assert len(seen) == factorial(n)


@pytest.mark.parametrize('order', ORDERS)
def test_identity_cases(order):
    assert list(permute([], order)) == [[]]
    assert list(permute(['x'], order)) == [['x']]


@pytest.mark.parametrize('order', ORDERS)
def test_early_termination(order):
    items = CountingSequence(range(10))
    shuffles = permute(items, order, random.Random(9))
    assert items.reads == 0

    first = list(itertools.islice(shuffles, 3))
    assert len(first) == 3
    assert items.reads == 3 * 10


def test_unknown_order_is_rejected_eagerly():
    with pytest.raises(ValueError):
        permute(['a', 'b'], 'upwards')


def test_permutation_space():
    space = PermutationSpace(4)
    assert space.order() == 24
    assert space.unrank(0) == space.id() == (0, 1, 2, 3)
    assert space.unrank(23) == space.longest_element() == (3, 2, 1, 0)
    assert space.rank((3, 2, 1, 0)) == 23
    assert space.nth('wxyz', 23) == ['z', 'y', 'x', 'w']
    assert list(space.elements('descending'))[:2] == [(0, 1, 2, 3), (0, 1, 3, 2)]

    with pytest.raises(ValueError):
        space.unrank(24)
    with pytest.raises(ValueError):
        space.rank((0, 1))
    with pytest.raises(ValueError):
        PermutationSpace(-1)


def test_shuffle_deck():
    deck = cards.deck()
    shuffles = list(itertools.islice(permute(deck, 'random', random.Random(11)), 3))
    assert len(shuffles) == 3
    assert all(sorted(shuffle, key=deck.index) == deck for shuffle in shuffles)
    assert len({tuple(shuffle) for shuffle in shuffles}) == 3
