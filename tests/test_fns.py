import itertools
import random

import pytest

from lazyperm import fns, permutations
from lazyperm.arith import factorial


@pytest.mark.parametrize('n', range(9))
def test_bijection(n):
    """Every index decodes to a permutation, and no two indices decode to the same one."""
    perms = [fns.unrank(i, n) for i in range(factorial(n))]
    assert all(permutations.is_permutation(perm) and len(perm) == n for perm in perms)
    assert len(set(perms)) == factorial(n)


@pytest.mark.parametrize('n', range(7))
def test_lexicographic(n):
    assert [fns.unrank(i, n) for i in range(factorial(n))] == list(itertools.permutations(range(n)))


@pytest.mark.parametrize('n', range(7))
def test_round_trips(n):
    for i in range(factorial(n)):
        components = fns.encode(i, n)
        assert len(components) == n
        assert all(0 <= c <= k for k, c in enumerate(components))
        assert fns.index_of(components) == i
        assert fns.lehmer_code(fns.decode(components)) == components
        assert fns.rank(fns.unrank(i, n)) == i


def test_encode_first_component_is_zero():
    assert fns.encode(0, 1) == (0,)
    assert all(fns.encode(i, 5)[0] == 0 for i in range(factorial(5)))


def test_large():
    n = 52
    assert fns.unrank(0, n) == permutations.identity(n)
    assert fns.unrank(factorial(n) - 1, n) == permutations.longest_element(n)

    rand = random.Random(3)
    for _ in range(10):
        word = list(range(n))
        rand.shuffle(word)
        i = fns.rank(word)
        assert 0 <= i < factorial(n)
        assert fns.unrank(i, n) == tuple(word)


def test_invalid():
    with pytest.raises(ValueError):
        fns.encode(0, -1)

    # Malformed component vectors are an internal error.
    with pytest.raises(AssertionError):
        fns.decode((1, 0, 0))
