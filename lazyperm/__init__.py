from .arith import coprimes, factorial, gcd, is_coprime, log2_factorial, random_below
from .fns import decode, encode, rank, unrank
from .orders import (
    ORDERS,
    PermutationOrder,
    ascending_indices,
    choose_increment,
    descending_indices,
    index_sequence,
    random_indices,
)
from .traversal import PermutationSpace, permute

__all__ = [
    "ORDERS",
    "PermutationOrder",
    "PermutationSpace",
    "ascending_indices",
    "choose_increment",
    "coprimes",
    "decode",
    "descending_indices",
    "encode",
    "factorial",
    "gcd",
    "index_sequence",
    "is_coprime",
    "log2_factorial",
    "permute",
    "random_below",
    "random_indices",
    "rank",
    "unrank",
]
