"""
Tallies of where traversals start, for checking that random traversals are uniform.
"""
from __future__ import annotations

import random

import numpy as np
import pandas as pd

from .arith import check_count, factorial
from .fns import unrank
from .orders import PermutationOrder, index_sequence

# Largest index space we are willing to tabulate in full.
MAX_TABULATED = 40_320


def first_index_tally(
    n: int,
    trials: int,
    order: PermutationOrder = 'random',
    rand: random.Random | None = None,
) -> pd.DataFrame:
    """
    Start `trials` independent traversals of S_n and count how often each index comes out first.

    The frame has one row per index of S_n, with columns index, permutation (word notation), count and expected (the
    count a uniform start would give on average).
    """
    n = check_count(n)
    count = factorial(n)
    if count > MAX_TABULATED:
        raise ValueError(f"Warning: this would tabulate all {count} elements of S{n}, more than {MAX_TABULATED}.")
    if trials < 0:
        raise ValueError(f"The number of trials must be non-negative, got {trials}")

    rand = rand if rand is not None else random.Random()
    firsts = np.fromiter(
        (next(index_sequence(n, order, rand)) for _ in range(trials)),
        dtype=np.int64,
        count=trials,
    )
    counts = np.bincount(firsts, minlength=count)

    return pd.DataFrame({
        'index': np.arange(count, dtype=np.int64),
        'permutation': [unrank(i, n) for i in range(count)],
        'count': counts.astype(np.int64),
        'expected': np.full(count, trials / count, dtype=np.float64),
    })


def chi_square(tally: pd.DataFrame) -> float:
    """
    Pearson's chi-square statistic of the observed counts against the expected ones. For a uniform start this has
    (number of rows - 1) degrees of freedom.
    """
    observed = tally['count'].to_numpy(dtype=np.float64)
    expected = tally['expected'].to_numpy(dtype=np.float64)
    if len(observed) == 0 or expected.sum() == 0:
        return 0.0

    return float(((observed - expected)**2 / expected).sum())
