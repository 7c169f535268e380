"""
Prime generation utilities.

Responsibility: ground-truth prime generation only. No predicate calls,
no statistics.

Flags are offset by 2: index i stands for the integer i + 2, so an
array for upper_bound has length upper_bound - 1.
"""

import numpy as np


def composite_flags(upper_bound: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i + 2 is composite.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    upper_bound : int
        Largest candidate (inclusive). Must be >= 2.

    Returns
    -------
    np.ndarray
        Boolean array of length upper_bound - 1.
    """
    if upper_bound < 2:
        raise ValueError(f"upper_bound must be >= 2, got {upper_bound}")

    composite = np.zeros(upper_bound - 1, dtype=bool)
    p = 2
    while p * p <= upper_bound:
        composite[p * p - 2::p] = True
        # Advance to the next unmarked candidate
        p += 1
        while composite[p - 2]:
            p += 1
    return composite


def prime_flags(upper_bound: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i + 2 is prime.

    Derived from composite_flags; the composite array is not modified.
    """
    return ~composite_flags(upper_bound)


def primes_upto(upper_bound: int) -> np.ndarray:
    """
    Return array of all primes <= upper_bound.

    Parameters
    ----------
    upper_bound : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes, int64.
    """
    flags = prime_flags(upper_bound)
    return np.nonzero(flags)[0].astype(np.int64) + 2
