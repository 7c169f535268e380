"""
False-positive cross-check: values the predicate rejects must not be primes.

Uniform samples from [2, max_prime) are filtered down to the ones the
predicate calls composite, then looked up in the sieve-derived set.
Any hit is a known prime that the predicate rejected.
"""

import sys
import numpy as np
from typing import Iterable, List, NamedTuple, Optional

from .predicates import Predicate, is_probable_prime
from .prime_set import PrimeSet

DEFAULT_UPPER_BOUND = 1299709  # 100000th prime
NUM_NON_PRIMES = 10000

INT32_MAX = int(np.iinfo(np.int32).max)


class NonPrimeResult(NamedTuple):
    """Outcome of one non-prime cross-check."""
    sampled: int
    rejected: int
    contradictions: List[int]
    ok: bool


def sampling_bound(primes: PrimeSet, default: int = DEFAULT_UPPER_BOUND) -> int:
    """
    Exclusive upper end of the sampling range.

    The largest member when it fits a signed 32-bit int, otherwise default.
    """
    largest = primes.last()
    if largest > INT32_MAX:
        return default
    return largest


def sample_non_primes(primes: PrimeSet, certainty: int,
                      predicate: Predicate = is_probable_prime,
                      num_samples: int = NUM_NON_PRIMES,
                      seed: Optional[int] = None,
                      default_bound: int = DEFAULT_UPPER_BOUND) -> List[int]:
    """
    Draw uniform integers in [2, bound) and keep those the predicate rejects.

    Parameters
    ----------
    primes : PrimeSet
        Ground-truth set; only its largest member is used here.
    certainty : int
        Certainty passed through to the predicate.
    predicate : callable
        predicate(n, certainty) -> bool.
    num_samples : int
        Number of draws before filtering.
    seed : int, optional
        Seed for numpy's default generator. None draws fresh OS entropy.
    default_bound : int
        Fallback bound when the largest member overflows 32 bits.

    Returns
    -------
    list of int
        Sampled values the predicate reports as composite (duplicates kept).
    """
    bound = sampling_bound(primes, default_bound)
    if bound <= 2:
        return []

    rng = np.random.default_rng(seed)
    draws = rng.integers(2, bound, size=num_samples)

    return [int(n) for n in draws if not predicate(int(n), certainty)]


def contradictions(candidates: Iterable[int], primes: PrimeSet) -> List[int]:
    """Candidates that are members of the prime set."""
    return [n for n in candidates if n in primes]


def evaluate_non_primes(primes: PrimeSet, certainty: int,
                        predicate: Predicate = is_probable_prime,
                        num_samples: int = NUM_NON_PRIMES,
                        seed: Optional[int] = None,
                        default_bound: int = DEFAULT_UPPER_BOUND) -> NonPrimeResult:
    """Sample, filter and cross-check; print every contradiction found."""
    rejected = sample_non_primes(primes, certainty, predicate, num_samples,
                                 seed, default_bound)
    hits = contradictions(rejected, primes)

    for n in hits:
        print(f"Prime value thought to be non-prime: {n}", file=sys.stderr)

    return NonPrimeResult(num_samples, len(rejected), hits, not hits)


def check_non_prime(primes: PrimeSet, certainty: int,
                    predicate: Predicate = is_probable_prime,
                    num_samples: int = NUM_NON_PRIMES,
                    seed: Optional[int] = None,
                    default_bound: int = DEFAULT_UPPER_BOUND) -> bool:
    """
    Verify that no sampled value rejected by the predicate is a known prime.

    Returns
    -------
    bool
        True if and only if the check succeeds.
    """
    return evaluate_non_primes(primes, certainty, predicate, num_samples,
                               seed, default_bound).ok
