"""
False-negative check: known primes must be reported prime often enough.

With certainty c the predicate promises P(prime reported composite)
<= 4**-(c // 2). Writing C = 4**(c // 2), the audit passes iff

    passed / total >= 1 - 1/C
    passed * C     >= total * (C - 1)

The last form is evaluated with Python ints. C reaches 4**50 at the
default certainty, far beyond float precision.
"""

import sys
from multiprocessing import Pool, cpu_count
from typing import List, NamedTuple, Sequence, Tuple

from .predicates import Predicate, is_probable_prime


class AccuracyResult(NamedTuple):
    """Outcome of one accuracy audit."""
    passed: int
    total: int
    certainty: int
    ok: bool

    @property
    def observed_rate(self) -> float:
        """Pass fraction, for display only."""
        return self.passed / self.total if self.total else float('nan')


def minimum_accuracy(certainty: int) -> Tuple[int, int]:
    """
    Exact lower bound on the pass rate as (numerator, denominator).

    Returns (C - 1, C) with C = 4**(certainty // 2). A certainty below 2
    claims nothing, so C = 1 and the bound is 0.
    """
    c = 4 ** max(0, certainty // 2)
    return c - 1, c


def meets_accuracy_bound(passed: int, total: int, certainty: int) -> bool:
    """True iff passed * C >= total * (C - 1), in exact arithmetic."""
    numerator, denominator = minimum_accuracy(certainty)
    return passed * denominator >= total * numerator


def _count_chunk(args) -> int:
    """Count predicate passes in one chunk."""
    values, certainty, predicate = args
    return sum(1 for n in values if predicate(n, certainty))


def _chunks(values: Sequence[int], chunk_size: int) -> List[Sequence[int]]:
    return [values[i:i + chunk_size] for i in range(0, len(values), chunk_size)]


def count_probable_primes(primes: Sequence[int], certainty: int,
                          parallel: bool = True,
                          predicate: Predicate = is_probable_prime,
                          num_workers: int = None,
                          chunk_size: int = 10000) -> int:
    """
    Count members the predicate reports as probably prime.

    Parameters
    ----------
    primes : sequence of int
        Values to test (a PrimeSet or any indexable sequence).
    certainty : int
        Certainty passed through to the predicate.
    parallel : bool
        Evaluate chunks in a process pool. The count is the same either way.
    predicate : callable
        predicate(n, certainty) -> bool. Must be picklable when parallel.
    num_workers : int, optional
        Pool size. Defaults to CPU count.
    chunk_size : int
        Values per task.

    Returns
    -------
    int
        Number of values reported prime.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    values = list(primes)
    if not values:
        return 0

    tasks = [(chunk, certainty, predicate) for chunk in _chunks(values, chunk_size)]

    if not parallel or len(tasks) == 1:
        return sum(_count_chunk(task) for task in tasks)

    if num_workers is None:
        num_workers = cpu_count()

    with Pool(num_workers) as pool:
        counts = pool.map(_count_chunk, tasks)

    return sum(counts)


def evaluate_accuracy(primes: Sequence[int], certainty: int,
                      parallel: bool = True,
                      predicate: Predicate = is_probable_prime,
                      num_workers: int = None,
                      chunk_size: int = 10000) -> AccuracyResult:
    """Run the predicate over every member and apply the exact bound."""
    passed = count_probable_primes(primes, certainty, parallel, predicate,
                                   num_workers, chunk_size)
    total = len(primes)
    ok = meets_accuracy_bound(passed, total, certainty)

    if not ok:
        print("Probable prime certainty test failed.", file=sys.stderr)

    return AccuracyResult(passed, total, certainty, ok)


def check_prime(primes: Sequence[int], certainty: int,
                parallel: bool = True,
                predicate: Predicate = is_probable_prime,
                num_workers: int = None,
                chunk_size: int = 10000) -> bool:
    """
    Verify the fraction of members reported prime is >= 1 - 4**-(certainty // 2).

    Returns
    -------
    bool
        True if and only if the audit passes.
    """
    return evaluate_accuracy(primes, certainty, parallel, predicate,
                             num_workers, chunk_size).ok
