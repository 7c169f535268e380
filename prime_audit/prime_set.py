"""
Ordered prime collection built from sieve flags.

Responsibility: turn offset-by-2 flags into an immutable, sorted set of
Python ints, plus the INT32_MAX sentinel.

The sentinel is appended without being sieved. It probes the predicate
at the edge of the signed 32-bit range and is the one member not
guaranteed by the sieve (2**31 - 1 happens to be a Mersenne prime).
"""

import numbers
import numpy as np
from typing import Iterable, Iterator

from .primes import prime_flags

SENTINEL = 2**31 - 1


class PrimeSet:
    """Immutable, strictly increasing set of arbitrary-precision integers."""

    __slots__ = ('_values', '_members')

    def __init__(self, values: Iterable[int]):
        self._values = tuple(sorted({int(v) for v in values}))
        self._members = frozenset(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __contains__(self, value) -> bool:
        if not isinstance(value, numbers.Integral):
            return False
        return int(value) in self._members

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrimeSet):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        if len(self._values) <= 8:
            return f"PrimeSet({list(self._values)})"
        return (f"PrimeSet([{self._values[0]}, {self._values[1]}, ..., "
                f"{self._values[-1]}], n={len(self._values)})")

    def last(self) -> int:
        """Largest member."""
        if not self._values:
            raise ValueError("PrimeSet is empty")
        return self._values[-1]


def collect(flags: np.ndarray, verbose: bool = True) -> PrimeSet:
    """
    Map set flags to integers and append the sentinel.

    Parameters
    ----------
    flags : np.ndarray
        Boolean array, flags[i] True iff i + 2 is prime.
    verbose : bool
        Print the resulting cardinality.

    Returns
    -------
    PrimeSet
        Sieve primes plus SENTINEL.
    """
    values = [int(i) + 2 for i in np.nonzero(flags)[0]]
    values.append(SENTINEL)
    primes = PrimeSet(values)

    if verbose:
        print(f"Created {len(primes)} primes")

    return primes


def get_primes(upper_bound: int, verbose: bool = True) -> PrimeSet:
    """Primes through upper_bound (inclusive) plus SENTINEL."""
    return collect(prime_flags(upper_bound), verbose=verbose)
