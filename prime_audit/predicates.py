"""
Probabilistic primality predicates under audit.

A predicate is any callable ``predicate(n, certainty) -> bool`` claiming
a false-negative rate of at most 4**-(certainty // 2). The default
delegates to gmpy2's Miller-Rabin; the audit never looks inside it.

Predicates passed to the parallel path must be picklable (module-level
functions).
"""

import gmpy2
from typing import Callable, Dict

Predicate = Callable[[int, int], bool]


def rounds_for_certainty(certainty: int) -> int:
    """Miller-Rabin rounds needed for an error bound of 4**-(certainty // 2)."""
    return max(1, (certainty + 1) // 2)


def is_probable_prime(n: int, certainty: int) -> bool:
    """
    Return True if n is probably prime.

    A certainty <= 0 claims nothing, so every value is accepted.
    """
    if certainty <= 0:
        return True
    return bool(gmpy2.is_prime(gmpy2.mpz(n), rounds_for_certainty(certainty)))


PREDICATES: Dict[str, Predicate] = {
    'gmpy2': is_probable_prime,
}


def resolve_predicate(name: str) -> Predicate:
    """Look up a predicate by its config name."""
    try:
        return PREDICATES[name]
    except KeyError:
        raise ValueError(
            f"Unknown predicate {name!r}; choose from {sorted(PREDICATES)}"
        ) from None
