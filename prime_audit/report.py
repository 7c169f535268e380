"""
Result tables.

Responsibility: turn verifier results into a DataFrame and CSV. No
verification logic.
"""

import pandas as pd
from pathlib import Path

from .accuracy import AccuracyResult, minimum_accuracy
from .non_primes import NonPrimeResult

SUMMARY_FILENAME = 'prime_test_summary.csv'


def summary_table(accuracy: AccuracyResult, non_prime: NonPrimeResult) -> pd.DataFrame:
    """
    One row per check.

    Parameters
    ----------
    accuracy : AccuracyResult
        Outcome of the false-negative audit.
    non_prime : NonPrimeResult
        Outcome of the non-prime cross-check.

    Returns
    -------
    pd.DataFrame
        Columns: check, passed, detail.
    """
    _, denominator = minimum_accuracy(accuracy.certainty)
    rows = [
        {
            'check': 'prime',
            'passed': accuracy.ok,
            'detail': (f"{accuracy.passed}/{accuracy.total} reported prime "
                       f"({accuracy.observed_rate:.6f}, bound 1 - 1/{denominator})"),
        },
        {
            'check': 'non-prime',
            'passed': non_prime.ok,
            'detail': (f"{non_prime.rejected}/{non_prime.sampled} rejected, "
                       f"{len(non_prime.contradictions)} known primes among them"),
        },
    ]
    return pd.DataFrame(rows, columns=['check', 'passed', 'detail'])


def save_summary(df: pd.DataFrame, output_dir: Path) -> Path:
    """Write the summary table to output_dir and return the file path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / SUMMARY_FILENAME
    df.to_csv(path, index=False)
    return path
