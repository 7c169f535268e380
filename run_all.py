#!/usr/bin/env python3
"""
Probable-prime audit.

Sieves the primes through an upper bound, then checks a probabilistic
primality predicate against them:

1. known primes must be reported prime at a rate >= 1 - 4**-(certainty // 2);
2. sampled values the predicate rejects must not be known primes.

Usage:
    python run_all.py
    python run_all.py 100000 50 false
    python run_all.py --config config/custom.yaml --seed 123
"""

import argparse
import sys
import time
import yaml
from pathlib import Path

from prime_audit.accuracy import evaluate_accuracy
from prime_audit.non_primes import DEFAULT_UPPER_BOUND, NUM_NON_PRIMES, evaluate_non_primes
from prime_audit.predicates import resolve_predicate
from prime_audit.prime_set import get_primes
from prime_audit.report import save_summary, summary_table

DEFAULT_CONFIG = Path(__file__).parent / 'config' / 'default.yaml'

DEFAULTS = {
    'upper_bound': DEFAULT_UPPER_BOUND,
    'certainty': 100,
    'parallel': True,
    'predicate': 'gmpy2',
    'num_non_primes': NUM_NON_PRIMES,
    'num_workers': None,
    'chunk_size': 10000,
    'seed': None,
    'output_dir': None,
}


def parse_bool(value: str) -> bool:
    """Only 'true' (any case) is true."""
    return value.strip().lower() == 'true'


def load_config(path) -> dict:
    """Defaults overlaid with the YAML file at path, if any."""
    config = dict(DEFAULTS)
    if path is None:
        return config
    with open(path) as f:
        loaded = yaml.safe_load(f) or {}
    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    config.update(loaded)
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Audit a probable-prime predicate')
    parser.add_argument('upper_bound', type=int, nargs='?', default=None,
                        help=f'Largest sieved candidate (default: {DEFAULT_UPPER_BOUND})')
    parser.add_argument('certainty', type=int, nargs='?', default=None,
                        help='Predicate certainty (default: 100)')
    parser.add_argument('parallel', type=parse_bool, nargs='?', default=None,
                        help='Evaluate known primes in a process pool (default: true)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for non-prime sampling')
    parser.add_argument('--output', type=str, default=None,
                        help='Directory for the summary CSV')
    return parser


def resolve_settings(args: argparse.Namespace) -> dict:
    """Merge config file and command-line overrides; validate."""
    config_path = args.config
    if config_path is None and DEFAULT_CONFIG.exists():
        config_path = DEFAULT_CONFIG
    config = load_config(config_path)

    for key in ('upper_bound', 'certainty', 'parallel', 'seed'):
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    if args.output is not None:
        config['output_dir'] = args.output

    if isinstance(config['parallel'], str):
        config['parallel'] = parse_bool(config['parallel'])
    config['parallel'] = bool(config['parallel'])

    for key in ('upper_bound', 'certainty', 'num_non_primes', 'chunk_size'):
        config[key] = int(config[key])
    if config['num_workers'] is not None:
        config['num_workers'] = int(config['num_workers'])

    minimums = {'upper_bound': 2, 'certainty': 0, 'num_non_primes': 0, 'chunk_size': 1}
    for key, minimum in minimums.items():
        if config[key] < minimum:
            raise ValueError(f"{key} must be >= {minimum}, got {config[key]}")
    if config['num_workers'] is not None and config['num_workers'] < 1:
        raise ValueError(f"num_workers must be >= 1, got {config['num_workers']}")
    return config


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = resolve_settings(args)
    predicate = resolve_predicate(config['predicate'])

    upper_bound = config['upper_bound']
    certainty = config['certainty']
    parallel = config['parallel']

    print("=" * 60)
    print("Probable Prime Audit")
    print("=" * 60)

    # Echo parameter settings
    print(f"Upper bound = {upper_bound}")
    print(f"Certainty = {certainty}")
    print(f"Parallel = {str(parallel).lower()}")

    start = time.time()

    # Primes through upper_bound (inclusive) plus INT32_MAX
    primes = get_primes(upper_bound)

    # Known primes must be identified as such
    accuracy = evaluate_accuracy(primes, certainty, parallel, predicate,
                                 config['num_workers'], config['chunk_size'])
    print(f"Prime test result: {'SUCCESS' if accuracy.ok else 'FAILURE'}")
    if not accuracy.ok:
        print("Prime test failed", file=sys.stderr)

    # Rejected samples must not be known primes
    non_prime = evaluate_non_primes(primes, certainty, predicate,
                                    config['num_non_primes'], config['seed'],
                                    DEFAULT_UPPER_BOUND)
    print(f"Non-prime test result: {'SUCCESS' if non_prime.ok else 'FAILURE'}")

    print(f"   Completed in {time.time() - start:.1f}s")

    if config['output_dir'] is not None:
        path = save_summary(summary_table(accuracy, non_prime), Path(config['output_dir']))
        print(f"   Summary saved to: {path}")

    if not accuracy.ok or not non_prime.ok:
        print("PrimeTest FAILED!", file=sys.stderr)
        return 1

    print("PrimeTest succeeded!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
