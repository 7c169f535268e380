"""
Statistical audit of probabilistic primality predicates.

A sieve supplies ground truth; the verifiers check a predicate's
false-negative rate against its stated bound and look for primes it
rejects as composite.
"""
