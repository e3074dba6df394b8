"""Prime factorisation by trial division and Euler's totient."""

from __future__ import annotations

import sys


def prime_factors(n: int) -> list[int]:
    """Distinct prime factors of ``n`` in ascending order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors = []
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            factors.append(divisor)
            while n % divisor == 0:
                n //= divisor
        divisor += 1
    if n != 1:
        factors.append(n)
    return factors


def euler_phi(n: int) -> int:
    """Count of integers in ``1..n`` coprime with ``n``."""
    result = n
    for prime in prime_factors(n):
        result = result // prime * (prime - 1)
    return result


def main(argv=None) -> int:
    """Read ``n`` from standard input and print its totient."""
    n = int(sys.stdin.read().split()[0])
    print(euler_phi(n))
    return 0