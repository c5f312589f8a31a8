"""Prime factorisation, modular arithmetic and digit properties of integers."""

from __future__ import annotations

from collections.abc import Sequence


def prime_factors(n: int) -> list[int]:
    """Distinct prime factors of ``n`` in ascending order."""
    return list(prime_factor_counts(n))


def prime_factor_counts(n: int) -> dict[int, int]:
    """Map each prime factor of ``n`` to its exponent, in ascending order of prime."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    counts: dict[int, int] = {}
    while n % 2 == 0:
        counts[2] = counts.get(2, 0) + 1
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            counts[divisor] = counts.get(divisor, 0) + 1
            n //= divisor
        divisor += 2
    if n > 2:
        counts[n] = counts.get(n, 0) + 1
    return counts


def smallest_prime_factor_table(limit: int) -> list[int]:
    """Sieve giving the smallest prime factor of every number below ``limit``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    spf = list(range(limit))
    spf[4::2] = [2] * len(range(4, limit, 2))
    i = 3
    while i * i < limit:
        if spf[i] == i:
            for j in range(i * i, limit, i):
                if spf[j] == j:
                    spf[j] = i
        i += 2
    return spf


def factorize(n: int, spf: Sequence[int]) -> list[int]:
    """Prime factors of ``n`` with multiplicity, using a smallest-prime-factor table."""
    if not 1 <= n < len(spf):
        raise ValueError(f"n must be between 1 and {len(spf) - 1}")
    factors: list[int] = []
    while n != 1:
        factors.append(spf[n])
        n //= spf[n]
    return factors


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """``base`` raised to ``exponent`` modulo ``modulus``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def mod_inverse(value: int, modulus: int) -> int:
    """Multiplicative inverse of ``value`` modulo a prime ``modulus`` by Fermat's little theorem."""
    if modulus < 2:
        raise ValueError("modulus must be a prime")
    if value % modulus == 0:
        raise ValueError("value has no inverse modulo the modulus")
    return mod_pow(value, modulus - 2, modulus)


class BinomialTable:
    """Precomputed factorials for binomial coefficients modulo a prime."""

    def __init__(self, size: int, modulus: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        if size > modulus:
            raise ValueError("size must not exceed the modulus")
        self.size = size
        self.modulus = modulus
        self._fact = [1] * size
        for i in range(1, size):
            self._fact[i] = self._fact[i - 1] * i % modulus
        self._inverse = [1] * size
        self._inverse[-1] = mod_inverse(self._fact[-1], modulus)
        for i in range(size - 2, -1, -1):
            self._inverse[i] = self._inverse[i + 1] * (i + 1) % modulus

    def ncr(self, n: int, r: int) -> int:
        """n choose r modulo the table's modulus; 0 when r > n."""
        if n < 0 or r < 0:
            raise ValueError("n and r must not be negative")
        if r > n:
            return 0
        if n >= self.size:
            raise ValueError(f"n must be below the table size {self.size}")
        return self._fact[n] * self._inverse[n - r] % self.modulus * self._inverse[r] % self.modulus


def is_palindrome_number(n: int) -> bool:
    """True when the decimal digits of a non-negative ``n`` read the same backwards."""
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def is_armstrong(n: int) -> bool:
    """True when ``n`` equals the sum of its digits each raised to the number of digits."""
    digits = str(abs(n))
    sign = -1 if n < 0 else 1
    power = len(digits)
    return sum((sign * int(d)) ** power for d in digits) == n