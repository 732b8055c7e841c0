"""Number-theory routines: modular arithmetic, sieves and Fibonacci numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from math import isqrt
from typing import NamedTuple

__all__ = [
    "BitCounts",
    "FACTORIAL_DIVISOR_MODULUS",
    "MODULUS",
    "count_bits",
    "count_operations",
    "cube_free_index",
    "divisible_by_41",
    "factorial_divisor_count",
    "factorial_mod",
    "fibonacci",
    "fibonacci_sum",
    "good_sets_count",
    "increasing_pair_sum",
    "mod_pow",
    "segmented_primes",
    "totient",
    "totient_table",
]

MODULUS = 1_000_000_007
FACTORIAL_DIVISOR_MODULUS = 10_000_000_007


class BitCounts(NamedTuple):
    """Number of set bits and number of trailing zero bits of an integer."""

    ones: int
    trailing_zeros: int


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value!r}")


def _primes_up_to(limit: int) -> list[int]:
    """All primes p with 2 <= p <= limit."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    for p in range(2, isqrt(limit) + 1):
        if not composite[p]:
            composite[p * p :: p] = b"\x01" * len(range(p * p, limit + 1, p))
    return [n for n in range(2, limit + 1) if not composite[n]]


def count_bits(value: int) -> BitCounts:
    """Count the 1 bits and the trailing 0 bits of ``value``.

    Zero is treated as a single 0 digit: no ones and one trailing zero.
    """
    _require_non_negative("value", value)
    if value == 0:
        return BitCounts(0, 1)
    return BitCounts(bin(value).count("1"), (value & -value).bit_length() - 1)


def count_operations(a: int, b: int) -> int | None:
    """Minimum number of binary shuffle operations turning ``a`` into ``b``.

    Returns None when ``b`` cannot be reached.
    """
    _require_non_negative("a", a)
    _require_non_negative("b", b)
    if a == b:
        return 0
    if b == 0:
        return None
    if b == 1:
        return 1 if a == 0 else None
    ones_a, _ = count_bits(a)
    ones_b, zeros_b = count_bits(b)
    operations = ones_b - ones_a + zeros_b
    return operations if operations > 0 else 2


def factorial_mod(n: int, p: int) -> int:
    """Compute n! mod p for a prime ``p`` using Wilson's theorem.

    Only the factors between n and p are multiplied, which is fast when n is
    close to p.
    """
    _require_non_negative("n", n)
    if p < 2:
        raise ValueError(f"modulus must be a prime, got {p!r}")
    if n >= p:
        return 0
    tail = 1
    for factor in range(n + 1, p):
        tail = tail * factor % p
    return (p - pow(tail, p - 2, p)) % p


def _sort_and_sum(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    middle = len(items) // 2
    left, left_total = _sort_and_sum(items[:middle])
    right, right_total = _sort_and_sum(items[middle:])
    total = left_total + right_total
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            total += left[i] * (len(right) - j)
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, total


def increasing_pair_sum(values: Iterable[int]) -> int:
    """Sum of ``values[i]`` over all pairs i < j with ``values[i] < values[j]``."""
    return _sort_and_sum(list(values))[1]


def cube_free_index(n: int) -> int | None:
    """Position of ``n`` among the cube-free numbers 1, 2, 3, ... (1-based).

    Returns None when ``n`` is divisible by a cube greater than 1.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n!r}")
    has_cube = bytearray(n + 1)
    base = 2
    while base**3 <= n:
        cube = base**3
        has_cube[cube::cube] = b"\x01" * len(range(cube, n + 1, cube))
        base += 1
    if has_cube[n]:
        return None
    return n - has_cube.count(1)


def divisible_by_41(a0: int, a1: int, c: int, n: int) -> bool:
    """Whether the n-digit number built from a0, a1 and d[i] = (c*d[i-1] + d[i-2]) mod 10
    is divisible by 41."""
    if n < 2:
        raise ValueError(f"the number needs at least two digits, got n={n!r}")
    for name, digit in (("a0", a0), ("a1", a1)):
        if not 0 <= digit <= 9:
            raise ValueError(f"{name} must be a decimal digit, got {digit!r}")
    remainder = (10 * a0 + a1) % 41
    previous, last = a0, a1
    for _ in range(n - 2):
        digit = (c * last + previous) % 10
        remainder = (remainder * 10 + digit) % 41
        previous, last = last, digit
    return remainder == 0


def factorial_divisor_count(n: int) -> int:
    """Number of divisors of n!, modulo FACTORIAL_DIVISOR_MODULUS."""
    _require_non_negative("n", n)
    result = 1
    for prime in _primes_up_to(n):
        exponent = 0
        power = prime
        while power <= n:
            exponent += n // power
            power *= prime
        result = result * (exponent + 1) % FACTORIAL_DIVISOR_MODULUS
    return result


def totient_table(limit: int) -> list[int]:
    """Euler's totient of every integer 0..limit (phi(0) is 0)."""
    _require_non_negative("limit", limit)
    phi = list(range(limit + 1))
    for i in range(2, limit + 1):
        if phi[i] == i:
            for multiple in range(i, limit + 1, i):
                phi[multiple] -= phi[multiple] // i
    return phi


def totient(n: int) -> int:
    """Euler's totient of ``n`` by trial-division factorisation (phi(0) is 0)."""
    _require_non_negative("n", n)
    result = n
    remaining = n
    factor = 2
    while factor * factor <= remaining:
        if remaining % factor == 0:
            while remaining % factor == 0:
                remaining //= factor
            result -= result // factor
        factor += 1
    if remaining > 1:
        result -= result // remaining
    return result


def _fibonacci_pair(n: int, modulus: int | None) -> tuple[int, int]:
    """(F(n), F(n+1)) by fast doubling, optionally reduced modulo ``modulus``."""
    if n == 0:
        return (0, 1) if modulus is None else (0, 1 % modulus)
    a, b = _fibonacci_pair(n >> 1, modulus)
    even = a * (2 * b - a)
    odd = a * a + b * b
    if modulus is not None:
        even %= modulus
        odd %= modulus
    return (odd, even + odd if modulus is None else (even + odd) % modulus) if n & 1 else (even, odd)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number with F(0) = 0 and F(1) = F(2) = 1."""
    _require_non_negative("n", n)
    return _fibonacci_pair(n, None)[0]


def fibonacci_sum(n: int, m: int) -> int:
    """Sum of F(n) .. F(m) inclusive, modulo MODULUS; zero when n > m."""
    _require_non_negative("n", n)
    if n > m:
        return 0
    upper = _fibonacci_pair(m + 2, MODULUS)[0]
    lower = _fibonacci_pair(n + 1, MODULUS)[0]
    return (upper - lower) % MODULUS


def good_sets_count(values: Iterable[int]) -> int:
    """Count the divisibility chains that can be formed from ``values``, modulo MODULUS.

    A chain is a non-empty set in which each element divides the next. Each
    copy of a value starts its own chain; chains are extended from every value
    of at least 2 to its multiples, so 1 only ever forms a chain on its own.
    """
    counts = Counter(values)
    if any(value < 1 for value in counts):
        raise ValueError("values must be positive integers")
    top = max(counts, default=0)
    chains = [0] * (top + 1)
    for value, count in counts.items():
        chains[value] = count % MODULUS
    for divisor in range(2, top + 1):
        if chains[divisor]:
            for multiple in range(2 * divisor, top + 1, divisor):
                if chains[multiple]:
                    chains[multiple] = (chains[multiple] + chains[divisor]) % MODULUS
    return sum(chains) % MODULUS


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute base ** exponent mod modulus by repeated squaring."""
    _require_non_negative("exponent", exponent)
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus!r}")
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def segmented_primes(lower: int, upper: int) -> list[int]:
    """All primes in [lower, upper], sieving only that range."""
    low = max(lower, 2)
    if low > upper:
        return []
    composite = bytearray(upper - low + 1)
    for prime in _primes_up_to(isqrt(upper)):
        start = max(prime * prime, -(-low // prime) * prime)
        if start <= upper:
            composite[start - low :: prime] = b"\x01" * len(range(start, upper + 1, prime))
    return [low + offset for offset, flag in enumerate(composite) if not flag]