"""Field helpers used by the Plonk prover and verifier.

Field elements are canonical integers modulo a prime ``modulus``.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence

from .polynomial import Polynomial

__all__ = [
    "eval_zero_poly",
    "eval_l_1",
    "reduce_with_powers",
    "halo_n",
    "eval_poly",
    "powers",
    "pad_to_8n",
    "scale_polynomials",
    "halo_s",
    "halo_g",
]


def _inverse(x: int, modulus: int) -> int:
    x %= modulus
    if x == 0:
        raise ZeroDivisionError("zero has no multiplicative inverse")
    return pow(x, -1, modulus)


def eval_zero_poly(n: int, x: int, modulus: int) -> int:
    """Evaluate ``Z(x) = x^n - 1``, which vanishes on the order-``n`` subgroup."""
    return (pow(x, n, modulus) - 1) % modulus


def eval_l_1(n: int, x: int, modulus: int) -> int:
    """Evaluate the Lagrange basis ``L_1`` of an order-``n`` multiplicative subgroup."""
    if x % modulus == 1:
        return 1
    denominator = n * (x - 1)
    return eval_zero_poly(n, x, modulus) * _inverse(denominator, modulus) % modulus


def reduce_with_powers(terms: Sequence[int], alpha: int, modulus: int) -> int:
    """Compute ``sum(terms[i] * alpha^i)``."""
    total = 0
    for term in reversed(terms):
        total = (total * alpha + term) % modulus
    return total


def halo_n(s_bits: Sequence[bool], zeta_scalar: int, modulus: int) -> int:
    """Compute ``n(s)``, the injective map tied to the Halo endomorphism.

    ``zeta_scalar`` is the scalar by which the endomorphism acts. Bits are
    read in (low, high) pairs starting from ``(a, b) = (0, 0)``.
    """
    if len(s_bits) % 2:
        raise ValueError("Number of scalar bits must be even")
    a = b = 0
    for bit_lo, bit_hi in zip(s_bits[0::2], s_bits[1::2]):
        sign = 1 if bit_lo else -1
        c, d = (sign, 0) if bit_hi else (0, sign)
        a = (2 * a + c) % modulus
        b = (2 * b + d) % modulus
    return (a * zeta_scalar + b) % modulus


def eval_poly(coeffs: Sequence[int], x: int, modulus: int) -> int:
    """Evaluate the polynomial with coefficients ``coeffs`` (lowest first) at ``x``."""
    total = 0
    x_pow = 1
    for c in coeffs:
        total = (total + c * x_pow) % modulus
        x_pow = x_pow * x % modulus
    return total


def powers(x: int, n: int, modulus: int) -> list[int]:
    """Return ``[x^0, x^1, ..., x^(n - 1)]``."""
    result: list[int] = []
    current = 1 % modulus
    for _ in range(n):
        result.append(current)
        current = current * x % modulus
    return result


def pad_to_8n(coeffs: Sequence[int]) -> list[int]:
    """Zero-pad ``n`` coefficients to length ``8n``."""
    return list(coeffs) + [0] * (7 * len(coeffs))


def scale_polynomials(polynomials: Sequence[Polynomial], alpha: int, degree: int) -> Polynomial:
    """Return ``sum(alpha^i * polynomials[i])`` with ``degree`` coefficients."""
    if not polynomials:
        raise ValueError("at least one polynomial is required")
    modulus = polynomials[0].modulus
    if any(p.modulus != modulus for p in polynomials):
        raise ValueError("polynomials are over different fields")
    alpha_powers = powers(alpha, len(polynomials), modulus)
    coeffs = [
        sum(poly[i] * ap for poly, ap in zip(polynomials, alpha_powers)) % modulus
        for i in range(degree)
    ]
    return Polynomial(coeffs, modulus)


def halo_s(us: Sequence[int], modulus: int) -> list[int]:
    """Coefficients of the Halo ``g`` polynomial for challenges ``us``."""
    res = [1] * (1 << len(us))
    us_inv = [_inverse(u, modulus) for u in us]
    for j, (u, u_inv) in enumerate(zip(reversed(us), reversed(us_inv))):
        bit = 1 << j
        res = [x * (u if i & bit else u_inv) % modulus for i, x in enumerate(res)]
    return res


def halo_g(x: int, us: Sequence[int], modulus: int) -> int:
    """Evaluate ``g(X, {u_i})`` from the Halo paper at ``x``."""
    product = 1 % modulus
    x_power = x % modulus
    for u in reversed(us):
        term = (u * x_power + _inverse(u, modulus)) % modulus
        product = product * term % modulus
        x_power = x_power * x_power % modulus
    return product


def _inner_product(a: Sequence[int], b: Sequence[int], modulus: int) -> int:
    return sum(x * y for x, y in zip_longest(a, b, fillvalue=0)) % modulus