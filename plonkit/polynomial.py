"""Dense univariate polynomials over a prime field, in coefficient form."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Iterator, Sequence

__all__ = ["Polynomial"]


class Polynomial:
    """A polynomial over the prime field of order ``modulus``.

    Coefficients are stored lowest degree first as canonical integers. The
    number of stored coefficients may exceed ``degree() + 1``; trailing zeros
    are ignored by equality.
    """

    __slots__ = ("_coeffs", "modulus")

    def __init__(self, coeffs: Iterable[int], modulus: int) -> None:
        if modulus < 2:
            raise ValueError("modulus must be a prime greater than 1")
        self.modulus = modulus
        self._coeffs = [c % modulus for c in coeffs]

    # Construction -----------------------------------------------------------

    @classmethod
    def empty(cls, modulus: int) -> Polynomial:
        """A polynomial with no coefficients."""
        return cls((), modulus)

    @classmethod
    def zero(cls, length: int, modulus: int) -> Polynomial:
        """The zero polynomial stored with ``length`` coefficients."""
        return cls([0] * length, modulus)

    def _new(self, coeffs: Iterable[int]) -> Polynomial:
        return Polynomial(coeffs, self.modulus)

    def _check_field(self, other: Polynomial) -> None:
        if self.modulus != other.modulus:
            raise ValueError("polynomials are over different fields")

    def _inverse(self, x: int) -> int:
        return pow(x, -1, self.modulus)

    # Container protocol -----------------------------------------------------

    def coeffs(self) -> list[int]:
        """A copy of the coefficient list, lowest degree first."""
        return list(self._coeffs)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._coeffs)

    def __getitem__(self, index):
        return self._coeffs[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._coeffs[index] = value % self.modulus

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.modulus != other.modulus:
            return False
        return all(a == b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs!r}, modulus={self.modulus})"

    # Inspection -------------------------------------------------------------

    def is_zero(self) -> bool:
        """Whether every coefficient is zero."""
        return not any(self._coeffs)

    def _degree_plus_one(self) -> int:
        for i in range(len(self._coeffs) - 1, -1, -1):
            if self._coeffs[i]:
                return i + 1
        return 0

    def degree(self) -> int:
        """Degree of the polynomial; raises ``ValueError`` for the zero polynomial."""
        d = self._degree_plus_one()
        if d == 0:
            raise ValueError("Zero polynomial")
        return d - 1

    def lead(self) -> int:
        """Leading (highest non-zero) coefficient, or 0 for the zero polynomial."""
        d = self._degree_plus_one()
        return self._coeffs[d - 1] if d else 0

    # Evaluation -------------------------------------------------------------

    def eval(self, x: int) -> int:
        """Evaluate at ``x`` with Horner's rule."""
        p = self.modulus
        acc = 0
        for c in reversed(self._coeffs):
            acc = (acc * x + c) % p
        return acc

    def eval_from_power(self, x_pow: Sequence[int]) -> int:
        """Evaluate given the powers ``[x^0, x^1, ...]`` of the point."""
        return sum(c * xp for c, xp in zip(self._coeffs, x_pow)) % self.modulus

    # Shape ------------------------------------------------------------------

    def trim(self) -> None:
        """Remove trailing zero coefficients in place."""
        while self._coeffs and self._coeffs[-1] == 0:
            self._coeffs.pop()

    def pad(self, length: int) -> None:
        """Trim, then zero-pad in place to ``length`` coefficients."""
        self.trim()
        if len(self._coeffs) > length:
            raise ValueError(
                f"cannot pad a polynomial with {len(self._coeffs)} coefficients to {length}"
            )
        self._coeffs.extend([0] * (length - len(self._coeffs)))

    def padded(self, length: int) -> Polynomial:
        """A trimmed copy zero-padded to ``length`` coefficients."""
        result = self._new(self._coeffs)
        result.pad(length)
        return result

    def _rev(self) -> Polynomial:
        d = self.degree()
        return self._new(reversed(self._coeffs[: d + 1]))

    # Arithmetic -------------------------------------------------------------

    def add(self, other: Polynomial) -> Polynomial:
        """Coefficient-wise sum."""
        self._check_field(other)
        return self._new(a + b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0))

    def __add__(self, other: Polynomial) -> Polynomial:
        return self.add(other)

    def __neg__(self) -> Polynomial:
        return self._new(-c for c in self._coeffs)

    def __sub__(self, other: Polynomial) -> Polynomial:
        return self.add(-other)

    def _scalar_mul(self, c: int) -> Polynomial:
        return self._new(c * x for x in self._coeffs)

    def mul(self, other: Polynomial) -> Polynomial:
        """Product of two polynomials; a zero factor gives ``zero(1)``."""
        self._check_field(other)
        if self.is_zero() or other.is_zero():
            return Polynomial.zero(1, self.modulus)
        a = self._coeffs[: self.degree() + 1]
        b = other._coeffs[: other.degree() + 1]
        p = self.modulus
        result = [0] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            if ai:
                for j, bj in enumerate(b):
                    result[i + j] = (result[i + j] + ai * bj) % p
        return self._new(result)

    def __mul__(self, other: Polynomial) -> Polynomial:
        return self.mul(other)

    def inv_mod_xn(self, n: int) -> Polynomial:
        """The inverse of this polynomial modulo ``X^n``, with ``n`` coefficients."""
        if not self._coeffs or self._coeffs[0] == 0:
            raise ValueError("Inverse doesn't exist.")
        p = self.modulus
        h = self._coeffs
        h0_inv = self._inverse(h[0])
        inv = [h0_inv]
        for k in range(1, n):
            acc = sum(h[j] * inv[k - j] for j in range(1, min(k, len(h) - 1) + 1))
            inv.append(-acc * h0_inv % p)
        return self._new(inv[:n])

    def polynomial_long_division(self, divisor: Polynomial) -> tuple[Polynomial, Polynomial]:
        """Schoolbook division; returns ``(quotient, remainder)``."""
        self._check_field(divisor)
        if divisor.is_zero():
            raise ZeroDivisionError("Division by zero polynomial")
        if self.is_zero():
            return Polynomial.zero(1, self.modulus), Polynomial.empty(self.modulus)
        a_degree, b_degree = self.degree(), divisor.degree()
        if a_degree < b_degree:
            return Polynomial.zero(1, self.modulus), self._new(self._coeffs)

        p = self.modulus
        b = divisor._coeffs[: b_degree + 1]
        lead_inv = self._inverse(b[-1])
        quotient = [0] * (a_degree - b_degree + 1)
        remainder = self._coeffs[: a_degree + 1]
        while remainder and len(remainder) - 1 >= b_degree:
            shift = len(remainder) - 1 - b_degree
            coeff = remainder[-1] * lead_inv % p
            quotient[shift] = coeff
            for i, bc in enumerate(b):
                remainder[shift + i] = (remainder[shift + i] - coeff * bc) % p
            while remainder and remainder[-1] == 0:
                remainder.pop()
        return self._new(quotient), self._new(remainder)

    def polynomial_division(self, divisor: Polynomial) -> tuple[Polynomial, Polynomial]:
        """Division through reversed polynomials and a power-series inverse."""
        self._check_field(divisor)
        if divisor.is_zero():
            raise ZeroDivisionError("Division by zero polynomial")
        if self.is_zero():
            return Polynomial.zero(1, self.modulus), Polynomial.empty(self.modulus)
        a_degree, b_degree = self.degree(), divisor.degree()
        if a_degree < b_degree:
            return Polynomial.zero(1, self.modulus), self._new(self._coeffs)
        if b_degree == 0:
            return (
                self._scalar_mul(self._inverse(divisor._coeffs[0])),
                Polynomial.empty(self.modulus),
            )

        k = a_degree - b_degree + 1
        rev_b_inv = divisor._rev().inv_mod_xn(k)
        rev_a_low = self._new(self._rev()._coeffs[:k])
        rev_q = rev_b_inv.mul(rev_a_low)._coeffs[:k]
        rev_q.extend([0] * (k - len(rev_q)))
        q = self._new(reversed(rev_q))
        r = self - q.mul(divisor)
        q.trim()
        r.trim()
        return q, r

    def divide_by_z_h(self, n: int) -> Polynomial:
        """Divide by ``X^n - 1``, assuming the division is exact."""
        if self.is_zero():
            return self._new(self._coeffs)
        p = self.modulus
        a = self._coeffs[: self.degree() + 1]
        d = len(a) - 1
        q_len = max(d - n + 1, 0)
        quotient = [0] * q_len
        # a_i = q_{i-n} - q_i, solved from the top coefficient down.
        for i in range(d, n - 1, -1):
            higher = quotient[i] if i < q_len else 0
            quotient[i - n] = (a[i] + higher) % p
        return self._new(quotient)