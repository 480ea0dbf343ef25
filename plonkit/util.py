"""Small integer helpers and a list-of-lists transpose."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

__all__ = ["ceil_div", "pad_to_multiple", "log2_ceil", "log2_strict", "transpose"]


def ceil_div(a: int, b: int) -> int:
    """Return ``ceil(a / b)`` for non-negative ``a`` and positive ``b``."""
    return (a + b - 1) // b


def pad_to_multiple(a: int, b: int) -> int:
    """Return the smallest multiple of ``b`` that is at least ``a``."""
    return ceil_div(a, b) * b


def log2_ceil(n: int) -> int:
    """Return ``ceil(log2(n))``; zero and one both give 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return (max(n, 1) - 1).bit_length()


def log2_strict(n: int) -> int:
    """Return ``log2(n)``, raising ``ValueError`` if ``n`` is not a power of two."""
    if n <= 0 or n & (n - 1):
        raise ValueError("Not a power of two")
    return log2_ceil(n)


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Transpose a row-major matrix whose width is set by its first row."""
    if not matrix:
        raise ValueError("Cannot transpose an empty matrix")
    width = len(matrix[0])
    if any(len(row) < width for row in matrix):
        raise ValueError("Every row must be at least as long as the first row")
    return [list(column) for column in zip(*(row[:width] for row in matrix))]