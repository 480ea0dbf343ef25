"""Pseudorandom functions and generators built on them."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["PRF", "PRG", "PRFBasedPRG"]

_U32_MASK = 0xFFFF_FFFF


class PRF(ABC):
    """A pseudorandom function on field elements, given as canonical integers."""

    @abstractmethod
    def rand(self, x: int) -> int:
        """Map a field element to a pseudorandom field element."""


class PRG(ABC):
    """A pseudorandom generator."""

    @abstractmethod
    def next_bool(self) -> bool:
        """Return the next pseudorandom bit."""

    @abstractmethod
    def next_u32(self) -> int:
        """Return the next pseudorandom 32-bit unsigned integer."""

    @abstractmethod
    def next_field(self) -> int:
        """Return the next pseudorandom field element."""


class PRFBasedPRG(PRG):
    """A generator that repeatedly feeds its state through a PRF; unseeded means seed 0."""

    def __init__(self, prf: PRF, seed: int = 0) -> None:
        self.prf = prf
        self.state = seed

    def next_bool(self) -> bool:
        return self.next_u32() & 1 != 0

    def next_u32(self) -> int:
        return int(self.next_field()) & _U32_MASK

    def next_field(self) -> int:
        self.state = self.prf.rand(self.state)
        return self.state