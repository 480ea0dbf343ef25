"""Opening sets and deferred Halo proofs."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Sequence

from .plonk_util import halo_g, halo_s
from .target import Target
from .witness import PartialWitness

__all__ = ["OpeningSet", "OpeningSetTarget", "OldProof"]


@dataclass
class OpeningSet:
    """The opening of each Plonk polynomial at one point."""

    o_constants: list[int]
    o_plonk_sigmas: list[int]
    o_wires: list[int]
    o_plonk_z: int
    o_plonk_t: list[int]
    o_old_proofs: list[int]
    o_pi_quotient: int

    def to_vec(self) -> list[int]:
        """All opened values in transcript order."""
        return list(
            chain(
                self.o_constants,
                self.o_plonk_sigmas,
                self.o_wires,
                (self.o_plonk_z,),
                self.o_plonk_t,
                self.o_old_proofs,
                (self.o_pi_quotient,),
            )
        )


@dataclass
class OpeningSetTarget:
    """Targets holding the opening of each Plonk polynomial at one point.

    ``modulus`` is the order of the field the targets live in; when given,
    every value put into a witness must be a canonical element of it.
    """

    o_constants: list[Target]
    o_plonk_sigmas: list[Target]
    o_wires: list[Target]
    o_plonk_z: Target
    o_plonk_t: list[Target]
    o_old_proofs: list[Target]
    modulus: int | None = None

    def to_vec(self) -> list[Target]:
        """All targets in transcript order."""
        return list(
            chain(
                self.o_constants,
                self.o_plonk_sigmas,
                self.o_wires,
                (self.o_plonk_z,),
                self.o_plonk_t,
                self.o_old_proofs,
            )
        )

    def _convert(self, values: Sequence[int]) -> list[int]:
        converted = []
        for value in values:
            if value < 0 or (self.modulus is not None and value >= self.modulus):
                raise ValueError(f"value {value} does not fit in the target field")
            converted.append(value)
        return converted

    def populate_witness(self, witness: PartialWitness, values: OpeningSet) -> None:
        """Assign the opened values of ``values`` to these targets."""
        witness.set_targets(self.o_constants, self._convert(values.o_constants))
        witness.set_targets(self.o_plonk_sigmas, self._convert(values.o_plonk_sigmas))
        witness.set_targets(self.o_wires, self._convert(values.o_wires))
        witness.set_target(self.o_plonk_z, self._convert([values.o_plonk_z])[0])
        witness.set_targets(self.o_plonk_t, self._convert(values.o_plonk_t))
        witness.set_targets(self.o_old_proofs, self._convert(values.o_old_proofs))


@dataclass
class OldProof:
    """Data needed to check a proof's ``halo_g`` point later.

    ``halo_g`` commits to the Halo ``g`` polynomial defined by ``halo_us``.
    """

    halo_g: object
    halo_us: list[int] = field(default_factory=list)
    modulus: int = 2

    def coeffs(self) -> list[int]:
        """Coefficients of the Halo ``g`` polynomial."""
        return halo_s(self.halo_us, self.modulus)

    def evaluate_g(self, x: int) -> int:
        """Evaluate the Halo ``g`` polynomial at ``x``."""
        return halo_g(x, self.halo_us, self.modulus)