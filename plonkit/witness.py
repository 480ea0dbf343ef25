"""Partial and complete wire assignments for a circuit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .target import PublicInput, Target, Wire
from .util import transpose as _transpose

__all__ = ["PartialWitness", "Witness"]


class PartialWitness:
    """A mapping from targets to field values, filled in incrementally."""

    def __init__(self, values: Mapping[Target, int] | None = None) -> None:
        self._values: dict[Target, int] = {}
        if values:
            for target, value in values.items():
                self.set_target(target, value)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PartialWitness({self._values!r})"

    def is_empty(self) -> bool:
        return not self._values

    def contains_target(self, target: Target) -> bool:
        return target in self._values

    def contains_wire(self, wire: Wire) -> bool:
        return self.contains_target(wire)

    def contains_all_targets(self, targets: Iterable[Target]) -> bool:
        return all(t in self._values for t in targets)

    def all_populated_targets(self) -> list[Target]:
        return list(self._values)

    def get_target(self, target: Target) -> int:
        """The value of ``target``; raises ``KeyError`` if it is unset."""
        return self._values[target]

    def get_targets(self, targets: Iterable[Target]) -> list[int]:
        return [self._values[t] for t in targets]

    def get_wire(self, wire: Wire) -> int:
        return self.get_target(wire)

    def set_target(self, target: Target, value: int) -> None:
        """Assign ``value``; raises ``ValueError`` if a different value is already set."""
        old = self._values.get(target)
        if old is not None and old != value:
            raise ValueError(f"Target {target!r} was set twice with different values")
        self._values[target] = value

    def set_targets(self, targets: Sequence[Target], values: Sequence[int]) -> None:
        if len(targets) != len(values):
            raise ValueError("targets and values differ in length")
        for target, value in zip(targets, values):
            self.set_target(target, value)

    def set_wire(self, wire: Wire, value: int) -> None:
        self.set_target(wire, value)

    def extend(self, other: PartialWitness) -> None:
        """Merge every assignment of ``other`` into this witness."""
        for target, value in other._values.items():
            self.set_target(target, value)

    def replace_public_inputs(self, offset: int, num_wires: int) -> None:
        """Re-key every public-input target by its wire in the public-input gates."""
        moved = {
            t.original_wire(offset, num_wires): v
            for t, v in self._values.items()
            if isinstance(t, PublicInput)
        }
        self._values = {t: v for t, v in self._values.items() if not isinstance(t, PublicInput)}
        self._values.update(moved)

    def copy_buffer_to_pi_gate(
        self, offset: int, num_advice_wires: int, num_routed_wires: int
    ) -> None:
        """Mirror buffer-gate wires into the non-routed wires of the preceding public-input gate."""
        copies = {
            Wire(gate=t.gate - 1, input=num_routed_wires + t.input): v
            for t, v in self._values.items()
            if isinstance(t, Wire)
            and t.gate > offset
            and (t.gate - offset) % 2 == 1
            and t.input < num_advice_wires
        }
        self._values.update(copies)


@dataclass
class Witness:
    """A complete assignment: one row of wire values per gate."""

    wire_values: list[list[int]] = field(default_factory=list)

    def get(self, wire: Wire) -> int:
        return self.wire_values[wire.gate][wire.input]

    def get_indices(self, i: int, j: int) -> int:
        return self.wire_values[i][j]

    def transpose(self) -> list[list[int]]:
        """Wire values arranged one row per wire input."""
        return _transpose(self.wire_values)

    @classmethod
    def from_partial(cls, pw: PartialWitness, degree: int, num_wires: int) -> Witness:
        """Build a witness for ``degree`` gates; unset wires become zero."""
        rows = [
            [
                pw.get_wire(Wire(gate, j)) if pw.contains_wire(Wire(gate, j)) else 0
                for j in range(num_wires)
            ]
            for gate in range(degree)
        ]
        return cls(rows)