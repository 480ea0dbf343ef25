"""Routing targets: wires, virtual targets and public inputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = ["VirtualTarget", "Wire", "PublicInput", "Target", "target_index"]


@dataclass(frozen=True)
class VirtualTarget:
    """A proxy wire usable in routing and witness generation but not itself a wire."""

    index: int


@dataclass(frozen=True)
class Wire:
    """A wire in the circuit, identified by its gate and the gate input it occupies."""

    gate: int
    input: int

    def is_routable(self, num_routed_wires: int) -> bool:
        """Whether this wire takes part in the copy-constraint permutation."""
        return self.input < num_routed_wires


@dataclass(frozen=True)
class PublicInput:
    """A public input, laid out across pairs of gates after ``offset``."""

    index: int

    def original_wire(self, offset: int, num_wires: int) -> Wire:
        """The wire of the public-input gate that holds this input."""
        block, position = divmod(self.index, num_wires)
        return Wire(gate=offset + block * 2, input=position)

    def routable_target(self, offset: int, num_wires: int, num_routed_wires: int) -> Wire:
        """A routable wire carrying this input, moved to the next gate if needed."""
        wire = self.original_wire(offset, num_wires)
        if wire.input >= num_routed_wires:
            return Wire(gate=wire.gate + 1, input=wire.input - num_routed_wires)
        return wire


Target = Union[PublicInput, VirtualTarget, Wire]


def target_index(target: Target) -> int:
    """The index of a target; for a wire this is its gate."""
    if isinstance(target, Wire):
        return target.gate
    if isinstance(target, (PublicInput, VirtualTarget)):
        return target.index
    raise TypeError(f"not a target: {target!r}")