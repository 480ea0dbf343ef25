import pytest

from plonkit.target import PublicInput, VirtualTarget, Wire, target_index

NUM_WIRES = 11
NUM_ROUTED_WIRES = 6


def test_wire_is_routable_boundary():
    assert Wire(gate=0, input=NUM_ROUTED_WIRES - 1).is_routable(NUM_ROUTED_WIRES) is True
    assert Wire(gate=0, input=NUM_ROUTED_WIRES).is_routable(NUM_ROUTED_WIRES) is False


def test_targets_hash_and_compare_by_value():
    targets = {Wire(1, 2), Wire(1, 2), VirtualTarget(3), VirtualTarget(3), PublicInput(3)}
    assert len(targets) == 3
    assert VirtualTarget(3) != PublicInput(3)


def test_targets_are_immutable():
    wire = Wire(gate=1, input=2)
    with pytest.raises(AttributeError):
        wire.gate = 5
    assert wire.gate == 1
    assert wire == Wire(gate=1, input=2)
    assert target_index(wire) == 1


def test_target_index_for_each_kind():
    assert target_index(VirtualTarget(index=42)) == 42
    assert target_index(PublicInput(index=17)) == 17
    assert target_index(Wire(gate=9, input=4)) == 9


def test_target_index_rejects_other_values():
    with pytest.raises(TypeError):
        target_index(5)


def test_original_wire_first_input_sits_at_offset():
    offset = 30
    assert PublicInput(0).original_wire(offset, NUM_WIRES) == Wire(gate=offset, input=0)


def test_original_wire_layout_invariants():
    offset = 7
    seen = set()
    for index in range(5 * NUM_WIRES):
        wire = PublicInput(index).original_wire(offset, NUM_WIRES)
        assert 0 <= wire.input < NUM_WIRES
        assert wire.gate >= offset
        assert (wire.gate - offset) % 2 == 0
        seen.add(wire)
    assert len(seen) == 5 * NUM_WIRES


def test_original_wire_next_block_skips_two_gates():
    offset = 3
    for index in range(NUM_WIRES):
        here = PublicInput(index).original_wire(offset, NUM_WIRES)
        there = PublicInput(index + NUM_WIRES).original_wire(offset, NUM_WIRES)
        assert there.gate == here.gate + 2
        assert there.input == here.input


def test_routable_target_is_routable_and_near_original():
    offset = 12
    seen = set()
    for index in range(4 * NUM_WIRES):
        pi = PublicInput(index)
        original = pi.original_wire(offset, NUM_WIRES)
        routed = pi.routable_target(offset, NUM_WIRES, NUM_ROUTED_WIRES)
        assert routed.is_routable(NUM_ROUTED_WIRES)
        if original.is_routable(NUM_ROUTED_WIRES):
            assert routed == original
        else:
            assert routed.gate == original.gate + 1
            assert routed.input + NUM_ROUTED_WIRES == original.input
        seen.add(routed)
    assert len(seen) == 4 * NUM_WIRES