# plonkit

Building blocks for PLONK-style proof systems with Halo-style openings.
Every function works over a prime field that you name by its modulus, and
field elements are plain Python integers.

## Installation

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Modules

- `plonkit.util` has the integer helpers `ceil_div`, `pad_to_multiple`,
  `log2_ceil`, `log2_strict` and `transpose`. `log2_strict` raises
  `ValueError` when its argument is not a power of two.
- `plonkit.target` defines the frozen dataclasses `Wire`, `VirtualTarget`
  and `PublicInput`.
  - `Wire.is_routable(num_routed_wires)` reports whether a wire is routable.
  - `PublicInput.original_wire(offset, num_wires)` and
    `PublicInput.routable_target(offset, num_wires, num_routed_wires)` map a
    public input onto the public-input gates.
  - `target_index` returns a target's index. For a wire, that index is its
    gate.
- `plonkit.pseudorandom` defines the abstract `PRF` and `PRG` classes.
  - `PRFBasedPRG(prf, seed=0)` produces its values by feeding its state
    through the PRF again and again.
  - `next_u32` keeps the low 32 bits of the next field element.
  - `next_bool` keeps the lowest bit.
  - No concrete PRF comes with the package.
- `plonkit.polynomial` provides `Polynomial(coeffs, modulus)`, with
  coefficients stored lowest degree first.
  - It has `eval`, `eval_from_power`, `add`, `mul`, `inv_mod_xn`,
    `polynomial_long_division`, `polynomial_division` and `divide_by_z_h`,
    which divides by `X^n - 1`.
  - It has `trim`, `pad`, `padded`, `degree`, `lead` and `is_zero`.
  - It supports `+`, `-` and `*`.
  - Equality ignores trailing zeros.
  - `degree()` of the zero polynomial raises `ValueError`.
  - Dividing by the zero polynomial raises `ZeroDivisionError`.
- `plonkit.plonk_util` has the field helpers `eval_zero_poly`, `eval_l_1`,
  `reduce_with_powers`, `halo_n`, `eval_poly`, `powers`, `pad_to_8n`,
  `scale_polynomials`, `halo_s` and `halo_g`.
- `plonkit.witness` provides `PartialWitness` and `Witness`.
  - `PartialWitness` maps targets to values. Setting a target a second time
    with a different value raises `ValueError`.
  - `Witness` is the full table of wire values, one row per gate.
  - `Witness.from_partial(pw, degree, num_wires)` builds a `Witness` and
    fills unset wires with zero.
- `plonkit.plonk_proof` provides three dataclasses: `OpeningSet`,
  `OpeningSetTarget` and `OldProof`.
  - `OpeningSet` holds the opened values.
  - `OpeningSetTarget` holds the matching targets, and its
    `populate_witness` checks each value against an optional `modulus`.
  - `OldProof` holds a `halo_g` value, the `halo_us` challenges and a
    `modulus`, which defaults to 2. `coeffs()` and `evaluate_g(x)` give the
    Halo `g` polynomial.

## Example

```python
from plonkit.polynomial import Polynomial
from plonkit.plonk_util import halo_g, halo_s, powers

p = 2**255 - 19  # a prime modulus

a = Polynomial([1, 2, 3], p)
b = Polynomial([5, 1], p)
q, r = a.polynomial_division(b)
assert a.eval(7) == (b.eval(7) * q.eval(7) + r.eval(7)) % p

us = [3, 5, 11]
x = 42
s = halo_s(us, p)
assert sum(c * w for c, w in zip(s, powers(x, len(s), p))) % p == halo_g(x, us, p)
```

## Witnesses

```python
from plonkit.target import Wire
from plonkit.witness import PartialWitness, Witness

pw = PartialWitness()
pw.set_wire(Wire(gate=0, input=1), 9)
witness = Witness.from_partial(pw, degree=4, num_wires=9)
assert witness.get_indices(0, 1) == 9
```

## What the package does not do

The package covers the data structures and field helpers only. It does not
provide the following:

- a circuit builder or gate set;
- a prover or verifier;
- elliptic-curve arithmetic, commitments or hash-to-curve;
- a hash function or a concrete PRF;
- serialization of proofs or keys.

`OldProof.halo_g` is kept as an opaque value and is never checked.