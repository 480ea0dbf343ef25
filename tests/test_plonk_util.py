import random

import pytest

from plonkit.plonk_util import (
    eval_l_1,
    eval_poly,
    eval_zero_poly,
    halo_g,
    halo_n,
    halo_s,
    pad_to_8n,
    powers,
    reduce_with_powers,
    scale_polynomials,
)
from plonkit.polynomial import Polynomial

P = 2**61 - 1
SMALL = 97


def _root_of_unity(order, modulus):
    cofactor = (modulus - 1) // order
    for g in range(2, modulus):
        w = pow(g, cofactor, modulus)
        if all(pow(w, order // q, modulus) != 1 for q in (2,)):
            return w
    raise AssertionError("no root found")


def test_s_vector_g_function():
    rng = random.Random(1234)
    us = [rng.randrange(1, P) for _ in range(10)]
    x = rng.randrange(P)
    s = halo_s(us, P)
    xs = powers(x, 1 << 10, P)
    assert sum(a * b for a, b in zip(s, xs)) % P == halo_g(x, us, P)


def test_halo_s_length_and_empty():
    assert halo_s([], P) == [1]
    assert len(halo_s([3, 5, 7], P)) == 8


def test_halo_g_empty_is_one():
    assert halo_g(12345, [], P) == 1


def test_halo_s_rejects_zero_challenge():
    with pytest.raises(ZeroDivisionError):
        halo_s([0, 2], P)


def test_halo_n_odd_length_raises():
    with pytest.raises(ValueError):
        halo_n([True, False, True], 5, P)


def test_halo_n_sign_flip_negates():
    rng = random.Random(7)
    bits = [rng.random() < 0.5 for _ in range(128)]
    flipped = [(not b) if i % 2 == 0 else b for i, b in enumerate(bits)]
    zeta = rng.randrange(P)
    assert (halo_n(bits, zeta, P) + halo_n(flipped, zeta, P)) % P == 0


def test_halo_n_single_pair():
    assert halo_n([False, False], 5, P) == P - 1
    assert halo_n([True, True], 5, P) == 5


def test_eval_zero_poly_and_l_1_on_subgroup():
    w = _root_of_unity(8, SMALL)
    assert pow(w, 8, SMALL) == 1 and pow(w, 4, SMALL) != 1
    assert eval_l_1(8, 1, SMALL) == 1
    for k in range(1, 8):
        point = pow(w, k, SMALL)
        assert eval_zero_poly(8, point, SMALL) == 0
        assert eval_l_1(8, point, SMALL) == 0


def test_eval_l_1_off_subgroup_relation():
    x = 3
    l_1 = eval_l_1(8, x, SMALL)
    z = eval_zero_poly(8, x, SMALL)
    assert z != 0
    assert l_1 * 8 * (x - 1) % SMALL == z


def test_powers_values():
    assert powers(3, 4, SMALL) == [1, 3, 9, 27]
    assert powers(3, 0, SMALL) == []


def test_eval_poly_matches_polynomial_eval():
    rng = random.Random(3)
    coeffs = [rng.randrange(P) for _ in range(20)]
    x = rng.randrange(P)
    assert eval_poly(coeffs, x, P) == Polynomial(coeffs, P).eval(x)


def test_reduce_with_powers_matches_eval_poly():
    rng = random.Random(4)
    terms = [rng.randrange(P) for _ in range(15)]
    alpha = rng.randrange(P)
    assert reduce_with_powers(terms, alpha, P) == eval_poly(terms, alpha, P)
    assert reduce_with_powers([], alpha, P) == 0


def test_pad_to_8n():
    padded = pad_to_8n([1, 2, 3])
    assert len(padded) == 24
    assert padded[:3] == [1, 2, 3]
    assert not any(padded[3:])
    assert pad_to_8n([]) == []


def test_scale_polynomials_evaluation():
    rng = random.Random(5)
    polys = [Polynomial([rng.randrange(P) for _ in range(6)], P) for _ in range(4)]
    alpha = rng.randrange(P)
    scaled = scale_polynomials(polys, alpha, 6)
    x = rng.randrange(P)
    expected = reduce_with_powers([p.eval(x) for p in polys], alpha, P)
    assert scaled.eval(x) == expected
    assert len(scaled) == 6


def test_scale_polynomials_empty_raises():
    with pytest.raises(ValueError):
        scale_polynomials([], 2, 4)