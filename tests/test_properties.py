import math

import numpy as np
import pytest

from fixedvec import Vector, lerp, linear_combination

rng = np.random.default_rng(12345)

FLOAT_VECTORS = [Vector(rng.uniform(-10.0, 10.0, size=n)) for n in (1, 2, 3, 5, 8) for _ in range(4)]
INT_VECTORS = [Vector(rng.integers(-100, 100, size=n)) for n in (2, 3, 4) for _ in range(4)]
TRIPLES = [
    (Vector(rng.integers(-50, 50, size=4)),
     Vector(rng.integers(-50, 50, size=4)),
     Vector(rng.integers(-50, 50, size=4)))
    for _ in range(10)
]
PAIRS = [(Vector(rng.normal(size=n)), Vector(rng.normal(size=n))) for n in (2, 3, 6) for _ in range(5)]
PAIRS_3D = [(Vector(rng.normal(size=3)), Vector(rng.normal(size=3))) for _ in range(10)]


@pytest.mark.parametrize("a,b,c", TRIPLES)
def test_addition_is_associative_and_commutative(a, b, c):
    assert (a + b) + c == a + (b + c)
    assert a + b == b + a


@pytest.mark.parametrize("a", INT_VECTORS)
def test_additive_inverse(a):
    assert a + (-1 * a) == Vector.zeros(a.dim, dtype=a.dtype)
    assert a + (-a) == Vector.zeros(a.dim, dtype=a.dtype)


@pytest.mark.parametrize("v", FLOAT_VECTORS + INT_VECTORS)
def test_norm_is_non_negative(v):
    assert v.norm() >= 0.0
    assert v.norm_1() >= v.norm() - 1e-9
    assert v.norm() >= v.norm_inf() - 1e-9


@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_norm_zero_iff_zero_vector(n):
    z = Vector.zeros(n)
    assert z.norm() == 0.0
    for i in range(n):
        w = z.copy()
        w[i] = 1e-3
        assert w.norm() > 0.0


@pytest.mark.parametrize("a,b", PAIRS)
def test_triangle_inequality(a, b):
    assert (a + b).norm() <= a.norm() + b.norm() + 1e-12


@pytest.mark.parametrize("a,b", PAIRS)
def test_dot_symmetry_and_norm(a, b):
    assert a.dot(b) == b.dot(a)
    assert math.isclose(a.dot(a), a.norm() ** 2, rel_tol=1e-12)


@pytest.mark.parametrize("a,b", PAIRS_3D)
def test_cross_is_orthogonal(a, b):
    c = a.cross(b)
    assert abs(c.dot(a)) < 1e-9
    assert abs(c.dot(b)) < 1e-9


@pytest.mark.parametrize("v", FLOAT_VECTORS + INT_VECTORS)
def test_cosine_with_self_is_one(v):
    if v.norm() == 0.0:
        pytest.skip("zero vector")
    assert math.isclose(v.cosine(v), 1.0, rel_tol=1e-12)


@pytest.mark.parametrize("a,b", PAIRS)
def test_lerp_endpoints_and_midpoint(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0).isclose(b)
    assert lerp(a, b, 0.5).isclose(linear_combination([a, b], [0.5, 0.5]))


@pytest.mark.parametrize("a,b", PAIRS)
def test_linear_combination_identities(a, b):
    assert linear_combination([a], [1.0]) == a
    assert linear_combination([a, b], [1.0, 1.0]) == a + b
