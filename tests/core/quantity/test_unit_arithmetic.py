import pytest

from siquant.core.dimensions import DIM_0, LENGTH, MASS, TIME, dim_pow
from siquant.core.unit import Unit

m = Unit("m", 1.0, {LENGTH: 1})
mm = Unit("mm", 1e-3, {LENGTH: 1})
s = Unit("s", 1.0, {TIME: 1})
kg = Unit("kg", 1.0, {MASS: 1})
N = Unit("N", 1.0, {MASS: 1, LENGTH: 1, TIME: -2})


# -------------------------------
# Unit × Unit, Unit / Unit
# -------------------------------

def test_product_of_units():
    ms = m * s
    assert ms.name is None
    assert ms.multiplier == 1.0
    assert ms.dimension == {LENGTH: 1, TIME: 1}


def test_quotient_of_units():
    v = mm / s
    assert v.name is None
    assert v.multiplier == pytest.approx(1e-3)
    assert v.dimension == {LENGTH: 1, TIME: -1}


def test_newton_from_base_units():
    derived = kg * m / s ** 2
    assert derived == N
    assert derived.name is None


def test_product_then_quotient_restores_dimension():
    assert (N * s / s).dimension == N.dimension
    assert (m * kg / kg).dimension == m.dimension


def test_quotient_of_same_dimension_is_dimensionless():
    ratio = m / mm
    assert ratio.dimension == DIM_0
    assert ratio.multiplier == pytest.approx(1000.0)


# -------------------------------
# Scaling by plain numbers
# -------------------------------

def test_scale_unit_left_and_right():
    kN_left = 1e3 * N
    kN_right = N * 1e3
    assert kN_left == kN_right
    assert kN_left.multiplier == 1000.0
    assert kN_left.dimension == N.dimension
    assert kN_left.name is None


def test_divide_unit_by_number():
    half = m / 2
    assert half.multiplier == 0.5
    assert half.dimension == m.dimension


def test_number_divided_by_unit_is_reciprocal():
    per_second = 1 / s
    assert per_second.multiplier == 1.0
    assert per_second.dimension == {TIME: -1}

    per_mm = 2 / mm
    assert per_mm.multiplier == pytest.approx(2000.0)
    assert per_mm.dimension == {LENGTH: -1}


# -------------------------------
# Integer powers
# -------------------------------

@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_positive_power(n):
    up = mm ** n
    assert up.dimension == dim_pow(m.dimension, n)
    assert up.multiplier == pytest.approx(1e-3 ** n)
    assert up.name is None


@pytest.mark.regression(reason="Zero power must be dimensionless and coherent")
def test_zero_power_is_dimensionless_coherent():
    for unit in (m, mm, N):
        u0 = unit ** 0
        assert u0.dimension == DIM_0
        assert u0.multiplier == 1.0
        assert u0.is_coherent


@pytest.mark.regression(reason="Negative exponents are the reciprocal of the positive power")
@pytest.mark.parametrize("n", [-1, -2, -3])
def test_negative_power(n):
    up = mm ** n
    assert up.dimension == dim_pow(m.dimension, n)
    assert up.multiplier == pytest.approx(1e-3 ** n)
    assert up == 1 / (mm ** -n)


def test_unsupported_operands_raise_type_error():
    with pytest.raises(TypeError):
        m ** 0.5
    with pytest.raises(TypeError):
        m * "m"  # type: ignore[operator]
    with pytest.raises(TypeError):
        "m" / m  # type: ignore[operator]
