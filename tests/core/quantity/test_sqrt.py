import re

import pytest

from siquant.core.dimensions import LENGTH, TIME
from siquant.core.precondition import PreconditionError
from siquant.core.quantity import Quantity, sqrt
from siquant.units.presets import m, m2, mm, mm2, percentage, s

NO_SQUARE = "Cannot compute sqrt: Unit is no square."

meters = 1.5 @ m


def test_sqrt_of_area():
    assert sqrt(4 @ m2) == 2 @ m
    assert sqrt(25 @ m2) == 5 @ m
    assert sqrt(meters * meters) == meters


def test_sqrt_halves_every_exponent():
    root = sqrt(Quantity(9, m2 / s ** 4))
    assert root.dimension == {LENGTH: 1, TIME: -2}
    assert root.value == 3.0


def test_sqrt_of_dimensionless():
    assert sqrt(Quantity(9)) == Quantity(3)


@pytest.mark.regression(reason="A scaled unit takes the root of its multiplier: sqrt(4 mm2) is 2 mm")
def test_sqrt_of_scaled_unit():
    root = sqrt(4 @ mm2)
    assert root == 2 @ mm
    assert root.value == 2.0
    assert root.unit.multiplier == pytest.approx(1e-3)
    assert root.coherent_value == pytest.approx(2e-3)


def test_sqrt_of_scaled_dimensionless_unit():
    root = sqrt(4 @ percentage)
    assert root.value == 2.0
    assert root.unit.multiplier == pytest.approx(0.1)
    assert root.coherent_value == pytest.approx(0.2)


def test_sqrt_keeps_coherent_multiplier():
    assert sqrt(9 @ m2).unit.multiplier == 1.0


def test_sqrt_of_negative_value_is_none():
    assert sqrt(-4 @ m2) is None
    assert sqrt(-(meters ** 2)) is None


def test_sqrt_of_squared_negative():
    assert sqrt((-meters) ** 2) == meters


@pytest.mark.parametrize("q", [3 @ m, -3 @ m, 250 @ mm, 0 @ s])
def test_sqrt_inverts_square_up_to_sign(q):
    assert sqrt(q ** 2) == abs(q)


def test_sqrt_of_odd_dimension_fails():
    with pytest.raises(PreconditionError, match=re.escape(NO_SQUARE)):
        sqrt(meters)


@pytest.mark.regression(reason="Dimension parity is checked before the sign of the value")
def test_parity_checked_before_sign():
    with pytest.raises(PreconditionError, match=re.escape(NO_SQUARE)):
        sqrt(-1 @ m)


def test_parity_failure_reported_then_sign_checked(failures):
    assert sqrt(-1 @ m) is None
    assert failures.messages == [NO_SQUARE]
