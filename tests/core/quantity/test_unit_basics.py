from dataclasses import FrozenInstanceError

import pytest

from siquant.core.dimensions import DIM_0, LENGTH, Dimension
from siquant.core.precondition import PreconditionError
from siquant.core.quantity import Quantity
from siquant.core.unit import Unit


def test_unit_construction_coerces_mapping_to_dimension():
    m = Unit("m", 1.0, {LENGTH: 1})
    assert isinstance(m.dimension, Dimension)
    assert m.dimension == {LENGTH: 1}
    assert m.name == "m"
    assert m.multiplier == 1.0


def test_unit_defaults_to_dimensionless():
    u = Unit("", 1.0)
    assert u.dimension == DIM_0
    assert u.is_dimensionless


def test_unit_is_frozen():
    m = Unit("m", 1.0, {LENGTH: 1})
    with pytest.raises(FrozenInstanceError):
        m.multiplier = 2.0  # type: ignore[misc]


def test_zero_multiplier_is_a_precondition_failure():
    with pytest.raises(PreconditionError, match="Cannot create unit: Multiplier is zero."):
        Unit("nothing", 0.0, {LENGTH: 1})


def test_zero_scaling_is_reported(failures):
    m = Unit("m", 1.0, {LENGTH: 1})
    0 * m
    assert failures.messages == ["Cannot create unit: Multiplier is zero."]


def test_coherent_and_with_name():
    km = Unit("km", 1e3, {LENGTH: 1})
    assert not km.is_coherent

    coherent = Unit.coherent(km.dimension)
    assert coherent.is_coherent
    assert coherent.name is None
    assert coherent.dimension == km.dimension

    renamed = km.with_name("kilometre")
    assert renamed.name == "kilometre"
    assert renamed == km


def test_matmul_builds_quantity():
    m = Unit("m", 1.0, {LENGTH: 1})
    q = 1.5 @ m
    assert isinstance(q, Quantity)
    assert q.value == 1.5
    assert q.unit is m

    with pytest.raises(TypeError):
        "1.5" @ m  # type: ignore[operator]
