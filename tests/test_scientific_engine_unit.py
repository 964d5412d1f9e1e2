import math

import pytest

from desktop_calculator import ScientificEngine
from desktop_calculator import error as E


def test_divide_follows_ieee_rules() -> None:
    assert ScientificEngine.divide(6.0, 3.0) == 2.0
    assert ScientificEngine.divide(5.0, 0.0) == math.inf
    assert ScientificEngine.divide(-5.0, 0.0) == -math.inf
    assert ScientificEngine.divide(5.0, -0.0) == -math.inf
    assert math.isnan(ScientificEngine.divide(0.0, 0.0))


def test_square_root() -> None:
    assert ScientificEngine.square_root(9.0) == 3.0
    assert math.isnan(ScientificEngine.square_root(-4.0))


def test_power_edge_cases() -> None:
    assert ScientificEngine.power(2.0, 10.0) == 1024.0
    assert ScientificEngine.power(10.0, 400.0) == math.inf
    assert ScientificEngine.power(-10.0, 401.0) == -math.inf
    assert ScientificEngine.power(0.0, -1.0) == math.inf
    assert ScientificEngine.power(-0.0, -1.0) == -math.inf
    assert math.isnan(ScientificEngine.power(-8.0, 0.5))


def test_unknown_function() -> None:
    assert ScientificEngine.unknown_function("square", 16.0) == 4.0
    assert ScientificEngine.unknown_function("√", 16.0) == 4.0
    with pytest.raises(E.UnknownFunction) as excinfo:
        ScientificEngine.unknown_function("cube", 8.0)
    assert excinfo.value.name == "cube"
    assert excinfo.value.code == "3203"
