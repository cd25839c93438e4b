import pytest

import ptgeom
from ptgeom.models import Axis, Intercept, TableParams


def test_table_params_default_to_one_degree_steps() -> None:
    assert TableParams().resolution == 360


def test_axis_members_name_index_pairs() -> None:
    assert [a.value for a in Axis] == [(0, 1), (0, 2), (1, 2)]


def test_intercept_is_frozen() -> None:
    value = Intercept(slope=1.0, y_intercept=0.0, x_intercept=0.0)
    with pytest.raises(AttributeError):
        value.slope = 2.0  # type: ignore[misc]


def test_version_is_exposed() -> None:
    assert isinstance(ptgeom.__version__, str)
    assert ptgeom.__version__
