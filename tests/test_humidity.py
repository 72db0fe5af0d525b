"""Tests for specific humidity and relative humidity formulas."""

import numpy as np
import pytest

from pyfloccus import OutOfRangeError, relative_humidity, specific_humidity, vapour_pressure
from tests.formula_checks import (
    REL_TOL,
    Argument,
    Case,
    cases_params,
    check_finite_in_range,
    check_out_of_range,
    check_parts,
    check_reference_value,
)

CASES = {
    'specific_humidity.definition1': Case(
        specific_humidity.definition1,
        [
            Argument('vapour_pressure', 3000.0, 0.0, 50_000.0),
            Argument('pressure', 101325.0, 100.0, 150_000.0),
        ],
        0.018623845512674677,
    ),
    'relative_humidity.definition1': Case(
        relative_humidity.definition1,
        [
            Argument('mixing_ratio', 0.012, 0.00001, 10.0),
            Argument('saturation_mixing_ratio', 0.022, 0.00001, 10.0),
        ],
        0.54545454545454553,
    ),
    'relative_humidity.definition2': Case(
        relative_humidity.definition2,
        [
            Argument('vapour_pressure', 1706.0, 0.0, 50_000.0),
            Argument('saturation_vapour_pressure', 2339.0, 0.1, 50_000.0),
        ],
        0.72937152629328772,
    ),
    'relative_humidity.tetens1': Case(
        relative_humidity.tetens1,
        [
            Argument('temperature', 300.0, 273.0, 353.0),
            Argument('dewpoint', 290.0, 273.0, 353.0),
        ],
        0.54310698976605309,
    ),
    'relative_humidity.buck3': Case(
        relative_humidity.buck3,
        [
            Argument('temperature', 300.0, 253.0, 324.0),
            Argument('dewpoint', 290.0, 253.0, 324.0),
            Argument('pressure', 101325.0, 100.0, 150_000.0),
        ],
        0.54292245621558122,
    ),
    'relative_humidity.accuracy1': Case(
        relative_humidity.accuracy1,
        [
            Argument('temperature', 300.0, 232.0, 314.0),
            Argument('dewpoint', 290.0, 232.0, 314.0),
            Argument('pressure', 101325.0, 10_000.0, 150_000.0),
        ],
        0.53387479535528581,
    ),
}


@pytest.mark.parametrize('case', cases_params(CASES))
class TestHumidityFormulas:
    """Reference values, valid ranges and the three-part API of every formula."""

    def test_reference_value(self, case):
        check_reference_value(case)

    def test_finite_in_range(self, case):
        check_finite_in_range(case)

    def test_out_of_range(self, case):
        check_out_of_range(case)

    def test_parts_agree(self, case):
        check_parts(case)


class TestRelativeHumidityBehaviour:

    def test_saturated_air(self):
        """Dewpoint equal to temperature gives exactly saturated air."""
        assert relative_humidity.tetens1(295.0, 295.0) == pytest.approx(1.0, rel=REL_TOL)
        assert relative_humidity.buck3(280.0, 280.0, 90000.0) == pytest.approx(1.0, rel=REL_TOL)

    def test_decreases_with_dewpoint_depression(self):
        dewpoint = np.linspace(300.0, 280.0, 10)
        result = relative_humidity.buck3(300.0, dewpoint, 101325.0)
        assert np.all(np.diff(result) < 0)

    def test_supersaturation_allowed(self):
        assert relative_humidity.definition2(2500.0, 2000.0) > 1.0

    def test_buck3_matches_definition2_of_buck3(self):
        vp = vapour_pressure.buck3(290.0, 101325.0)
        svp = vapour_pressure.buck3(300.0, 101325.0)
        assert relative_humidity.definition2(vp, svp) == pytest.approx(
            relative_humidity.buck3(300.0, 290.0, 101325.0), rel=REL_TOL
        )


class TestSpecificHumidityBehaviour:

    def test_lower_than_mixing_ratio(self):
        """Specific humidity is always below the mixing ratio of the same air."""
        from pyfloccus import mixing_ratio

        q = specific_humidity.definition1(3000.0, 101325.0)
        r = mixing_ratio.definition1(101325.0, 3000.0)
        assert q < r
        assert q == pytest.approx(r / (1.0 + r), rel=1e-4)

    def test_dry_air(self):
        assert specific_humidity.definition1(0.0, 101325.0) == 0.0

    def test_vapour_pressure_must_be_lower_than_pressure(self):
        with pytest.raises(OutOfRangeError) as excinfo:
            specific_humidity.definition1(50_000.0, 100.0)
        assert excinfo.value.name == 'vapour_pressure'
        assert 'lower than pressure' in str(excinfo.value)

    def test_bounded_by_one(self):
        """Vapour pressure close to total pressure gives specific humidity near, not above, one."""
        q = specific_humidity.definition1(49_000.0, 50_000.0)
        assert 0.0 < q < 1.0
