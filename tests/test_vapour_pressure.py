"""
Tests for vapour pressure formulas.

Reference values are float64 results at typical near-surface conditions.
"""

import warnings

import numpy as np
import pytest

from pyfloccus import Float, OutOfRangeError, vapour_pressure
from tests.formula_checks import (
    Argument,
    Case,
    cases_params,
    check_finite_in_range,
    check_out_of_range,
    check_parts,
    check_reference_value,
)

PRESSURE = Argument('pressure', 101325.0, 100.0, 150_000.0)

CASES = {
    'definition1': Case(
        vapour_pressure.definition1,
        [Argument('specific_humidity', 0.022, 0.00001, 2.0), PRESSURE],
        3536.6680935251343,
    ),
    'definition2': Case(
        vapour_pressure.definition2,
        [
            Argument('saturation_vapour_pressure', 3500.0, 0.0, 50_000.0),
            Argument('relative_humidity', 0.5, 0.0, 2.0),
        ],
        1750.0,
    ),
    'buck1': Case(
        vapour_pressure.buck1,
        [Argument('dewpoint', 300.0, 232.0, 324.0), PRESSURE],
        3550.6603579471303,
    ),
    'buck2': Case(
        vapour_pressure.buck2,
        [Argument('dewpoint', 250.0, 193.0, 274.0), PRESSURE],
        76.387817903727225,
    ),
    'buck3': Case(
        vapour_pressure.buck3,
        [Argument('dewpoint', 300.0, 253.0, 324.0), PRESSURE],
        3548.5041048035896,
    ),
    'buck3_simplified': Case(
        vapour_pressure.buck3_simplified,
        [Argument('dewpoint', 300.0, 253.0, 324.0)],
        3533.6421536199978,
    ),
    'buck4': Case(
        vapour_pressure.buck4,
        [Argument('dewpoint', 250.0, 223.0, 274.0), PRESSURE],
        76.386854718367118,
    ),
    'buck4_simplified': Case(
        vapour_pressure.buck4_simplified,
        [Argument('dewpoint', 250.0, 223.0, 274.0)],
        76.041975085195361,
    ),
    'tetens1': Case(
        vapour_pressure.tetens1,
        [Argument('dewpoint', 300.0, 273.0, 353.0)],
        3533.9691371608919,
    ),
    'wexler1': Case(
        vapour_pressure.wexler1,
        [Argument('dewpoint', 300.0, 273.0, 374.0)],
        3535.4235919263083,
    ),
    'wexler2': Case(
        vapour_pressure.wexler2,
        [Argument('dewpoint', 250.0, 173.0, 274.0)],
        76.043511367804371,
    ),
}


@pytest.mark.parametrize('case', cases_params(CASES))
class TestVapourPressureFormulas:
    """Reference values, valid ranges and the three-part API of every formula."""

    def test_reference_value(self, case):
        check_reference_value(case)

    def test_finite_in_range(self, case):
        check_finite_in_range(case)

    def test_out_of_range(self, case):
        check_out_of_range(case)

    def test_parts_agree(self, case):
        check_parts(case)


class TestVapourPressureBehaviour:
    """Physical sanity of the empirical formulas."""

    def test_buck_pressure_enhancement(self):
        """Pressure enhancement factor raises vapour pressure above the simplified value."""
        assert vapour_pressure.buck3(300.0, 101325.0) > vapour_pressure.buck3_simplified(300.0)
        assert vapour_pressure.buck4(250.0, 101325.0) > vapour_pressure.buck4_simplified(250.0)

    def test_monotonic_in_dewpoint(self):
        dewpoint = np.linspace(274.0, 320.0, 20)
        result = vapour_pressure.tetens1(dewpoint)
        assert np.all(np.diff(result) > 0)

    def test_formulas_agree_over_water(self):
        """Different formulas for water agree to within 1%."""
        values = [
            vapour_pressure.buck1(300.0, 101325.0),
            vapour_pressure.buck3(300.0, 101325.0),
            vapour_pressure.tetens1(300.0),
            vapour_pressure.wexler1(300.0),
        ]
        assert max(values) / min(values) < 1.01

    def test_array_input(self):
        dewpoint = np.array([[280.0, 290.0], [300.0, 310.0]])
        result = vapour_pressure.buck3(dewpoint, 101325.0)
        assert result.shape == (2, 2)
        assert result[1, 0] == pytest.approx(3548.5041048035896, rel=1e-4)

    def test_array_reports_first_offending_element(self):
        dewpoint = np.array([300.0, 400.0, 500.0])
        with pytest.raises(OutOfRangeError) as excinfo:
            vapour_pressure.buck3(dewpoint, 101325.0)
        assert excinfo.value.name == 'dewpoint'
        assert excinfo.value.value == 400.0

    def test_nan_is_out_of_range(self):
        with pytest.raises(OutOfRangeError) as excinfo:
            vapour_pressure.buck1(300.0, float('nan'))
        assert excinfo.value.name == 'pressure'

    def test_unchecked_skips_validation(self):
        """Unchecked form computes even for a dewpoint far out of range."""
        result = vapour_pressure.tetens1_unchecked(200.0)
        assert np.isfinite(result)
        with pytest.raises(OutOfRangeError):
            vapour_pressure.tetens1(200.0)

    def test_first_argument_reported_first(self):
        with pytest.raises(OutOfRangeError) as excinfo:
            vapour_pressure.buck1(0.0, 0.0)
        assert excinfo.value.name == 'dewpoint'


class TestOffendingValueReported:
    """Errors carry the value the caller passed, before any narrowing to Float."""

    def test_value_beyond_single_precision(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            with pytest.raises(OutOfRangeError) as excinfo:
                vapour_pressure.buck1(1e40, 101325.0)
        assert excinfo.value.name == 'dewpoint'
        assert excinfo.value.value == 1e40
        assert '1e+40' in str(excinfo.value)

    def test_array_value_beyond_single_precision(self):
        dewpoint = np.array([300.0, -1e39, 1e40])
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            with pytest.raises(OutOfRangeError) as excinfo:
                vapour_pressure.tetens1(dewpoint)
        assert excinfo.value.value == -1e39

    def test_value_not_rounded(self):
        """A value just outside a bound is reported exactly."""
        with pytest.raises(OutOfRangeError) as excinfo:
            vapour_pressure.buck3_simplified(324.000001)
        assert excinfo.value.value == 324.000001

    def test_valid_result_still_in_configured_precision(self):
        assert np.asarray(vapour_pressure.buck1(300.0, 101325.0)).dtype == Float
