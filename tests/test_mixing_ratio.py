"""Tests for mixing ratio and saturation mixing ratio formulas."""

import numpy as np
import pytest

from pyfloccus import OutOfRangeError, mixing_ratio, saturation_mixing_ratio
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
    'mixing_ratio.definition1': Case(
        mixing_ratio.definition1,
        [
            Argument('pressure', 101325.0, 100.0, 150_000.0),
            Argument('vapour_pressure', 3500.0, 0.0, 50_000.0),
        ],
        0.022253316630823517,
    ),
    'mixing_ratio.performance1': Case(
        mixing_ratio.performance1,
        [
            Argument('dewpoint', 300.0, 273.0, 353.0),
            Argument('pressure', 101325.0, 100.0, 150_000.0),
        ],
        0.022477100514593465,
    ),
    'mixing_ratio.accuracy1': Case(
        mixing_ratio.accuracy1,
        [
            Argument('dewpoint', 300.0, 232.0, 324.0),
            Argument('pressure', 101325.0, 100.0, 150_000.0),
        ],
        0.022587116896465843,
    ),
    'saturation_mixing_ratio.definition1': Case(
        saturation_mixing_ratio.definition1,
        [
            Argument('pressure', 101325.0, 100.0, 150_000.0),
            Argument('saturation_vapour_pressure', 3500.0, 0.0, 50_000.0),
        ],
        0.022253316630823517,
    ),
    'saturation_mixing_ratio.definition2': Case(
        saturation_mixing_ratio.definition2,
        [
            Argument('mixing_ratio', 0.012, 0.0000000001, 1.0),
            Argument('relative_humidity', 0.55, 0.0000000001, 2.0),
        ],
        0.021818181818181816,
    ),
}


@pytest.mark.parametrize('case', cases_params(CASES))
class TestMixingRatioFormulas:
    """Reference values, valid ranges and the three-part API of every formula."""

    def test_reference_value(self, case):
        check_reference_value(case)

    def test_finite_in_range(self, case):
        check_finite_in_range(case)

    def test_out_of_range(self, case):
        check_out_of_range(case)

    def test_parts_agree(self, case):
        check_parts(case)


class TestVapourPressureBelowPressure:
    """Vapour pressure must stay lower than total pressure."""

    def test_equal_pressures_rejected(self):
        with pytest.raises(OutOfRangeError) as excinfo:
            mixing_ratio.definition1(3000.0, 3000.0)
        assert excinfo.value.name == 'vapour_pressure'
        assert 'lower than pressure' in str(excinfo.value)

    def test_higher_vapour_pressure_rejected(self):
        with pytest.raises(OutOfRangeError) as excinfo:
            saturation_mixing_ratio.definition1(1000.0, 3000.0)
        assert excinfo.value.name == 'saturation_vapour_pressure'

    def test_range_checked_before_relation(self):
        """An out-of-range pressure is reported before the pressure relation."""
        with pytest.raises(OutOfRangeError) as excinfo:
            mixing_ratio.definition1(50.0, 3000.0)
        assert excinfo.value.name == 'pressure'

    def test_array_relation(self):
        pressure = np.array([101325.0, 2000.0])
        vapour_pressure = np.array([3000.0, 2500.0])
        with pytest.raises(OutOfRangeError) as excinfo:
            mixing_ratio.definition1(pressure, vapour_pressure)
        assert excinfo.value.value == 2500.0


class TestPressureAboveDewpointVapourPressure:
    """Formulas from dewpoint reject air pressures at or below the vapour pressure."""

    @pytest.mark.parametrize('formula', [mixing_ratio.performance1, mixing_ratio.accuracy1])
    def test_low_pressure_rejected(self, formula):
        with pytest.raises(OutOfRangeError) as excinfo:
            formula(300.0, 100.0)
        assert excinfo.value.name == 'pressure'
        assert excinfo.value.value == 100.0
        assert str(excinfo.value) == "pressure must be greater than vapour_pressure"

    @pytest.mark.parametrize('formula', [mixing_ratio.performance1, mixing_ratio.accuracy1])
    def test_pressure_just_above_accepted(self, formula):
        # vapour pressure at 300 K is about 3.55 kPa for both formulas
        result = formula(300.0, 4000.0)
        assert np.isfinite(result)
        assert result > 0.0

    def test_array_reports_first_low_pressure(self):
        dewpoint = np.array([280.0, 300.0, 300.0])
        pressure = np.array([2000.0, 3000.0, 1000.0])
        with pytest.raises(OutOfRangeError) as excinfo:
            mixing_ratio.accuracy1(dewpoint, pressure)
        assert excinfo.value.value == 3000.0

    def test_dewpoint_range_checked_first(self):
        with pytest.raises(OutOfRangeError) as excinfo:
            mixing_ratio.performance1(200.0, 100.0)
        assert excinfo.value.name == 'dewpoint'


class TestMixingRatioBehaviour:

    def test_accuracy_and_performance_agree(self):
        fast = mixing_ratio.performance1(290.0, 95000.0)
        accurate = mixing_ratio.accuracy1(290.0, 95000.0)
        assert fast == pytest.approx(accurate, rel=0.01)

    def test_saturation_definitions_consistent(self):
        """definition2 recovers definition1 from mixing ratio and relative humidity."""
        saturation = saturation_mixing_ratio.definition1(101325.0, 3500.0)
        recovered = saturation_mixing_ratio.definition2(saturation * 0.6, 0.6)
        assert recovered == pytest.approx(saturation, rel=REL_TOL)
