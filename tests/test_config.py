"""Tests for import-time configuration and physical constants."""

import logging

import numpy as np
import pytest

from pyfloccus import config, constants
from pyfloccus.config import Float, as_float, parse_flag


class TestParseFlag:

    @pytest.mark.parametrize('raw', ['1', 'true', 'TRUE', 'yes', 'On', ' on '])
    def test_truthy(self, raw):
        assert parse_flag('X', raw) is True

    @pytest.mark.parametrize('raw', ['0', 'false', 'No', 'off', ''])
    def test_falsy(self, raw):
        assert parse_flag('X', raw, default=True) is False

    def test_unset_uses_default(self):
        assert parse_flag('X', None) is False
        assert parse_flag('X', None, default=True) is True

    def test_unrecognised_warns_and_uses_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger='pyfloccus.config'):
            assert parse_flag('PYFLOCCUS_DEBUG', 'maybe') is False
        assert 'PYFLOCCUS_DEBUG' in caplog.text
        assert 'maybe' in caplog.text


class TestFloatType:

    def test_float_matches_precision_switch(self):
        expected = np.float64 if config.DOUBLE_PRECISION else np.float32
        assert Float is expected

    def test_as_float_scalar(self):
        value = as_float(300)
        assert isinstance(value, Float)
        assert np.ndim(value) == 0

    def test_as_float_array(self):
        value = as_float([300.0, 290.0])
        assert isinstance(value, np.ndarray)
        assert value.dtype == Float

    def test_formula_result_dtype(self):
        from pyfloccus import vapour_pressure

        assert np.asarray(vapour_pressure.buck3(300.0, 101325.0)).dtype == Float
        assert vapour_pressure.buck3(np.array([300.0, 290.0]), 101325.0).dtype == Float


class TestConstants:

    def test_all_constants_use_float(self):
        for name in ('R', 'M_d', 'M_v', 'R_d', 'R_v', 'epsilon', 'Cp_d', 'Cp_l',
                     'kappa', 'Lv', 'T0', 'p0'):
            assert isinstance(getattr(constants, name), Float), name

    def test_derived_values(self):
        rel = 1e-12 if Float is np.float64 else 1e-6
        assert constants.epsilon == pytest.approx(0.62198019983151731, rel=rel)
        assert constants.kappa == pytest.approx(0.28571257544119150, rel=rel)
        assert constants.R_d == pytest.approx(287.05, rel=1e-4)
        assert constants.R_v == pytest.approx(461.52, rel=1e-4)
