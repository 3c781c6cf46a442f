"""Tests for the Drake equation projection."""
import math

import pytest

from drake_simulator.models.drake import (
    ParameterSet,
    default_descriptors,
    default_parameter_set,
    drake_equation,
    format_result,
    project,
)


class TestDrakeEquation:
    def test_matches_left_to_right_product(self):
        values = (2.5, 0.3, 1.7, 0.9, 0.2, 0.4, 12345.0)
        a, b, c, d, e, f, g = values
        assert drake_equation(*values) == a * b * c * d * e * f * g

    def test_default_parameters(self):
        result = project(default_parameter_set())
        assert result == pytest.approx(0.005)
        assert format_result(result) == "0.01"

    @pytest.mark.parametrize("position", range(7))
    def test_any_zero_input_gives_zero(self, position):
        values = [3.0] * 7
        values[position] = 0.0
        result = drake_equation(*values)
        assert result == 0.0
        assert format_result(result) == "0.00"

    def test_negative_input_propagates_sign(self):
        result = drake_equation(-1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 100.0)
        assert result == -50.0
        assert format_result(result) == "-50.00"

    def test_zero_with_negative_input_keeps_sign(self):
        result = drake_equation(-1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0)
        assert result == 0.0
        assert format_result(result) == "-0.00"

    def test_overflow_is_not_guarded(self):
        result = drake_equation(1e300, 1e300, 1.0, 1.0, 1.0, 1.0, 1.0)
        assert math.isinf(result)
        assert format_result(result) == "inf"

    def test_nan_formats_as_python_does(self):
        assert format_result(drake_equation(float("nan"), 1, 1, 1, 1, 1, 1)) == "nan"

    def test_format_rounds_to_two_decimals(self):
        assert format_result(1234.5678) == "1234.57"
        assert format_result(5.0) == "5.00"

    def test_project_is_deterministic(self):
        params = ParameterSet(7.0, 1.0, 0.4, 0.13, 1.0, 0.2, 1e9)
        assert project(params) == project(params)


class TestParameterTable:
    def test_default_values(self):
        params = default_parameter_set()
        assert params.as_tuple() == (1.0, 0.5, 0.1, 0.1, 0.01, 0.01, 10000.0)
        assert params.rate == 1.0
        assert params.lifetime == 10000.0

    def test_descriptor_bounds(self):
        table = [(d.name, d.value, d.min, d.max) for d in default_descriptors()]
        assert table == [
            ("R*", 1.0, 0.1, 10.0),
            ("f_p", 0.5, 0.0, 1.0),
            ("n_e", 0.1, 0.0, 1.0),
            ("f_l", 0.1, 0.0, 1.0),
            ("f_i", 0.01, 0.0, 1.0),
            ("f_c", 0.01, 0.0, 1.0),
            ("L", 10000.0, 100.0, 1_000_000.0),
        ]

    def test_labels(self):
        labels = [d.label for d in default_descriptors()]
        assert labels[0] == "R*: 1.00"
        assert labels[4] == "f_i: 0.01"
        assert labels[6] == "L: 10000.00"

    def test_out_of_bounds_values_are_not_rejected(self):
        params = ParameterSet(50.0, 2.0, 1.0, 1.0, 1.0, 1.0, 100.0)
        assert project(params) == pytest.approx(10000.0)
