"""
Unit tests for spring force, wheel rate and pivot torques.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from pyswingarm.forces import spring_force, wheel_rate, spring_torque, load_torque, torque_balance
from pyswingarm.geometry import shock_compression, axle_position
from pyswingarm.motion_ratio import motion_ratio
from pyswingarm.suspension_parameters import DEFAULT_PARAMETERS
from pyswingarm.travel_limits import fully_extended_angle, fully_compressed_angle


@pytest.fixture
def limits():
    return fully_extended_angle(DEFAULT_PARAMETERS), fully_compressed_angle(DEFAULT_PARAMETERS)


class TestSpringForce:
    """Test Hooke's law with preload and no tension."""

    def test_zero_at_full_extension(self, limits):
        ext, _ = limits
        assert spring_force(ext, DEFAULT_PARAMETERS) == pytest.approx(0.0, abs=0.1)

    def test_hookes_law(self):
        angle = 0.05
        comp_mm = shock_compression(angle, DEFAULT_PARAMETERS)
        expected = 600.0 * comp_mm / 25.4
        assert spring_force(angle, DEFAULT_PARAMETERS) == pytest.approx(expected)

    def test_increases_toward_compression(self, limits):
        ext, comp = limits
        mid = (ext + comp) / 2
        f_ext = spring_force(ext, DEFAULT_PARAMETERS)
        f_mid = spring_force(mid, DEFAULT_PARAMETERS)
        f_comp = spring_force(comp, DEFAULT_PARAMETERS)
        assert f_mid > f_ext
        assert f_comp > f_mid

    def test_strictly_increasing_through_stroke(self, limits):
        ext, comp = limits
        forces = [spring_force(a, DEFAULT_PARAMETERS) for a in np.linspace(ext, comp, 20)[1:]]
        assert all(b > a for a, b in zip(forces, forces[1:]))

    def test_full_stroke_force(self, limits):
        """55 mm of stroke at 600 lbs/in."""
        _, comp = limits
        assert spring_force(comp, DEFAULT_PARAMETERS) == pytest.approx(600.0 * 55.0 / 25.4, abs=1.0)

    def test_preload_adds_force(self, limits):
        ext, _ = limits
        params = DEFAULT_PARAMETERS.replace(preload=10.0)
        assert spring_force(ext, params) == pytest.approx(600.0 * 10.0 / 25.4, abs=0.1)

    def test_no_tension_past_free_length(self):
        assert shock_compression(-0.5, DEFAULT_PARAMETERS) < 0
        assert spring_force(-0.5, DEFAULT_PARAMETERS) == 0.0


class TestWheelRate:
    """Test wheel rate = spring rate / MR^2."""

    def test_positive(self, limits):
        ext, comp = limits
        assert wheel_rate((ext + comp) / 2, DEFAULT_PARAMETERS) > 0

    def test_spring_rate_over_mr_squared(self, limits):
        ext, comp = limits
        for angle in np.linspace(ext, comp, 7):
            mr = motion_ratio(angle, DEFAULT_PARAMETERS)
            expected = DEFAULT_PARAMETERS.spring_rate / (mr * mr)
            assert wheel_rate(angle, DEFAULT_PARAMETERS) == pytest.approx(expected, rel=0.01)

    def test_softer_than_spring_with_leverage(self, limits):
        """MR > 1 means the wheel sees a softer spring."""
        ext, comp = limits
        assert wheel_rate((ext + comp) / 2, DEFAULT_PARAMETERS) < DEFAULT_PARAMETERS.spring_rate

    def test_degenerate_returns_zero(self):
        params = DEFAULT_PARAMETERS.replace(upper_mount_x=0.0, upper_mount_y=0.0)
        assert wheel_rate(0.1, params) == 0.0


class TestTorques:
    """Test pivot torques used by the sag solver."""

    def test_load_torque_uses_horizontal_arm(self):
        angle = 0.1
        axle_x = axle_position(angle, DEFAULT_PARAMETERS.swingarm_length)[0]
        assert load_torque(angle, DEFAULT_PARAMETERS) == pytest.approx(200.0 * axle_x)

    def test_spring_torque_zero_without_force(self):
        assert spring_torque(-0.5, DEFAULT_PARAMETERS) == 0.0

    def test_spring_torque_lever_arm(self, limits):
        """Lever arm never exceeds the lower mount radius."""
        ext, comp = limits
        angle = (ext + comp) / 2
        torque = spring_torque(angle, DEFAULT_PARAMETERS)
        force = spring_force(angle, DEFAULT_PARAMETERS)
        assert 0 < torque <= force * DEFAULT_PARAMETERS.lower_mount_dist

    def test_balance_changes_sign_over_stroke(self, limits):
        ext, comp = limits
        assert torque_balance(ext, DEFAULT_PARAMETERS) < 0
        assert torque_balance(comp, DEFAULT_PARAMETERS) > 0
