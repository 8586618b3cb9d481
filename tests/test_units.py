"""
Test unit conversion utilities.

Tests length, force and spring rate conversions, validation and formatting.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from pyswingarm.units import (
    MM_PER_INCH,
    to_mm,
    from_mm,
    convert,
    format_length,
    to_lbf,
    from_lbf,
    convert_force,
    format_force,
    to_lbs_per_in,
    from_lbs_per_in,
    convert_spring_rate,
)


def test_length_conversions():
    """Test length conversions to and from millimeters."""
    print("\n--- Testing length conversions ---")

    assert to_mm(1.0, 'in') == pytest.approx(25.4)
    assert to_mm(0.55, 'm') == pytest.approx(550.0)
    assert to_mm(28.0, 'cm') == pytest.approx(280.0)
    assert from_mm(25.4, 'inches') == pytest.approx(1.0)
    assert convert(1.0, 'm', 'cm') == pytest.approx(100.0)
    assert to_mm(5.0, ' MM ') == 5.0

    positions = np.array([160.0, 240.0])
    assert np.allclose(from_mm(positions, 'in'), positions / MM_PER_INCH)
    print("✓ Length conversions correct")


def test_force_conversions():
    """Test force conversions to and from pounds-force."""
    print("\n--- Testing force conversions ---")

    assert to_lbf(4.4482216152605, 'N') == pytest.approx(1.0)
    assert to_lbf(1.0, 'kgf') == pytest.approx(2.20462, abs=1e-5)
    assert from_lbf(200.0, 'N') == pytest.approx(889.64, abs=0.01)
    assert convert_force(100.0, 'kg', 'lbs') == pytest.approx(220.462, abs=1e-3)
    print("✓ Force conversions correct")


def test_spring_rate_conversions():
    """Test spring rate conversions to and from lbs/in."""
    print("\n--- Testing spring rate conversions ---")

    # 600 lbs/in is a common rear shock spring: about 105 N/mm
    assert from_lbs_per_in(600.0, 'N/mm') == pytest.approx(105.076, abs=1e-3)
    assert to_lbs_per_in(1.0, 'kg/mm') == pytest.approx(55.997, abs=1e-3)
    assert convert_spring_rate(600.0, 'lbs/in', 'lbs/in') == 600.0
    assert convert_spring_rate(convert_spring_rate(600.0, 'lbs/in', 'kgf/mm'),
                               'kgf/mm', 'lbs/in') == pytest.approx(600.0)
    print("✓ Spring rate conversions correct")


def test_unit_validation():
    """Test that unknown units raise ValueError."""
    print("\n--- Testing unit validation ---")

    with pytest.raises(ValueError, match="Unknown unit"):
        to_mm(1.0, 'furlong')
    with pytest.raises(ValueError, match="Unknown force unit"):
        to_lbf(1.0, 'dyn')
    with pytest.raises(ValueError, match="Unknown spring rate unit"):
        to_lbs_per_in(1.0, 'N/m')
    print("✓ Unit validation correct")


def test_formatting():
    assert format_length(43.21) == "43.2 mm"
    assert format_length(1.23456, 'in', precision=3) == "1.235 in"
    assert format_force(1299.2126) == "1299.2 lbf"
    with pytest.raises(ValueError):
        format_force(1.0, 'stone')
