"""
Unit conversion utilities for swingarm suspension modeling.

All internal calculations are performed in:
- millimeters (mm) for length
- pounds-force (lbf) for force and load
- pounds per inch (lbs/in) for spring rates

Torques are therefore reported in lbf*mm.

This module provides conversion functions to/from various units.
"""
import numpy as np
from typing import Union


MM_PER_INCH = 25.4
N_PER_LBF = 4.4482216152605
N_PER_KGF = 9.80665

# Length conversion factors to millimeters (base unit)
UNIT_TO_MM = {
    'mm': 1.0,
    'millimeter': 1.0,
    'millimeters': 1.0,
    'cm': 10.0,
    'centimeter': 10.0,
    'centimeters': 10.0,
    'm': 1000.0,
    'meter': 1000.0,
    'meters': 1000.0,
    'in': MM_PER_INCH,
    'inch': MM_PER_INCH,
    'inches': MM_PER_INCH,
}

# Conversion factors from millimeters
MM_TO_UNIT = {unit: 1.0 / factor for unit, factor in UNIT_TO_MM.items()}


# Force conversion factors to pounds-force (base unit)
# Loads are given as weights, so 'lbs' and 'kg' are read as lbf and kgf
FORCE_UNIT_TO_LBF = {
    'lbf': 1.0,
    'lb': 1.0,
    'lbs': 1.0,
    'n': 1.0 / N_PER_LBF,
    'newton': 1.0 / N_PER_LBF,
    'newtons': 1.0 / N_PER_LBF,
    'kgf': N_PER_KGF / N_PER_LBF,
    'kg': N_PER_KGF / N_PER_LBF,
}

# Conversion factors from pounds-force
LBF_TO_FORCE_UNIT = {unit: 1.0 / factor for unit, factor in FORCE_UNIT_TO_LBF.items()}


# Spring rate conversion factors to lbs/in (base unit)
SPRING_RATE_UNIT_TO_LBS_PER_IN = {
    'lbs/in': 1.0,
    'lbf/in': 1.0,
    'lb/in': 1.0,
    'n/mm': MM_PER_INCH / N_PER_LBF,
    'kg/mm': MM_PER_INCH * N_PER_KGF / N_PER_LBF,
    'kgf/mm': MM_PER_INCH * N_PER_KGF / N_PER_LBF,
}

# Conversion factors from lbs/in
LBS_PER_IN_TO_SPRING_RATE_UNIT = {
    unit: 1.0 / factor for unit, factor in SPRING_RATE_UNIT_TO_LBS_PER_IN.items()
}


def validate_unit(unit: str) -> str:
    """
    Validate and normalize length unit string.

    Args:
        unit: Unit string (e.g., 'mm', 'm', 'in')

    Returns:
        Normalized unit string

    Raises:
        ValueError: If unit is not recognized
    """
    unit_lower = unit.lower().strip()
    if unit_lower not in UNIT_TO_MM:
        valid_units = ['cm', 'in', 'm', 'mm']
        raise ValueError(f"Unknown unit '{unit}'. Valid units: {valid_units}")
    return unit_lower


def to_mm(value: Union[float, np.ndarray], from_unit: str = 'mm') -> Union[float, np.ndarray]:
    """Convert a length from the specified unit to millimeters."""
    unit = validate_unit(from_unit)
    return value * UNIT_TO_MM[unit]


def from_mm(value: Union[float, np.ndarray], to_unit: str = 'mm') -> Union[float, np.ndarray]:
    """Convert a length in millimeters to the specified unit."""
    unit = validate_unit(to_unit)
    return value * MM_TO_UNIT[unit]


def convert(value: Union[float, np.ndarray], from_unit: str, to_unit: str) -> Union[float, np.ndarray]:
    """
    Convert a length from one unit to another.

    Args:
        value: Value or array to convert
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Value in target unit
    """
    return from_mm(to_mm(value, from_unit), to_unit)


def format_length(value: float, unit: str = 'mm', precision: int = 1) -> str:
    """
    Format a length value with units for display.

    Returns:
        Formatted string (e.g., "12.3 mm")
    """
    unit = validate_unit(unit)
    return f"{value:.{precision}f} {unit}"


def validate_force_unit(unit: str) -> str:
    """
    Validate and normalize force unit string.

    Args:
        unit: Force unit string (e.g., 'lbf', 'N', 'kgf')

    Returns:
        Normalized force unit string

    Raises:
        ValueError: If unit is not recognized
    """
    unit_lower = unit.lower().strip()
    if unit_lower not in FORCE_UNIT_TO_LBF:
        valid_units = ['N', 'kgf', 'lbf']
        raise ValueError(f"Unknown force unit '{unit}'. Valid units: {valid_units}")
    return unit_lower


def to_lbf(value: Union[float, np.ndarray], from_unit: str = 'lbf') -> Union[float, np.ndarray]:
    """Convert a force from the specified unit to pounds-force."""
    unit = validate_force_unit(from_unit)
    return value * FORCE_UNIT_TO_LBF[unit]


def from_lbf(value: Union[float, np.ndarray], to_unit: str = 'lbf') -> Union[float, np.ndarray]:
    """Convert a force in pounds-force to the specified unit."""
    unit = validate_force_unit(to_unit)
    return value * LBF_TO_FORCE_UNIT[unit]


def convert_force(value: Union[float, np.ndarray], from_unit: str, to_unit: str) -> Union[float, np.ndarray]:
    """Convert a force from one unit to another."""
    return from_lbf(to_lbf(value, from_unit), to_unit)


def format_force(value: float, unit: str = 'lbf', precision: int = 1) -> str:
    """
    Format a force value with units for display.

    Returns:
        Formatted string (e.g., "123.4 lbf")
    """
    validate_force_unit(unit)
    return f"{value:.{precision}f} {unit}"


def validate_spring_rate_unit(unit: str) -> str:
    """
    Validate and normalize spring rate unit string.

    Args:
        unit: Spring rate unit string (e.g., 'lbs/in', 'N/mm', 'kg/mm')

    Returns:
        Normalized spring rate unit string

    Raises:
        ValueError: If unit is not recognized
    """
    unit_lower = unit.lower().strip()
    if unit_lower not in SPRING_RATE_UNIT_TO_LBS_PER_IN:
        valid_units = ['N/mm', 'kg/mm', 'lbs/in']
        raise ValueError(f"Unknown spring rate unit '{unit}'. Valid units: {valid_units}")
    return unit_lower


def to_lbs_per_in(value: Union[float, np.ndarray], from_unit: str = 'lbs/in') -> Union[float, np.ndarray]:
    """
    Convert a spring rate value from the specified unit to lbs/in (base unit).

    Args:
        value: Value or array to convert
        from_unit: Source unit (default: 'lbs/in')

    Returns:
        Value in lbs/in
    """
    unit = validate_spring_rate_unit(from_unit)
    return value * SPRING_RATE_UNIT_TO_LBS_PER_IN[unit]


def from_lbs_per_in(value: Union[float, np.ndarray], to_unit: str = 'lbs/in') -> Union[float, np.ndarray]:
    """
    Convert a spring rate value from lbs/in (base unit) to the specified unit.

    Args:
        value: Value or array in lbs/in
        to_unit: Target unit (default: 'lbs/in')

    Returns:
        Value in target unit
    """
    unit = validate_spring_rate_unit(to_unit)
    return value * LBS_PER_IN_TO_SPRING_RATE_UNIT[unit]


def convert_spring_rate(value: Union[float, np.ndarray], from_unit: str, to_unit: str) -> Union[float, np.ndarray]:
    """Convert a spring rate value from one unit to another."""
    return from_lbs_per_in(to_lbs_per_in(value, from_unit), to_unit)
