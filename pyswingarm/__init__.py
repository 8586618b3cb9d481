"""
pyswingarm - Kinematics and static force balance of a linkless swingarm suspension.

A rigid swingarm rotates about a fixed pivot and is connected to a fixed
frame mount by a coilover shock. Every quantity is a pure function of the
swingarm angle and an immutable SuspensionParameters record.

All internal calculations use:
- millimeters (mm) for length
- radians for the swingarm angle
- pounds-force (lbf) for loads and spring force
- lbs/in for spring and wheel rates

Basic usage:
    >>> from pyswingarm import DEFAULT_PARAMETERS, compute_sag, motion_ratio
    >>> params = DEFAULT_PARAMETERS.replace(spring_rate=800)
    >>> sag = compute_sag(params)
    >>> print(f"Sag: {sag.sag_mm:.1f} mm, MR: {motion_ratio(sag.angle, params):.3f}")
"""

# Version information
__version__ = "0.1.0"
__author__ = "pyswingarm contributors"

# Parameters and settings
from .suspension_parameters import (
    SuspensionParameters,
    DEFAULT_PARAMETERS,
    PARAMETER_RANGES,
    PARAMETER_NAMES,
)
from .solver_settings import SolverSettings, DEFAULT_SETTINGS, SAG_METHODS

# Geometry
from .geometry import (
    axle_position,
    lower_mount_position,
    upper_mount_position,
    shock_length,
    shock_compression,
    shock_unit_vector,
)

# Travel limits
from .travel_limits import (
    find_angle_for_shock_length,
    fully_extended_angle,
    fully_compressed_angle,
    travel_range,
    clamp_to_travel,
)

# Motion ratio
from .motion_ratio import motion_ratio, find_perpendicular_angle

# Forces
from .forces import (
    spring_force,
    wheel_rate,
    spring_torque,
    load_torque,
    torque_balance,
)

# Solvers
from .sag_solver import SagResult, compute_sag
from .suspension_state import (
    SuspensionState,
    TravelCurve,
    evaluate_state,
    compute_travel_curve,
    sag_sweep,
)

# Unit conversion utilities
from .units import (
    MM_PER_INCH,
    UNIT_TO_MM,
    MM_TO_UNIT,
    validate_unit,
    to_mm,
    from_mm,
    convert,
    format_length,

    FORCE_UNIT_TO_LBF,
    LBF_TO_FORCE_UNIT,
    validate_force_unit,
    to_lbf,
    from_lbf,
    convert_force,
    format_force,

    SPRING_RATE_UNIT_TO_LBS_PER_IN,
    LBS_PER_IN_TO_SPRING_RATE_UNIT,
    validate_spring_rate_unit,
    to_lbs_per_in,
    from_lbs_per_in,
    convert_spring_rate,
)

# Define public API
__all__ = [
    # Version
    '__version__',
    '__author__',

    # Parameters and settings
    'SuspensionParameters',
    'DEFAULT_PARAMETERS',
    'PARAMETER_RANGES',
    'PARAMETER_NAMES',
    'SolverSettings',
    'DEFAULT_SETTINGS',
    'SAG_METHODS',

    # Geometry
    'axle_position',
    'lower_mount_position',
    'upper_mount_position',
    'shock_length',
    'shock_compression',
    'shock_unit_vector',

    # Travel limits
    'find_angle_for_shock_length',
    'fully_extended_angle',
    'fully_compressed_angle',
    'travel_range',
    'clamp_to_travel',

    # Motion ratio
    'motion_ratio',
    'find_perpendicular_angle',

    # Forces
    'spring_force',
    'wheel_rate',
    'spring_torque',
    'load_torque',
    'torque_balance',

    # Solvers
    'SagResult',
    'compute_sag',
    'SuspensionState',
    'TravelCurve',
    'evaluate_state',
    'compute_travel_curve',
    'sag_sweep',

    # Unit conversion - Length
    'MM_PER_INCH',
    'UNIT_TO_MM',
    'MM_TO_UNIT',
    'validate_unit',
    'to_mm',
    'from_mm',
    'convert',
    'format_length',

    # Unit conversion - Force
    'FORCE_UNIT_TO_LBF',
    'LBF_TO_FORCE_UNIT',
    'validate_force_unit',
    'to_lbf',
    'from_lbf',
    'convert_force',
    'format_force',

    # Unit conversion - Spring rate
    'SPRING_RATE_UNIT_TO_LBS_PER_IN',
    'LBS_PER_IN_TO_SPRING_RATE_UNIT',
    'validate_spring_rate_unit',
    'to_lbs_per_in',
    'from_lbs_per_in',
    'convert_spring_rate',
]
