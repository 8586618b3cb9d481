"""
Spring force, wheel rate and pivot torques.

Forces are in lbf, spring and wheel rates in lbs/in and torques in lbf*mm.
"""

from .geometry import (
    axle_position,
    lower_mount_position,
    shock_compression,
    shock_unit_vector,
)
from .motion_ratio import motion_ratio
from .solver_settings import SolverSettings, DEFAULT_SETTINGS
from .suspension_parameters import SuspensionParameters
from .units import MM_PER_INCH


def spring_force(angle: float, params: SuspensionParameters) -> float:
    """
    Spring force along the shock axis (lbf).

    Force = spring_rate * (compression + preload), with the compression
    converted to inches. A coil spring only pushes, so extension past the
    free length gives zero force rather than tension.
    """
    compression_in = (shock_compression(angle, params) + params.preload) / MM_PER_INCH
    return float(params.spring_rate * max(0.0, compression_in))


def wheel_rate(angle: float,
               params: SuspensionParameters,
               settings: SolverSettings = DEFAULT_SETTINGS) -> float:
    """
    Effective spring rate at the wheel (lbs/in): spring_rate / MR^2.

    Returns 0 where the motion ratio is degenerate.
    """
    mr = motion_ratio(angle, params, settings)
    if mr < settings.degenerate_threshold:
        return 0.0
    return params.spring_rate / (mr * mr)


def spring_torque(angle: float, params: SuspensionParameters) -> float:
    """
    Torque of the spring force about the pivot (lbf*mm).

    The force acts along the shock through the lower mount, so the lever arm
    is |lower_mount x shock_unit|.
    """
    force = spring_force(angle, params)
    if force <= 0:
        return 0.0
    lower = lower_mount_position(angle, params.lower_mount_dist)
    unit = shock_unit_vector(angle, params)
    lever_arm = abs(lower[0] * unit[1] - lower[1] * unit[0])
    return float(lever_arm * force)


def load_torque(angle: float, params: SuspensionParameters) -> float:
    """Torque of the vertical axle load about the pivot (lbf*mm)."""
    axle = axle_position(angle, params.swingarm_length)
    return float(params.load * abs(axle[0]))


def torque_balance(angle: float, params: SuspensionParameters) -> float:
    """Spring torque minus load torque; zero at static equilibrium."""
    return spring_torque(angle, params) - load_torque(angle, params)
