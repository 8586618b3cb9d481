"""
Suspension state snapshots and travel curves.

Bundles the derived quantities at one swingarm angle (positions, shock
compression, motion ratio, spring force, wheel rate) and samples them across
the whole travel range for plotting or tabulation.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Sequence

from .forces import spring_force, wheel_rate
from .geometry import axle_position, lower_mount_position, shock_length, shock_compression
from .motion_ratio import motion_ratio
from .sag_solver import compute_sag
from .solver_settings import SolverSettings, DEFAULT_SETTINGS
from .suspension_parameters import SuspensionParameters, PARAMETER_NAMES
from .travel_limits import fully_extended_angle, fully_compressed_angle


@dataclass(frozen=True, eq=False)
class SuspensionState:
    """Everything derived from the swingarm angle at one instant."""
    angle: float
    axle: np.ndarray
    lower_mount: np.ndarray
    shock_length: float
    shock_compression: float
    motion_ratio: float
    spring_force: float
    wheel_rate: float
    wheel_travel: float

    def __repr__(self) -> str:
        return (f"SuspensionState(angle={self.angle:.4f} rad, "
                f"compression={self.shock_compression:.1f} mm, "
                f"MR={self.motion_ratio:.3f}, "
                f"force={self.spring_force:.1f} lbf, "
                f"wheel_rate={self.wheel_rate:.1f} lbs/in)")


@dataclass(frozen=True, eq=False)
class TravelCurve:
    """
    Derived quantities sampled from full extension to full compression.

    All attributes are 1-D arrays of the same length, ordered from the
    extended end to the compressed end.
    """
    angles: np.ndarray
    wheel_travel: np.ndarray
    shock_compression: np.ndarray
    motion_ratio: np.ndarray
    spring_force: np.ndarray
    wheel_rate: np.ndarray

    def __len__(self) -> int:
        return len(self.angles)


def evaluate_state(angle: float,
                   params: SuspensionParameters,
                   settings: SolverSettings = DEFAULT_SETTINGS) -> SuspensionState:
    """
    Evaluate every derived quantity at a swingarm angle.

    wheel_travel is measured from the fully extended axle height (mm, +Y up).
    """
    axle = axle_position(angle, params.swingarm_length)
    ext_axle = axle_position(fully_extended_angle(params, settings), params.swingarm_length)
    return SuspensionState(
        angle=float(angle),
        axle=axle,
        lower_mount=lower_mount_position(angle, params.lower_mount_dist),
        shock_length=float(shock_length(angle, params)),
        shock_compression=float(shock_compression(angle, params)),
        motion_ratio=motion_ratio(angle, params, settings),
        spring_force=spring_force(angle, params),
        wheel_rate=wheel_rate(angle, params, settings),
        wheel_travel=float(axle[1] - ext_axle[1]),
    )


def compute_travel_curve(params: SuspensionParameters,
                         num_points: int = 101,
                         settings: SolverSettings = DEFAULT_SETTINGS) -> TravelCurve:
    """
    Sample the suspension from full extension to full compression.

    Args:
        params: Suspension parameters
        num_points: Number of evenly spaced angles, endpoints included
        settings: Solver settings

    Returns:
        TravelCurve of length num_points

    Raises:
        ValueError: If num_points < 2
    """
    if num_points < 2:
        raise ValueError(f"Need at least 2 points for a travel curve, got {num_points}")

    ext_angle = fully_extended_angle(params, settings)
    comp_angle = fully_compressed_angle(params, settings)
    angles = np.linspace(ext_angle, comp_angle, num_points)

    axle_y = axle_position(angles, params.swingarm_length)[1]
    return TravelCurve(
        angles=angles,
        wheel_travel=axle_y - axle_y[0],
        shock_compression=shock_compression(angles, params),
        motion_ratio=np.array([motion_ratio(a, params, settings) for a in angles]),
        spring_force=np.array([spring_force(a, params) for a in angles]),
        wheel_rate=np.array([wheel_rate(a, params, settings) for a in angles]),
    )


def sag_sweep(params: SuspensionParameters,
              field: str,
              values: Sequence[float],
              settings: SolverSettings = DEFAULT_SETTINGS,
              method: Optional[str] = None) -> np.ndarray:
    """
    Sag (mm) for each value of one parameter, all others held fixed.

    Example:
        >>> sag_sweep(DEFAULT_PARAMETERS, 'spring_rate', [400, 600, 800])

    Raises:
        ValueError: If field is not a SuspensionParameters field
    """
    if field not in PARAMETER_NAMES:
        raise ValueError(f"Unknown parameter '{field}'. Valid parameters: {list(PARAMETER_NAMES)}")

    return np.array([
        compute_sag(params.replace(**{field: value}), settings, method).sag_mm
        for value in values
    ])
