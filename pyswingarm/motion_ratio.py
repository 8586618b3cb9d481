"""
Motion ratio of the swingarm.

The motion ratio is wheel (axle) vertical travel per unit of shock travel.
It is evaluated numerically with a central difference in swingarm angle, and
its minimum over the travel range, where the shock is closest to
perpendicular to the swingarm, is located by golden-section search.
"""

import math

from .geometry import axle_position, shock_compression
from .solver_settings import SolverSettings, DEFAULT_SETTINGS
from .suspension_parameters import SuspensionParameters
from .travel_limits import travel_range

GOLDEN_RATIO = (math.sqrt(5) + 1) / 2


def motion_ratio(angle: float,
                 params: SuspensionParameters,
                 settings: SolverSettings = DEFAULT_SETTINGS) -> float:
    """
    Instantaneous motion ratio |d(axle_y) / d(compression)|.

    Values above 1 mean the wheel moves further than the shock. Returns 0
    when the shock compression is stationary at this angle (shock axis
    passing through the pivot), where the ratio is undefined.

    Args:
        angle: Swingarm angle (rad)
        params: Suspension parameters
        settings: Solver settings (difference step, degeneracy threshold)

    Returns:
        Dimensionless motion ratio, >= 0
    """
    eps = settings.derivative_step
    d_comp = (shock_compression(angle + eps, params)
              - shock_compression(angle - eps, params))
    d_axle_y = (axle_position(angle + eps, params.swingarm_length)[1]
                - axle_position(angle - eps, params.swingarm_length)[1])
    if abs(d_comp) < settings.degenerate_threshold:
        return 0.0
    return float(abs(d_axle_y / d_comp))


def find_perpendicular_angle(params: SuspensionParameters,
                             settings: SolverSettings = DEFAULT_SETTINGS) -> float:
    """
    Swingarm angle of minimum motion ratio within the travel range.

    This is where the shock is closest to perpendicular to the swingarm and
    moves most per unit of wheel travel. Golden-section search assumes the
    motion ratio has a single minimum over the travel range; for parameters
    where it does not, a local minimum may be returned.
    """
    a, b = travel_range(params, settings)

    c = b - (b - a) / GOLDEN_RATIO
    d = a + (b - a) / GOLDEN_RATIO

    while abs(b - a) > settings.golden_tolerance:
        if motion_ratio(c, params, settings) < motion_ratio(d, params, settings):
            b = d
        else:
            a = c
        c = b - (b - a) / GOLDEN_RATIO
        d = a + (b - a) / GOLDEN_RATIO
    return (a + b) / 2
