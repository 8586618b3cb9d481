"""
Travel limits of the swingarm.

The fully extended and fully compressed positions are the swingarm angles at
which the shock reaches its free length and its free length minus stroke.
Both are located by bisection on the shock length over a fixed angle
interval (SolverSettings.search_interval).
"""

from typing import Tuple

from .geometry import shock_length
from .log import get_logger
from .solver_settings import SolverSettings, DEFAULT_SETTINGS
from .suspension_parameters import SuspensionParameters

logger = get_logger(__name__)


def find_angle_for_shock_length(target_length: float,
                                params: SuspensionParameters,
                                settings: SolverSettings = DEFAULT_SETTINGS) -> float:
    """
    Find the swingarm angle at which the shock has a given length.

    Bisection over settings.search_interval. If the target length is not
    bracketed by the lengths at the interval ends, the end whose length is
    closer to the target is returned instead; this is a best-effort answer,
    not an error.

    Args:
        target_length: Desired shock length (mm)
        params: Suspension parameters
        settings: Solver settings (interval, tolerance, iteration cap)

    Returns:
        Swingarm angle in radians
    """
    lo, hi = settings.search_interval
    len_lo = float(shock_length(lo, params))
    len_hi = float(shock_length(hi, params))

    if (target_length - len_lo) * (target_length - len_hi) > 0:
        nearest = lo if abs(target_length - len_lo) < abs(target_length - len_hi) else hi
        logger.debug("Shock length %.3f mm not bracketed by [%.3f, %.3f] mm; "
                     "returning interval end %.6f rad",
                     target_length, len_lo, len_hi, nearest)
        return nearest

    for _ in range(settings.root_max_iterations):
        mid = (lo + hi) / 2
        len_mid = float(shock_length(mid, params))
        if abs(len_mid - target_length) < settings.root_tolerance:
            return mid

        if (len_mid - target_length) * (len_lo - target_length) < 0:
            hi = mid
        else:
            lo = mid
    return (lo + hi) / 2


def fully_extended_angle(params: SuspensionParameters,
                         settings: SolverSettings = DEFAULT_SETTINGS) -> float:
    """Angle at which the shock is at its free length (zero compression)."""
    return find_angle_for_shock_length(params.shock_free_length, params, settings)


def fully_compressed_angle(params: SuspensionParameters,
                           settings: SolverSettings = DEFAULT_SETTINGS) -> float:
    """Angle at which the shock has used its whole stroke."""
    return find_angle_for_shock_length(params.fully_compressed_length, params, settings)


def travel_range(params: SuspensionParameters,
                 settings: SolverSettings = DEFAULT_SETTINGS) -> Tuple[float, float]:
    """
    Ordered (min, max) swingarm angles of the travel limits.

    Extension and compression may fall on either side depending on where the
    upper mount sits, so the limits are sorted rather than assumed.
    """
    ext = fully_extended_angle(params, settings)
    comp = fully_compressed_angle(params, settings)
    return min(ext, comp), max(ext, comp)


def clamp_to_travel(angle: float,
                    params: SuspensionParameters,
                    settings: SolverSettings = DEFAULT_SETTINGS) -> float:
    """Clamp an arbitrary swingarm angle into the travel range."""
    lo, hi = travel_range(params, settings)
    return max(lo, min(hi, angle))
