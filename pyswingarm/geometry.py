"""
Swingarm geometry.

Maps a swingarm angle to axle and shock mount positions and derives the shock
length and compression. The swingarm angle is measured from horizontal at the
pivot; negative angles put the axle below the pivot.

Every function accepts either a scalar angle or a numpy array of angles.
Positions are returned as [x, y] arrays (shape (2,) for a scalar angle,
shape (2, N) for N angles).
"""

import numpy as np
from typing import Union

from .suspension_parameters import SuspensionParameters

Angle = Union[float, np.ndarray]


def axle_position(angle: Angle, swingarm_length: float) -> np.ndarray:
    """Axle position [x, y] in mm relative to the pivot."""
    return np.array([swingarm_length * np.cos(angle),
                     swingarm_length * np.sin(angle)])


def lower_mount_position(angle: Angle, lower_mount_dist: float) -> np.ndarray:
    """
    Lower shock mount position [x, y] in mm.

    The mount is rigid with the swingarm, so it sits on the same ray as the
    axle at a shorter radius.
    """
    return np.array([lower_mount_dist * np.cos(angle),
                     lower_mount_dist * np.sin(angle)])


def upper_mount_position(params: SuspensionParameters) -> np.ndarray:
    """Frame-fixed upper shock mount [x, y] in mm."""
    return np.array([params.upper_mount_x, params.upper_mount_y], dtype=float)


def _shock_vector(angle: Angle, params: SuspensionParameters) -> np.ndarray:
    lower = lower_mount_position(angle, params.lower_mount_dist)
    return np.array([params.upper_mount_x - lower[0],
                     params.upper_mount_y - lower[1]])


def shock_length(angle: Angle, params: SuspensionParameters) -> Union[float, np.ndarray]:
    """Eye-to-eye shock length in mm."""
    d = _shock_vector(angle, params)
    return np.hypot(d[0], d[1])


def shock_compression(angle: Angle, params: SuspensionParameters) -> Union[float, np.ndarray]:
    """
    Shock compression in mm (free length minus current length).

    Positive means compressed. Not clamped: angles past full extension give
    negative values.
    """
    return params.shock_free_length - shock_length(angle, params)


def shock_unit_vector(angle: Angle, params: SuspensionParameters) -> np.ndarray:
    """Unit vector along the shock from the lower mount toward the upper mount."""
    d = _shock_vector(angle, params)
    return d / np.hypot(d[0], d[1])
