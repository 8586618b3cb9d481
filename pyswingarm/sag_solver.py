"""
Static sag solver.

Sag is the vertical axle displacement from full extension to the angle at
which the spring torque about the pivot balances the torque of the static
load at the axle. Two methods are provided:

- 'scan': march from full extension toward full compression in fixed angle
  steps and stop at the first step where the spring torque reaches the load
  torque. Accuracy is tied to the step size (SolverSettings.sag_step).
- 'brentq': bracketed root search on the torque balance between the travel
  limits using scipy.optimize.brentq. Relies on the torque balance changing
  sign exactly once between the limits, which holds because the spring
  torque grows monotonically with compression for physical parameters.

Both report a bottomed-out result at full compression when the spring
cannot carry the load.

Requirements:
    - scipy: For the bracketed root search (scipy.optimize)
"""

from dataclasses import dataclass
from typing import Optional

from scipy import optimize

from .forces import spring_force, spring_torque, load_torque, torque_balance
from .geometry import axle_position
from .log import get_logger
from .solver_settings import SolverSettings, DEFAULT_SETTINGS, SAG_METHODS
from .suspension_parameters import SuspensionParameters
from .travel_limits import fully_extended_angle, fully_compressed_angle

logger = get_logger(__name__)


@dataclass(frozen=True)
class SagResult:
    """
    Static equilibrium of the suspension under load.

    Attributes:
        angle: Equilibrium swingarm angle (rad)
        sag_mm: axle_y(angle) - axle_y(full extension), in mm. With +Y up
            and compression rotating the axle upward relative to the pivot,
            this is positive for a loaded suspension.
        bottomed_out: True if no equilibrium exists before full compression
        iterations: Scan steps or torque balance evaluations used
    """
    angle: float
    sag_mm: float
    bottomed_out: bool = False
    iterations: int = 0

    def __repr__(self) -> str:
        status = "bottomed out" if self.bottomed_out else "equilibrium"
        return (f"SagResult({status}, angle={self.angle:.6f} rad, "
                f"sag={self.sag_mm:.3f} mm)")


def _sag_between(angle: float, ext_angle: float, params: SuspensionParameters) -> float:
    return float(axle_position(angle, params.swingarm_length)[1]
                 - axle_position(ext_angle, params.swingarm_length)[1])


def _bottomed_out(ext_angle: float, comp_angle: float,
                  params: SuspensionParameters, iterations: int) -> SagResult:
    logger.debug("No equilibrium before full compression (load %.1f lbf, "
                 "spring %.1f lbs/in); suspension bottoms out", params.load, params.spring_rate)
    return SagResult(angle=comp_angle,
                     sag_mm=_sag_between(comp_angle, ext_angle, params),
                     bottomed_out=True,
                     iterations=iterations)


def _scan_sag(params: SuspensionParameters, settings: SolverSettings) -> SagResult:
    ext_angle = fully_extended_angle(params, settings)
    comp_angle = fully_compressed_angle(params, settings)

    # Step from extension toward compression
    step = settings.sag_step if ext_angle < comp_angle else -settings.sag_step

    angle = ext_angle
    iterations = 0
    for iterations in range(1, settings.sag_max_iterations + 1):
        angle += step

        if step > 0 and angle > comp_angle:
            break
        if step < 0 and angle < comp_angle:
            break

        # No spring force yet, still extending
        if spring_force(angle, params) <= 0:
            continue

        if spring_torque(angle, params) >= load_torque(angle, params):
            return SagResult(angle=angle,
                             sag_mm=_sag_between(angle, ext_angle, params),
                             iterations=iterations)

    return _bottomed_out(ext_angle, comp_angle, params, iterations)


def _brentq_sag(params: SuspensionParameters, settings: SolverSettings) -> SagResult:
    ext_angle = fully_extended_angle(params, settings)
    comp_angle = fully_compressed_angle(params, settings)

    if torque_balance(ext_angle, params) >= 0:
        return SagResult(angle=ext_angle, sag_mm=0.0, iterations=1)
    if torque_balance(comp_angle, params) < 0:
        return _bottomed_out(ext_angle, comp_angle, params, iterations=2)

    root, info = optimize.brentq(
        torque_balance,
        min(ext_angle, comp_angle),
        max(ext_angle, comp_angle),
        args=(params,),
        xtol=settings.sag_tolerance,
        maxiter=settings.root_max_iterations,
        full_output=True,
        disp=False,
    )
    if not info.converged:
        logger.warning("Sag root search stopped after %d iterations: %s",
                       info.iterations, info.flag)
    return SagResult(angle=float(root),
                     sag_mm=_sag_between(root, ext_angle, params),
                     iterations=info.function_calls + 2)


def compute_sag(params: SuspensionParameters,
                settings: SolverSettings = DEFAULT_SETTINGS,
                method: Optional[str] = None) -> SagResult:
    """
    Compute the static sag of the suspension under params.load.

    Args:
        params: Suspension parameters
        settings: Solver settings (step, caps, tolerances, default method)
        method: 'scan' or 'brentq'; overrides settings.sag_method

    Returns:
        SagResult with the equilibrium angle and sag. If the spring cannot
        support the load, the fully compressed angle is returned with
        bottomed_out=True.

    Raises:
        ValueError: If the method is unknown
    """
    solve_method = method if method is not None else settings.sag_method

    if solve_method == 'scan':
        return _scan_sag(params, settings)
    elif solve_method == 'brentq':
        return _brentq_sag(params, settings)
    else:
        raise ValueError(f"Unknown sag method '{solve_method}'. Use one of {list(SAG_METHODS)}")
