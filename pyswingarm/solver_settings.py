"""
Numeric settings shared by the swingarm solvers.

Every search in the package (bisection for travel limits, golden-section
search for the motion ratio minimum, and the sag equilibrium search) reads
its tolerances, step sizes and iteration caps from a SolverSettings record.
Callers modelling unusual geometry can widen the bisection interval or
tighten tolerances without touching the solver code.
"""

import math
from dataclasses import dataclass, asdict, replace as _replace
from typing import Tuple


SAG_METHODS = ('scan', 'brentq')


@dataclass(frozen=True)
class SolverSettings:
    """
    Tolerances, step sizes and iteration caps for the swingarm solvers.

    Attributes:
        search_interval: Angle interval (rad) bisected when locating a shock length
        root_tolerance: Shock length tolerance (mm) for the bisection
        root_max_iterations: Bisection iteration cap
        derivative_step: Central difference half-step (rad) for the motion ratio
        degenerate_threshold: Magnitude below which a divisor is treated as zero
        golden_tolerance: Bracket width (rad) at which golden-section search stops
        sag_step: Angle increment (rad) of the equilibrium scan
        sag_max_iterations: Equilibrium scan step cap
        sag_tolerance: Angle tolerance (rad) of the bracketed equilibrium search
        sag_method: 'scan' (fixed-step march) or 'brentq' (bracketed root search)
    """
    search_interval: Tuple[float, float] = (-math.pi / 2, math.pi / 4)
    root_tolerance: float = 0.001
    root_max_iterations: int = 100
    derivative_step: float = 1e-4
    degenerate_threshold: float = 1e-10
    golden_tolerance: float = 1e-8
    sag_step: float = 0.0005
    sag_max_iterations: int = 200000
    sag_tolerance: float = 1e-9
    sag_method: str = 'scan'

    def validate(self) -> None:
        """
        Check that every setting is usable.

        Raises:
            ValueError: If any tolerance, step or cap is non-positive, the
                search interval is empty, or the sag method is unknown
        """
        errors = []
        lo, hi = self.search_interval
        if not lo < hi:
            errors.append(f"search_interval must be increasing, got ({lo}, {hi})")
        for name in ('root_tolerance', 'derivative_step', 'degenerate_threshold',
                     'golden_tolerance', 'sag_step', 'sag_tolerance'):
            if getattr(self, name) <= 0:
                errors.append(f"{name} must be positive, got {getattr(self, name)}")
        for name in ('root_max_iterations', 'sag_max_iterations'):
            if getattr(self, name) < 1:
                errors.append(f"{name} must be at least 1, got {getattr(self, name)}")
        if self.sag_method not in SAG_METHODS:
            errors.append(f"Unknown sag method '{self.sag_method}'. Use one of {list(SAG_METHODS)}")
        if errors:
            raise ValueError("Invalid solver settings: " + "; ".join(errors))

    def replace(self, **overrides) -> 'SolverSettings':
        """Return a copy with the given fields changed."""
        return _replace(self, **overrides)

    def to_dict(self) -> dict:
        """
        Serialize the settings to a dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        data = asdict(self)
        data['search_interval'] = [float(v) for v in self.search_interval]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'SolverSettings':
        """
        Deserialize settings from a dictionary.

        Missing keys keep their default values.

        Raises:
            ValueError: If an unknown key is present
        """
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown solver settings: {sorted(unknown)}")
        values = dict(data)
        if 'search_interval' in values:
            values['search_interval'] = tuple(float(v) for v in values['search_interval'])
        return cls(**values)


DEFAULT_SETTINGS = SolverSettings()
