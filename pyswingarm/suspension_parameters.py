"""
Parameter record for a single-pivot, linkless swingarm suspension.

Coordinate system: origin at the swingarm pivot, +X rearward toward the axle,
+Y up. All lengths are in millimeters, the spring rate in lbs/in, the load in
lbf and the preload in millimeters of extra spring compression.
"""

from dataclasses import dataclass, asdict, fields, replace as _replace
from typing import Dict, List, Tuple

from .units import to_mm, to_lbf, to_lbs_per_in


@dataclass(frozen=True)
class SuspensionParameters:
    """
    Immutable description of the swingarm, shock and load.

    The lower shock mount is fixed to the swingarm at ``lower_mount_dist``
    from the pivot and rotates with it at the same angle as the axle. The
    upper mount is fixed to the frame.

    No validation is performed on construction; the solvers accept any values
    and degrade to boundary answers for non-physical input. Call
    :meth:`validate` to check a parameter set explicitly.
    """
    swingarm_length: float = 550.0
    lower_mount_dist: float = 250.0
    upper_mount_x: float = 160.0
    upper_mount_y: float = 240.0
    shock_free_length: float = 280.0
    shock_stroke: float = 55.0
    spring_rate: float = 600.0
    load: float = 200.0
    preload: float = 0.0

    @property
    def fully_compressed_length(self) -> float:
        """Shock length at the end of the stroke (mm)."""
        return self.shock_free_length - self.shock_stroke

    def replace(self, **overrides) -> 'SuspensionParameters':
        """
        Return a copy with the given fields changed.

        Example:
            >>> stiff = DEFAULT_PARAMETERS.replace(spring_rate=900)
        """
        return _replace(self, **overrides)

    def validate(self) -> None:
        """
        Check that the parameters describe a physically valid suspension.

        Raises:
            ValueError: Listing every violated constraint
        """
        errors = []
        for name in ('swingarm_length', 'lower_mount_dist', 'shock_free_length',
                     'shock_stroke', 'spring_rate'):
            value = getattr(self, name)
            if value <= 0:
                errors.append(f"{name} must be positive, got {value}")
        for name in ('load', 'preload'):
            value = getattr(self, name)
            if value < 0:
                errors.append(f"{name} must not be negative, got {value}")
        if self.fully_compressed_length <= 0:
            errors.append(f"shock_stroke ({self.shock_stroke}) must be shorter than "
                          f"shock_free_length ({self.shock_free_length})")
        if errors:
            raise ValueError("Invalid suspension parameters: " + "; ".join(errors))

    def out_of_range_fields(self) -> List[str]:
        """Names of fields outside their recommended PARAMETER_RANGES."""
        out = []
        for name, (lo, hi, _step) in PARAMETER_RANGES.items():
            value = getattr(self, name)
            if value < lo or value > hi:
                out.append(name)
        return out

    def in_recommended_range(self) -> bool:
        """True if every field lies within PARAMETER_RANGES."""
        return not self.out_of_range_fields()

    def to_dict(self) -> dict:
        """
        Serialize the parameters to a dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        data = {name: float(value) for name, value in asdict(self).items()}
        data['length_unit'] = 'mm'
        data['spring_rate_unit'] = 'lbs/in'
        data['force_unit'] = 'lbf'
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'SuspensionParameters':
        """
        Deserialize parameters from a dictionary.

        Unit keys ('length_unit', 'spring_rate_unit', 'force_unit') are
        optional and default to mm, lbs/in and lbf. 'preload' may be omitted.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a unit is not recognized
        """
        return cls.from_units(
            swingarm_length=data['swingarm_length'],
            lower_mount_dist=data['lower_mount_dist'],
            upper_mount_x=data['upper_mount_x'],
            upper_mount_y=data['upper_mount_y'],
            shock_free_length=data['shock_free_length'],
            shock_stroke=data['shock_stroke'],
            spring_rate=data['spring_rate'],
            load=data['load'],
            preload=data.get('preload', 0.0),
            length_unit=data.get('length_unit', 'mm'),
            spring_rate_unit=data.get('spring_rate_unit', 'lbs/in'),
            force_unit=data.get('force_unit', 'lbf'),
        )

    @classmethod
    def from_units(cls,
                   swingarm_length: float,
                   lower_mount_dist: float,
                   upper_mount_x: float,
                   upper_mount_y: float,
                   shock_free_length: float,
                   shock_stroke: float,
                   spring_rate: float,
                   load: float,
                   preload: float = 0.0,
                   length_unit: str = 'mm',
                   spring_rate_unit: str = 'lbs/in',
                   force_unit: str = 'lbf') -> 'SuspensionParameters':
        """
        Build a parameter set from values in arbitrary supported units.

        Args:
            length_unit: Unit of every length field including preload
            spring_rate_unit: Unit of spring_rate (e.g. 'N/mm', 'kg/mm')
            force_unit: Unit of load (e.g. 'N', 'kgf')

        Returns:
            SuspensionParameters in base units (mm, lbs/in, lbf)
        """
        return cls(
            swingarm_length=float(to_mm(swingarm_length, length_unit)),
            lower_mount_dist=float(to_mm(lower_mount_dist, length_unit)),
            upper_mount_x=float(to_mm(upper_mount_x, length_unit)),
            upper_mount_y=float(to_mm(upper_mount_y, length_unit)),
            shock_free_length=float(to_mm(shock_free_length, length_unit)),
            shock_stroke=float(to_mm(shock_stroke, length_unit)),
            spring_rate=float(to_lbs_per_in(spring_rate, spring_rate_unit)),
            load=float(to_lbf(load, force_unit)),
            preload=float(to_mm(preload, length_unit)),
        )


DEFAULT_PARAMETERS = SuspensionParameters()

# Recommended (min, max, step) for each field, matching the ranges exposed by
# the interactive parameter panel
PARAMETER_RANGES: Dict[str, Tuple[float, float, float]] = {
    'swingarm_length': (400.0, 700.0, 1.0),
    'lower_mount_dist': (100.0, 400.0, 1.0),
    'upper_mount_x': (50.0, 300.0, 1.0),
    'upper_mount_y': (100.0, 400.0, 1.0),
    'shock_free_length': (200.0, 400.0, 1.0),
    'shock_stroke': (20.0, 100.0, 1.0),
    'spring_rate': (200.0, 1500.0, 10.0),
    'preload': (0.0, 30.0, 0.5),
    'load': (50.0, 500.0, 5.0),
}

PARAMETER_NAMES = tuple(f.name for f in fields(SuspensionParameters))
