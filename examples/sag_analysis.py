"""
Example: Sag and Motion Ratio Analysis for a Linkless Swingarm

This example demonstrates how to evaluate a single-pivot rear suspension
with the pyswingarm library.

The analysis:
1. Locates the fully extended and fully compressed swingarm angles
2. Tabulates motion ratio, spring force and wheel rate through the stroke
3. Finds the angle of minimum motion ratio
4. Solves for static sag with both equilibrium methods
5. Sweeps spring rate to pick a spring for a target sag
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import logging

import numpy as np
from pyswingarm import (
    DEFAULT_PARAMETERS,
    compute_sag,
    compute_travel_curve,
    find_perpendicular_angle,
    motion_ratio,
    sag_sweep,
    format_length,
    from_lbs_per_in,
)


def print_travel_table(params, num_points=11):
    """Print motion ratio, spring force and wheel rate through the stroke."""
    curve = compute_travel_curve(params, num_points=num_points)

    print(f"{'angle (deg)':>12} {'wheel (mm)':>11} {'shock (mm)':>11} "
          f"{'MR':>7} {'force (lbf)':>12} {'wheel rate':>11}")
    for i in range(len(curve)):
        print(f"{np.degrees(curve.angles[i]):12.2f} {curve.wheel_travel[i]:11.1f} "
              f"{curve.shock_compression[i]:11.1f} {curve.motion_ratio[i]:7.3f} "
              f"{curve.spring_force[i]:12.1f} {curve.wheel_rate[i]:11.1f}")


def choose_spring(params, target_sag_mm, rates):
    """Return the rate from rates whose sag is closest to target_sag_mm."""
    sags = sag_sweep(params, 'spring_rate', rates)
    best = int(np.argmin(np.abs(sags - target_sag_mm)))
    return rates[best], sags[best]


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s: %(message)s")

    params = DEFAULT_PARAMETERS
    print("=" * 70)
    print("SWINGARM SUSPENSION ANALYSIS")
    print("=" * 70)
    print(f"Swingarm {format_length(params.swingarm_length)}, shock "
          f"{format_length(params.shock_free_length)} x {format_length(params.shock_stroke)}, "
          f"spring {params.spring_rate:.0f} lbs/in "
          f"({from_lbs_per_in(params.spring_rate, 'N/mm'):.1f} N/mm)\n")

    print_travel_table(params)

    perp = find_perpendicular_angle(params)
    print(f"\nMinimum motion ratio {motion_ratio(perp, params):.3f} "
          f"at {np.degrees(perp):.2f} deg")

    for method in ('scan', 'brentq'):
        sag = compute_sag(params, method=method)
        print(f"Sag ({method:6s}): {format_length(sag.sag_mm)} at "
              f"{np.degrees(sag.angle):.3f} deg after {sag.iterations} iterations")

    rates = list(range(400, 1250, 50))
    rate, sag_mm = choose_spring(params, target_sag_mm=35.0, rates=rates)
    print(f"\nSpring for 35 mm sag with {params.load:.0f} lbf: "
          f"{rate} lbs/in ({format_length(sag_mm)})")


if __name__ == "__main__":
    main()
