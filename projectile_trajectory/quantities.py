"""
Derived Motion Quantities
=========================
Reduces a finished Trajectory to six scalar metrics. The trajectory is
only read, never modified.
"""

import numpy as np
from dataclasses import dataclass

from .integrator import Trajectory


@dataclass(frozen=True)
class MotionMetrics:
    """Summary of one flight, in SI units."""
    flight_time: float      # s
    range_total: float      # m
    max_altitude: float     # m
    ascent_time: float      # s
    descent_time: float     # s
    heat_produced: float    # J


def compute_quantities(trajectory: Trajectory, v0: float, mass: float) -> MotionMetrics:
    """
    Flight time, range, apex, ascent/descent split and dissipated heat.

    The ascent time is taken at the first sample reaching the maximum
    height. Heat is the kinetic-energy deficit between launch and the
    terminal sample,

        Q = ½ · m · (v0² - vx_f² - vy_f²)

    with no potential-energy term for a terminal height left above zero
    by the grid-snapped landing.
    """
    flight_time = float(trajectory.time[-1])
    range_total = float(trajectory.x[-1])

    idx_max = int(np.argmax(trajectory.y))
    max_altitude = float(trajectory.y[idx_max])
    ascent_time = float(trajectory.time[idx_max])

    vx_f = float(trajectory.vx[-1])
    vy_f = float(trajectory.vy[-1])
    heat = 0.5 * mass * (v0 ** 2 - vx_f ** 2 - vy_f ** 2)

    return MotionMetrics(
        flight_time=flight_time,
        range_total=range_total,
        max_altitude=max_altitude,
        ascent_time=ascent_time,
        descent_time=flight_time - ascent_time,
        heat_produced=heat,
    )
