"""
Launch Conditions & Errors
==========================
Defines the per-run launch specification and the typed failures raised
by the simulation core.

Coordinate system:
  x = downrange (horizontal)
  y = height above launch level (up positive)
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np


class SimulationError(Exception):
    """Base class for every failure raised by the simulation core."""


class InvalidLaunchError(SimulationError, ValueError):
    """Launch speed or angle cannot produce a meaningful trajectory."""


class UnstableStepError(SimulationError):
    """The drag factor of an explicit step dropped to zero or below."""

    def __init__(self, dt: float, factor: float, time: float):
        self.dt = dt
        self.factor = factor
        self.time = time
        super().__init__(
            f"explicit step unstable at t={time:.4f} s: drag factor "
            f"a={factor:.4g} <= 0 with dt={dt:.4g} s; raise n_steps"
        )


class TrajectoryTruncatedError(SimulationError):
    """The step budget ran out while the projectile was still airborne."""

    def __init__(self, trajectory):
        self.trajectory = trajectory
        super().__init__(
            f"projectile still airborne at t={trajectory.time[-1]:.4f} s "
            f"(y={trajectory.y[-1]:.3f} m) after {trajectory.n_steps} steps"
        )


@dataclass(frozen=True)
class LaunchConditions:
    """
    Initial speed and elevation of one run.

    Angles outside (0°, 90°) and a zero speed are accepted: they give
    degenerate but well-defined motion.
    """
    velocity: float = 300.0           # m/s
    elevation_deg: float = 45.0       # degrees above horizontal

    def __post_init__(self):
        if not math.isfinite(self.velocity):
            raise InvalidLaunchError(f"launch velocity must be finite, got {self.velocity!r}")
        if not math.isfinite(self.elevation_deg):
            raise InvalidLaunchError(f"launch angle must be finite, got {self.elevation_deg!r}")
        if self.velocity < 0:
            raise InvalidLaunchError(f"launch velocity must be >= 0, got {self.velocity}")

    def initial_velocity(self) -> Tuple[float, float]:
        """Convert launch speed + elevation to (vx, vy)."""
        elev = np.radians(self.elevation_deg)
        return (float(self.velocity * np.cos(elev)),
                float(self.velocity * np.sin(elev)))

    def vacuum_flight_time(self, gravity: float) -> float:
        """Drag-free time of flight 2·v0·sin(α)/g (s); <= 0 for non-rising launches."""
        return 2.0 * self.initial_velocity()[1] / gravity
