"""
Simulation entry point: parameters → trajectory → metrics.
"""

from typing import Optional, Tuple

import numpy as np

from .integrator import DEFAULT_STEPS, Trajectory, simulate_trajectory
from .parameters import PhysicalParameters, derive_parameters
from .projectile import LaunchConditions, TrajectoryTruncatedError
from .quantities import MotionMetrics, compute_quantities


# Driver ranges (integers, inclusive)
VELOCITY_RANGE = (10, 500)    # m/s
ELEVATION_RANGE = (6, 89)     # degrees


def simulate(v0: float, alpha0: float, params: Optional[PhysicalParameters] = None,
             n_steps: int = DEFAULT_STEPS, contact: str = 'grid',
             require_landing: bool = False,
             horizon: Optional[float] = None) -> Tuple[Trajectory, MotionMetrics]:
    """
    Run one launch and reduce it to its metrics.

    horizon overrides the drag-free flight time used to size the grid.

    Raises InvalidLaunchError for a negative or non-finite launch, and
    TrajectoryTruncatedError when require_landing is set and the step
    budget ran out before ground contact.
    """
    if params is None:
        params = derive_parameters()

    conditions = LaunchConditions(velocity=v0, elevation_deg=alpha0)
    trajectory = simulate_trajectory(conditions, params, n_steps=n_steps,
                                     contact=contact, horizon=horizon)
    if require_landing and trajectory.truncated:
        raise TrajectoryTruncatedError(trajectory)

    metrics = compute_quantities(trajectory, conditions.velocity, params.mass)
    return trajectory, metrics


def random_launch(rng: Optional[np.random.Generator] = None) -> Tuple[int, int]:
    """Draw an integer (v0, alpha0) pair from the driver ranges."""
    if rng is None:
        rng = np.random.default_rng()
    v0 = int(rng.integers(VELOCITY_RANGE[0], VELOCITY_RANGE[1], endpoint=True))
    alpha0 = int(rng.integers(ELEVATION_RANGE[0], ELEVATION_RANGE[1], endpoint=True))
    return v0, alpha0
