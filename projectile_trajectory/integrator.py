"""
Numerical Integration Engine
=============================
Explicit first-order time stepping of a point mass under gravity and
combined linear + quadratic drag:

    a     = 1 - dt · (b1 + b2·|v_n|) / m
    v_n+1 = a · v_n - g·dt · ŷ
    r_n+1 = r_n + v_n · dt          (pre-update velocity)

The fixed step is sized from the drag-free flight time,
dt = T_vac / (N - 1). That horizon only sets the grid resolution; the run
ends at the first sample that drops below ground level, or after N - 1
steps, whichever comes first.

Output: Trajectory dataclass with the full (read-only) state history.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, Optional

from scipy.interpolate import interp1d

from .parameters import PhysicalParameters
from .projectile import LaunchConditions, UnstableStepError


DEFAULT_STEPS = 1000


@dataclass(frozen=True)
class KinematicSample:
    """Snapshot of projectile state at one instant."""
    time: float
    x: float
    y: float
    vx: float
    vy: float


@dataclass(frozen=True, eq=False)
class Trajectory:
    """Complete time-ordered state history of one run."""
    conditions: LaunchConditions
    parameters: PhysicalParameters
    dt: float                 # grid step (0 for a single-sample run)
    n_steps: int              # step budget the run was given
    contact: str              # ground-contact model key
    truncated: bool           # budget ran out before ground contact

    # Arrays, each of shape (n,) with n >= 1
    time: np.ndarray
    x: np.ndarray
    y: np.ndarray
    vx: np.ndarray
    vy: np.ndarray

    # First below-ground sample, discarded from the history
    crossing: Optional[KinematicSample] = None

    def __post_init__(self):
        for arr in (self.time, self.x, self.y, self.vx, self.vy):
            arr.flags.writeable = False

    def __len__(self) -> int:
        return len(self.time)

    def sample(self, i: int) -> KinematicSample:
        return KinematicSample(float(self.time[i]), float(self.x[i]), float(self.y[i]),
                               float(self.vx[i]), float(self.vy[i]))

    def samples(self) -> Iterator[KinematicSample]:
        for i in range(len(self)):
            yield self.sample(i)

    @property
    def launch(self) -> KinematicSample:
        return self.sample(0)

    @property
    def final(self) -> KinematicSample:
        return self.sample(-1)

    @property
    def speed(self) -> np.ndarray:
        return np.hypot(self.vx, self.vy)


# ══════════════════════════════════════════════════════════════════════════
#  Ground-contact models
# ══════════════════════════════════════════════════════════════════════════

def snap_to_grid(last: KinematicSample,
                 crossing: KinematicSample) -> Optional[KinematicSample]:
    """Keep the last non-negative grid sample as the landing point."""
    return None


def interpolate_contact(last: KinematicSample,
                        crossing: KinematicSample) -> Optional[KinematicSample]:
    """
    Linear interpolation of the state at y = 0 between the last retained
    sample and the discarded crossing sample.
    """
    if last.y == 0.0:
        return None

    heights = [crossing.y, last.y]
    states = [[crossing.time, crossing.x, crossing.vx, crossing.vy],
              [last.time, last.x, last.vx, last.vy]]
    t, x, vx, vy = interp1d(heights, states, axis=0, assume_sorted=True)(0.0)
    return KinematicSample(float(t), float(x), 0.0, float(vx), float(vy))


CONTACT_MODELS = {
    'grid': snap_to_grid,
    'interpolate': interpolate_contact,
}


# ══════════════════════════════════════════════════════════════════════════
#  Integrator
# ══════════════════════════════════════════════════════════════════════════

def simulate_trajectory(conditions: LaunchConditions, params: PhysicalParameters,
                        n_steps: int = DEFAULT_STEPS, contact: str = 'grid',
                        horizon: Optional[float] = None) -> Trajectory:
    """
    Integrate one launch until ground contact or step-budget exhaustion.

    Parameters
    ----------
    conditions : LaunchConditions
    params : PhysicalParameters
    n_steps : int
        Number of grid instants N; at most N - 1 steps are taken.
    contact : str
        Key into CONTACT_MODELS ('grid' or 'interpolate').
    horizon : float, optional
        Time span used to size the grid. Defaults to the drag-free
        flight time 2·v0·sin(α)/g.
    """
    if contact not in CONTACT_MODELS:
        raise ValueError(
            f"Unknown contact model '{contact}'. "
            f"Available: {list(CONTACT_MODELS.keys())}"
        )
    if n_steps < 2:
        raise ValueError(f"n_steps must be at least 2, got {n_steps}")

    vx, vy = conditions.initial_velocity()
    x = y = 0.0

    if horizon is None:
        horizon = conditions.vacuum_flight_time(params.gravity)

    history = [(0.0, x, y, vx, vy)]

    # At rest or not rising: the launch sample is the whole flight
    if conditions.velocity == 0 or not horizon > 0:
        return _build_result(history, conditions, params, 0.0, n_steps,
                             contact, truncated=False, crossing=None)

    dt = horizon / (n_steps - 1)
    g, m, b1, b2 = params.gravity, params.mass, params.b1, params.b2
    crossing = None

    for i in range(n_steps - 1):
        a = 1.0 - dt * (b1 + b2 * np.hypot(vx, vy)) / m
        if a <= 0:
            raise UnstableStepError(dt, float(a), i * dt)

        x_new = x + vx * dt
        y_new = y + vy * dt
        vx, vy = vx * a, vy * a - g * dt
        x, y = x_new, y_new
        t = (i + 1) * dt

        if y < 0:
            crossing = KinematicSample(t, x, y, vx, vy)
            break

        history.append((t, x, y, vx, vy))

    truncated = crossing is None

    if crossing is not None:
        landing = CONTACT_MODELS[contact](KinematicSample(*history[-1]), crossing)
        if landing is not None:
            history.append((landing.time, landing.x, landing.y,
                            landing.vx, landing.vy))

    return _build_result(history, conditions, params, dt, n_steps,
                         contact, truncated, crossing)


def _build_result(history, conditions, params, dt, n_steps, contact,
                  truncated, crossing):
    """Convert history list to Trajectory."""
    times, xs, ys, vxs, vys = (np.array(col, dtype=float) for col in zip(*history))

    return Trajectory(
        conditions=conditions,
        parameters=params,
        dt=dt,
        n_steps=n_steps,
        contact=contact,
        truncated=truncated,
        time=times,
        x=xs,
        y=ys,
        vx=vxs,
        vy=vys,
        crossing=crossing,
    )
