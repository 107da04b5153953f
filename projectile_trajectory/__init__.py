"""
Projectile Trajectory Simulator
===============================
Point-mass projectile launched at speed v0 and angle alpha0, under
constant gravity and a drag force combining a linear (viscous, Stokes)
and a quadratic (form drag) term:

    F = -(b1 + b2·|v|) · v

Pipeline:
  - Parameter derivation (mass, b1, b2 from material/fluid constants)
  - Explicit fixed-step integration until ground contact
  - Reduction to flight time, range, apex, ascent/descent, heat

Figures, animation and the run log are built afterwards from the stored
trajectory and metrics.
"""

from .parameters import (
    PhysicalConstants, PhysicalParameters,
    derive_parameters, vacuum_parameters,
    sphere_mass, linear_drag_coefficient, quadratic_drag_coefficient,
)
from .projectile import (
    LaunchConditions, SimulationError, InvalidLaunchError,
    TrajectoryTruncatedError, UnstableStepError,
)
from .integrator import (
    KinematicSample, Trajectory, simulate_trajectory,
    CONTACT_MODELS, DEFAULT_STEPS,
)
from .quantities import MotionMetrics, compute_quantities
from .simulation import simulate, random_launch
from .validation import (
    validate_against_vacuum, vacuum_flight_time, vacuum_range,
    vacuum_max_altitude,
)
from .reporting import format_report, format_summary, append_report, clear_log
from .visualization import plot_results, create_trajectory_animation

__version__ = "1.0.0"
__all__ = [
    'PhysicalConstants', 'PhysicalParameters',
    'derive_parameters', 'vacuum_parameters',
    'sphere_mass', 'linear_drag_coefficient', 'quadratic_drag_coefficient',
    'LaunchConditions', 'SimulationError', 'InvalidLaunchError',
    'TrajectoryTruncatedError', 'UnstableStepError',
    'KinematicSample', 'Trajectory', 'simulate_trajectory',
    'CONTACT_MODELS', 'DEFAULT_STEPS',
    'MotionMetrics', 'compute_quantities',
    'simulate', 'random_launch',
    'validate_against_vacuum', 'vacuum_flight_time', 'vacuum_range',
    'vacuum_max_altitude',
    'format_report', 'format_summary', 'append_report', 'clear_log',
    'plot_results', 'create_trajectory_animation',
]
