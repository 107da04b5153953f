"""
Validation Against Closed-Form Motion
=====================================
With b1 = b2 = 0 the model reduces to ideal parabolic flight, for which

    T = 2 · v0 · sin(α) / g
    R = v0² · sin(2α) / g
    H = v0² · sin²(α) / (2g)

Running the integrator with a drag-free parameter set and comparing its
metrics against these values checks the stepping scheme, the landing
rule and the extractor together. Errors are expected to be O(dt).
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .integrator import DEFAULT_STEPS
from .parameters import GRAVITY, vacuum_parameters
from .simulation import simulate


# (v0 m/s, alpha0 deg)
REFERENCE_CASES = [
    (50.0, 45.0),
    (100.0, 30.0),
    (250.0, 60.0),
    (500.0, 80.0),
]


def vacuum_flight_time(v0: float, alpha0: float, gravity: float = GRAVITY) -> float:
    return 2.0 * v0 * np.sin(np.radians(alpha0)) / gravity


def vacuum_range(v0: float, alpha0: float, gravity: float = GRAVITY) -> float:
    return v0 ** 2 * np.sin(2.0 * np.radians(alpha0)) / gravity


def vacuum_max_altitude(v0: float, alpha0: float, gravity: float = GRAVITY) -> float:
    return (v0 * np.sin(np.radians(alpha0))) ** 2 / (2.0 * gravity)


@dataclass
class ValidationResult:
    """Result of one closed-form comparison."""
    v0: float
    alpha0: float
    dt: float
    ref_tof: float
    sim_tof: float
    ref_range: float
    sim_range: float
    ref_max_alt: float
    sim_max_alt: float

    @property
    def tof_error(self) -> float:
        return self.sim_tof - self.ref_tof

    @property
    def range_error(self) -> float:
        return self.sim_range - self.ref_range

    @property
    def alt_error(self) -> float:
        return self.sim_max_alt - self.ref_max_alt

    @property
    def within_grid(self) -> bool:
        """Flight time within two grid steps of the closed form."""
        return abs(self.tof_error) <= 2.0 * self.dt


def validate_against_vacuum(cases: Sequence[Tuple[float, float]] = REFERENCE_CASES,
                            gravity: float = GRAVITY, n_steps: int = DEFAULT_STEPS,
                            verbose: bool = True) -> List[ValidationResult]:
    """
    Run the drag-free integrator for each (v0, alpha0) case and compare
    against the parabolic closed forms.
    """
    params = vacuum_parameters(gravity=gravity)
    results = []

    if verbose:
        print(f"\n{'='*75}")
        print(f"  VALIDATION: drag-free flight vs closed form  (g = {gravity} m/s², N = {n_steps})")
        print(f"{'='*75}")
        print(f"{'v0':>6} {'α°':>5} {'Ref T':>8} {'Sim T':>8} {'ΔT':>8} "
              f"{'Ref R':>9} {'Sim R':>9} {'ΔR':>7} "
              f"{'Ref H':>8} {'Sim H':>8} {'ΔH':>6}")
        print("-" * 75)

    for v0, alpha0 in cases:
        traj, metrics = simulate(v0, alpha0, params, n_steps=n_steps)

        vr = ValidationResult(
            v0=v0,
            alpha0=alpha0,
            dt=traj.dt,
            ref_tof=vacuum_flight_time(v0, alpha0, gravity),
            sim_tof=metrics.flight_time,
            ref_range=vacuum_range(v0, alpha0, gravity),
            sim_range=metrics.range_total,
            ref_max_alt=vacuum_max_altitude(v0, alpha0, gravity),
            sim_max_alt=metrics.max_altitude,
        )
        results.append(vr)

        if verbose:
            print(f"{v0:>6.0f} {alpha0:>5.0f} {vr.ref_tof:>8.3f} {vr.sim_tof:>8.3f} "
                  f"{vr.tof_error:>+8.4f} "
                  f"{vr.ref_range:>9.1f} {vr.sim_range:>9.1f} {vr.range_error:>+7.2f} "
                  f"{vr.ref_max_alt:>8.1f} {vr.sim_max_alt:>8.1f} {vr.alt_error:>+6.2f}")

    if verbose:
        print("-" * 75)
        status = "✓ PASS" if all(r.within_grid for r in results) else "✗ NEEDS TUNING"
        print(f"  Status: {status}")
        print(f"{'='*75}\n")

    return results


if __name__ == "__main__":
    validate_against_vacuum(verbose=True)
