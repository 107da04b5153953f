"""
Physical Parameters
===================
Converts the material and fluid constants of a run into the three scalars
the integrator needs:

    m  = 4/3 · π · r³ · ρ_mat        (solid sphere)
    b1 = 6 · π · η · r               (Stokes / viscous drag)
    b2 = c · 2 · π · r² · ρ_air      (form drag, ½ folded in)

The drag force acting on the projectile is then  F = -(b1 + b2·|v|) · v.
"""

import math
from dataclasses import dataclass, fields
from typing import Optional


# ── Default constants ─────────────────────────────────────────────────────
GRAVITY              = 9.80665     # m/s²
STEEL_DENSITY        = 7850.0      # kg/m³
PROJECTILE_RADIUS    = 0.03        # m
AIR_DENSITY          = 1.22        # kg/m³
AIR_VISCOSITY        = 1.81e-5     # Pa·s
FORM_COEFFICIENT     = 0.469       # sphere


@dataclass(frozen=True)
class PhysicalConstants:
    """
    Everything that is constant over a run, grouped in one place so the
    deriver can be fed injected values instead of inline literals.
    """
    gravity: float = GRAVITY
    radius: float = PROJECTILE_RADIUS
    material_density: float = STEEL_DENSITY
    air_density: float = AIR_DENSITY
    air_viscosity: float = AIR_VISCOSITY
    form_coefficient: float = FORM_COEFFICIENT

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value!r}")
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class PhysicalParameters:
    """Per-run scalars consumed by the integrator."""
    gravity: float     # m/s²
    mass: float        # kg
    b1: float          # kg/s      linear drag coefficient
    b2: float          # kg/m      quadratic drag coefficient

    def __post_init__(self):
        for name in ('gravity', 'mass', 'b1', 'b2'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.mass <= 0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        if self.b1 < 0 or self.b2 < 0:
            raise ValueError(
                f"drag coefficients must be non-negative, "
                f"got b1={self.b1}, b2={self.b2}"
            )


def sphere_mass(radius: float, density: float) -> float:
    """Mass of a solid sphere (kg)."""
    return 4.0 / 3.0 * math.pi * radius ** 3 * density


def linear_drag_coefficient(radius: float, viscosity: float) -> float:
    """Stokes drag coefficient b1 for a sphere (kg/s)."""
    return 6.0 * math.pi * viscosity * radius


def quadratic_drag_coefficient(radius: float, air_density: float,
                               form_coefficient: float) -> float:
    """
    Quadratic drag coefficient b2 (kg/m).

    Equivalent to c · (4πr² / 2) · ρ_air, i.e. the dynamic-pressure ½
    applied to the sphere's surface-area term.
    """
    return form_coefficient * 2.0 * math.pi * radius ** 2 * air_density


def derive_parameters(constants: Optional[PhysicalConstants] = None) -> PhysicalParameters:
    """Build the integrator parameters from a set of physical constants."""
    if constants is None:
        constants = PhysicalConstants()

    return PhysicalParameters(
        gravity=constants.gravity,
        mass=sphere_mass(constants.radius, constants.material_density),
        b1=linear_drag_coefficient(constants.radius, constants.air_viscosity),
        b2=quadratic_drag_coefficient(constants.radius, constants.air_density,
                                      constants.form_coefficient),
    )


def vacuum_parameters(mass: float = 1.0, gravity: float = GRAVITY) -> PhysicalParameters:
    """Drag-free parameter set (b1 = b2 = 0)."""
    return PhysicalParameters(gravity=gravity, mass=mass, b1=0.0, b2=0.0)
