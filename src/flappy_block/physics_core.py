"""
physics_core.py: The deterministic kinematic step shared by every moving entity.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import GRAVITY_ACCEL, FLAP_IMPULSE, TICK_TIME


@dataclass
class PhysicsCore:
    """
    Fixed-timestep vertical kinematics.
    The time step is passed in rather than read from a global so the
    integration can be exercised at any tick rate.
    """
    gravity: float = GRAVITY_ACCEL
    flap_impulse: float = FLAP_IMPULSE
    dt: float = TICK_TIME

    def apply_gravity(self, velocity: float, dt: float) -> float:
        return velocity + self.gravity * dt

    def flap(self, velocity: float) -> float:
        """Returns the velocity after an instantaneous flap impulse."""
        return velocity + self.flap_impulse

    def step(self, y: float, velocity: float, flap: bool = False,
             dt: Optional[float] = None) -> Tuple[float, float]:
        """
        Calculates new position and velocity after one fixed timestep.
        Gravity is integrated first, then the flap impulse, then the position.
        """
        if dt is None:
            dt = self.dt

        velocity = self.apply_gravity(velocity, dt)
        if flap:
            velocity = self.flap(velocity)
        y += velocity * dt

        return y, velocity
