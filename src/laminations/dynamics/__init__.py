"""
Dynamics of the forward (shift) map.

Orbit iteration, pre-period / period detection and itineraries.
"""

from laminations.dynamics.orbit import (
    ORBIT_MAX_STEPS_DEFAULT,
    ForwardOrbit,
    OrbitLimitExceeded,
    forward_orbit,
    iterate_forward,
)

__all__ = [
    "ORBIT_MAX_STEPS_DEFAULT",
    "ForwardOrbit",
    "OrbitLimitExceeded",
    "forward_orbit",
    "iterate_forward",
]
