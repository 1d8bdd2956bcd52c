"""
Universe module — Moon position provider.

Usage:
    from universe import moon_position_jd
    pos = moon_position_jd(2460000.5)    # Vec3 in km
"""

from .moon_orbit import (
    EARTH_RADIUS_KM,
    MOON_RADIUS_KM,
    MU_EARTH,
    MU_MOON,
    MOON_ORBIT_A,
    MOON_ORBIT_E,
    MOON_ORBIT_I,
    DEFAULT_MOON_POSITION,
    MoonMeanElements,
    moon_mean_elements,
    moon_position_jd,
    moon_position,
    moon_track,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "MOON_RADIUS_KM",
    "MU_EARTH",
    "MU_MOON",
    "MOON_ORBIT_A",
    "MOON_ORBIT_E",
    "MOON_ORBIT_I",
    "DEFAULT_MOON_POSITION",
    "MoonMeanElements",
    "moon_mean_elements",
    "moon_position_jd",
    "moon_position",
    "moon_track",
]
