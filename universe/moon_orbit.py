"""
Moon orbit — coarse geocentric Moon position from a Julian Date.

Very simplified Keplerian model:
  - mean anomaly propagated linearly from J2000
  - fixed eccentricity applied in the orbital plane
  - fixed inclination applied as a rotation about the X axis

Good enough to place the Moon on screen; NOT an ephemeris. Errors of
several degrees in longitude are normal (no perturbations, no node/perigee
precession, the mean longitude is not used for the position).

Output frame: x towards perigee at epoch, y in the orbital plane tilted by
the inclination, z out of the Earth's reference plane. Kilometres.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from core.astro_time import datetime_to_julian_date, jd_to_centuries
from core.types import Vec3


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM = 6378.137
MOON_RADIUS_KM = 1737.4
MU_EARTH = 398600.4418          # km^3/s^2
MU_MOON = 4902.800066           # km^3/s^2

MOON_ORBIT_A = 384400.0         # km
MOON_ORBIT_E = 0.0549
MOON_ORBIT_I = math.radians(5.145)

# Mean anomaly / mean longitude at J2000 (deg) and rates (deg per century)
M0_DEG, M_RATE = 134.963, 477198.867
L0_DEG, L_RATE = 218.316, 481267.881

ANOMALISTIC_MONTH_DAYS = 360.0 * 36525.0 / M_RATE   # ~27.55 d

DEFAULT_MOON_POSITION = Vec3(MOON_ORBIT_A, 0.0, 0.0)


@dataclass(frozen=True)
class MoonMeanElements:
    """Mean anomaly and mean longitude (degrees, [0, 360)) at a given JD."""
    jd: float
    mean_anomaly_deg: float
    mean_longitude_deg: float


def moon_mean_elements(jd: float) -> MoonMeanElements:
    T = jd_to_centuries(jd)
    return MoonMeanElements(
        jd=jd,
        mean_anomaly_deg=(M0_DEG + M_RATE * T) % 360.0,
        mean_longitude_deg=(L0_DEG + L_RATE * T) % 360.0,
    )


def _orbit_xyz(M_rad, a=MOON_ORBIT_A, e=MOON_ORBIT_E, inc=MOON_ORBIT_I):
    # In-plane position (mean anomaly used directly, no Kepler solve)
    x = a * (np.cos(M_rad) - e)
    y = a * math.sqrt(1.0 - e * e) * np.sin(M_rad)
    return x, y * math.cos(inc), y * math.sin(inc)


def moon_position_jd(jd: float) -> Vec3:
    """Moon position (km, Earth-centred) at Julian Date `jd`."""
    M = math.radians(moon_mean_elements(jd).mean_anomaly_deg)
    x, y, z = _orbit_xyz(M)
    return Vec3(float(x), float(y), float(z))


def moon_position(dt: datetime) -> Vec3:
    """Moon position at a datetime (naive = UTC)."""
    return moon_position_jd(datetime_to_julian_date(dt))


def moon_track(jd: float, samples: int = 180) -> np.ndarray:
    """
    Positions over one anomalistic month starting at `jd`.

    Returns:
        (samples, 3) array in km; the last row closes the loop
    """
    if samples < 2:
        raise ValueError("samples must be >= 2")
    days = np.linspace(0.0, ANOMALISTIC_MONTH_DAYS, samples)
    T = (jd + days - 2451545.0) / 36525.0
    M = np.radians((M0_DEG + M_RATE * T) % 360.0)
    x, y, z = _orbit_xyz(M)
    return np.column_stack((x, y, z))
