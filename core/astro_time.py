from __future__ import annotations
from datetime import datetime, timedelta, timezone

from .config import IST_OFFSET_HRS

# Lightweight time utilities (no external deps).
# We use UTC internally; the launch form is entered in local time (IST).

J2000_JD = 2451545.0
_J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class LaunchInputError(ValueError):
    """Launch form value that cannot be parsed."""


def datetime_to_julian_date(dt: datetime) -> float:
    """Convert a datetime (timezone-aware recommended) to Julian Date."""
    if dt.tzinfo is None:
        # assume UTC if naive
        dt = dt.replace(tzinfo=timezone.utc)
    return J2000_JD + (dt - _J2000).total_seconds() / 86400.0

def jd_to_centuries(jd: float) -> float:
    """Julian centuries from J2000.0"""
    return (jd - J2000_JD) / 36525.0

def parse_launch_time(date_str: str, time_str: str,
                      utc_offset_hours: float = IST_OFFSET_HRS) -> datetime:
    """
    Parse the launch form date (YYYY-MM-DD) and time (HH:MM[:SS]).

    The values are local time at `utc_offset_hours` east of UTC;
    the result is an aware UTC datetime.
    """
    date_str = (date_str or "").strip()
    time_str = (time_str or "").strip()
    if not date_str or not time_str:
        raise LaunchInputError("Enter launch date and time")

    local = None
    for fmt in ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"):
        try:
            local = datetime.strptime(f"{date_str} {time_str}", fmt)
            break
        except ValueError:
            continue
    if local is None:
        raise LaunchInputError(
            f"Bad launch date/time {date_str!r} {time_str!r} "
            "(expected YYYY-MM-DD and HH:MM[:SS])")

    tz = timezone(timedelta(hours=utc_offset_hours))
    return local.replace(tzinfo=tz).astimezone(timezone.utc)

def parse_km(value: str, label: str) -> float:
    """Parse a numeric form field (km)."""
    try:
        return float(value.strip())
    except (AttributeError, ValueError):
        raise LaunchInputError(f"{label}: not a number ({value!r})") from None
