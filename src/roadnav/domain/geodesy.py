# domain/geodesy.py
"""
Spherical helpers over (lon, lat) pairs in degrees.
Distances are in miles on a sphere of radius EARTH_RADIUS_MI.
"""

import math

import numpy as np

EARTH_RADIUS_MI = 3963.0


def _wrap_deg(d: float) -> float:
    # (-180, 180]
    d = math.fmod(d, 360.0)
    if d <= -180.0:
        d += 360.0
    elif d > 180.0:
        d -= 360.0
    return d


def haversine_miles(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlam = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2.0) ** 2
    a = min(a, 1.0)  # rounding near antipodes
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_MI * c


def haversine_miles_many(lon: float, lat: float, lons: np.ndarray, lats: np.ndarray) -> np.ndarray:
    """Distance from one point to every point of (lons, lats); same formula as haversine_miles."""
    phi1 = np.radians(lat)
    phi2 = np.radians(lats)
    dphi = np.radians(lats - lat)
    dlam = np.radians(lons - lon)
    a = np.sin(dphi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlam / 2.0) ** 2
    a = np.minimum(a, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return EARTH_RADIUS_MI * c


def initial_bearing(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dlam = math.radians(lon2 - lon1)
    y = math.sin(dlam) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlam)
    return _wrap_deg(math.degrees(math.atan2(y, x)))


def relative_turn(heading_in: float, heading_out: float) -> float:
    """Signed change of heading; positive turns right (clockwise)."""
    return _wrap_deg(heading_out - heading_in)
