"""
Spherical Distance Utilities
============================

Degree/radian conversions, longitude/latitude normalization and the
geodetic bounding-box math used by the geodesic calculators.

All angles are degrees unless a name ends in ``_rad``.
"""

import math

from geosect.shapes.rectangle import Rectangle

EARTH_MEAN_RADIUS_KM = 6371.0087714
EARTH_EQUATORIAL_RADIUS_KM = 6378.1370

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
DEG_TO_KM = DEG_TO_RAD * EARTH_MEAN_RADIUS_KM
KM_TO_DEG = 1 / DEG_TO_KM


def dist_to_degrees(dist: float, radius: float = EARTH_MEAN_RADIUS_KM) -> float:
    """Convert a surface distance (same units as ``radius``) to degrees of arc."""
    return math.degrees(dist / radius)


def degrees_to_dist(degrees: float, radius: float = EARTH_MEAN_RADIUS_KM) -> float:
    """Convert degrees of arc to a surface distance in ``radius`` units."""
    return math.radians(degrees) * radius


def norm_lon_deg(lon_deg: float) -> float:
    """Normalize a longitude into [-180, 180]."""
    if -180 <= lon_deg <= 180:
        return lon_deg
    off = (lon_deg + 180) % 360
    if off == 0 and lon_deg > 0:
        return 180.0
    return -180 + off


def norm_lat_deg(lat_deg: float) -> float:
    """Normalize a latitude into [-90, 90], reflecting over the poles."""
    if -90 <= lat_deg <= 90:
        return lat_deg
    off = (lat_deg + 90) % 360
    return (off if off <= 180 else 360 - off) - 90


def calc_box_delta_lon_deg(lat: float, dist_deg: float) -> float:
    """
    Half-width in longitude of a circle's box at the circle's latitude.

    Uses the tangent point furthest east/west; 90 when the circle reaches
    far enough that no tangent exists.
    """
    if dist_deg == 0:
        return 0.0
    ratio = math.sin(math.radians(dist_deg)) / math.cos(math.radians(lat))
    if ratio > 1.0:
        return 90.0
    return math.degrees(math.asin(ratio))


def calc_box_by_dist_from_pt_deg(lat: float, lon: float, dist_deg: float) -> Rectangle:
    """
    Geodetic enclosing box for a point-radius circle.

    Args:
        lat: Center latitude
        lon: Center longitude
        dist_deg: Radius in degrees of arc

    Returns:
        Rectangle in (lon, lat) space. A box that would cross the
        antimeridian is widened to the full longitude range.
    """
    if dist_deg == 0:
        return Rectangle(lon, lon, lat, lat)

    if dist_deg >= 180:
        return Rectangle(-180, 180, -90, 90)

    max_y = lat + dist_deg
    min_y = lat - dist_deg

    if max_y >= 90 or min_y <= -90:
        # touches or passes a pole
        min_x, max_x = -180.0, 180.0
        if max_y <= 90 and min_y >= -90:
            min_x = norm_lon_deg(lon - 90)
            max_x = norm_lon_deg(lon + 90)
        max_y = min(max_y, 90.0)
        min_y = max(min_y, -90.0)
    else:
        lon_delta = calc_box_delta_lon_deg(lat, dist_deg)
        min_x = norm_lon_deg(lon - lon_delta)
        max_x = norm_lon_deg(lon + lon_delta)

    # TODO: represent dateline-crossing boxes once Rectangle allows min_x > max_x
    if min_x > max_x:
        min_x, max_x = -180.0, 180.0

    return Rectangle(min_x, max_x, min_y, max_y)
