from dataclasses import dataclass
from math import cos, hypot, pi, radians

from config import EARTH_RADIUS_METERS, METERS_PER_DEGREE_LAT, NANODEGREES


def to_nanodegrees(value: float) -> int:
    return int(value * NANODEGREES)


def meters_per_degree_lon(lat: float) -> float:
    return EARTH_RADIUS_METERS * cos(radians(lat)) * pi / 180


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Latitude/longitude pair in nanodegrees."""

    lat: int
    lon: int

    @classmethod
    def from_degrees(cls, lat: float, lon: float) -> 'Coordinate':
        return cls(to_nanodegrees(lat), to_nanodegrees(lon))

    @property
    def lat_degrees(self) -> float:
        return self.lat / NANODEGREES

    @property
    def lon_degrees(self) -> float:
        return self.lon / NANODEGREES


def project(origin: Coordinate, point: Coordinate) -> tuple[float, float]:
    """
    Equirectangular projection of `point` around `origin`, as (x, y) in meters.

    The longitude scale is taken at the origin's latitude, which is good enough
    for radii of some tens of kilometers.
    """
    y = (point.lat - origin.lat) / NANODEGREES * METERS_PER_DEGREE_LAT
    x = (point.lon - origin.lon) / NANODEGREES * meters_per_degree_lon(origin.lat_degrees)
    return x, y


def planar_distance(origin: Coordinate, point: Coordinate) -> int:
    return round(hypot(*project(origin, point)))
