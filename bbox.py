from dataclasses import dataclass
from math import ceil

from cachetools import LRUCache, cached
from cachetools.keys import hashkey

from config import METERS_PER_DEGREE_LAT, NANODEGREES
from coordinate import Coordinate, meters_per_degree_lon


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Rectangle around `center`, half-extents in nanodegrees."""

    center: Coordinate
    radius_lat: int
    radius_lon: int

    @property
    def south(self) -> int:
        return self.center.lat - self.radius_lat

    @property
    def north(self) -> int:
        return self.center.lat + self.radius_lat

    @property
    def west(self) -> int:
        return self.center.lon - self.radius_lon

    @property
    def east(self) -> int:
        return self.center.lon + self.radius_lon

    def contains(self, coord: Coordinate) -> bool:
        return self.south <= coord.lat <= self.north and self.west <= coord.lon <= self.east

    def to_overpass(self) -> str:
        return ','.join(f'{v / NANODEGREES:.9f}' for v in (self.south, self.west, self.north, self.east))


@cached(cache=LRUCache(maxsize=256), key=lambda center, radius: hashkey(center.lat, center.lon, radius))
def bounding_box(center: Coordinate, radius: float) -> BoundingBox:
    # round outwards so the rectangle always covers the radius disc
    radius_lat = ceil(radius / METERS_PER_DEGREE_LAT * NANODEGREES)
    radius_lon = ceil(radius / meters_per_degree_lon(center.lat_degrees) * NANODEGREES)

    return BoundingBox(center=center, radius_lat=radius_lat, radius_lon=radius_lon)
