"""Pytest fixtures shared by the resolver tests."""
import pytest

from config import METERS_PER_DEGREE_LAT, NANODEGREES
from coordinate import Coordinate, meters_per_degree_lon
from entity import Node, Way
from entity_graph import EntityGraph


@pytest.fixture
def origin() -> Coordinate:
    """Berlin, Alexanderplatz area."""
    return Coordinate.from_degrees(52.52, 13.405)


@pytest.fixture
def offset(origin):
    """Coordinate `north` / `east` meters away from the origin."""
    def factory(north: float = 0, east: float = 0) -> Coordinate:
        dlat = round(north / METERS_PER_DEGREE_LAT * NANODEGREES)
        dlon = round(east / meters_per_degree_lon(origin.lat_degrees) * NANODEGREES)
        return Coordinate(origin.lat + dlat, origin.lon + dlon)

    return factory


@pytest.fixture
def graph() -> EntityGraph:
    return EntityGraph()


@pytest.fixture
def square(graph, offset):
    """Closed way `side` meters wide with its south-west corner `north` meters from the origin."""
    def factory(way_id: int, side: float, *, north: float = 0, first_node_id: int = 1000) -> Way:
        corners = [(0, 0), (0, side), (side, side), (side, 0)]
        node_ids = []

        for i, (n, e) in enumerate(corners):
            node = Node(element_id=first_node_id + i, coordinate=offset(north=north + n, east=e))
            graph.add(node, feature=False)
            node_ids.append(node.element_id)

        way = Way(element_id=way_id, tags={'building': 'yes'}, nodes=tuple(node_ids + node_ids[:1]))
        graph.add(way)
        return way

    return factory
