"""Tests for element parsing and the entity arena."""
from coordinate import Coordinate
from entity import Node, Relation, Way, parse_element
from entity_graph import EntityGraph


def test_parse_node():
    node = parse_element({'type': 'node', 'id': 1, 'lat': 52.5, 'lon': 13.25, 'tags': {'amenity': 'cafe'}})

    assert node == Node(element_id=1, tags={'amenity': 'cafe'}, coordinate=Coordinate(52_500_000_000, 13_250_000_000))
    assert node.key == ('node', 1)


def test_parse_way_without_tags():
    way = parse_element({'type': 'way', 'id': 7, 'nodes': [1, 2, 3]})

    assert isinstance(way, Way)
    assert way.tags == {}
    assert way.nodes == (1, 2, 3)
    assert not way.is_closed


def test_parse_relation_members():
    relation = parse_element({
        'type': 'relation',
        'id': 9,
        'tags': {'type': 'multipolygon'},
        'members': [
            {'type': 'way', 'ref': 10, 'role': 'outer'},
            {'type': 'way', 'ref': 11, 'role': 'inner'},
            {'type': 'node', 'ref': 1, 'role': 'admin_centre'},
            {'type': 'relation', 'ref': 9, 'role': ''},
        ],
    })

    assert relation == Relation(
        element_id=9,
        tags={'type': 'multipolygon'},
        nodes=(1,),
        ways=(10, 11),
        relations=(9,),
        inner_ways=frozenset({11}),
    )


def test_parse_other_element_types():
    assert parse_element({'type': 'count', 'id': 0, 'tags': {'total': '3'}}) is None
    assert parse_element({'type': 'area', 'id': 3600062422}) is None


def test_closed_way():
    assert Way(element_id=1, nodes=(1, 2, 3, 1)).is_closed
    assert not Way(element_id=1, nodes=(1, 2, 1)).is_closed
    assert not Way(element_id=1).is_closed


def test_lookup():
    graph = EntityGraph()
    node = Node(element_id=5, coordinate=Coordinate(0, 0))
    graph.add(node)

    assert graph.get('node', 5) is node
    assert graph.get('node', 6) is None
    assert graph.get('way', 5) is None
    assert ('node', 5) in graph
    assert ('relation', 5) not in graph
    assert len(graph) == 1


def test_features_order_and_member_only():
    graph = EntityGraph()
    graph.add(Relation(element_id=-3))
    graph.add(Way(element_id=2))
    graph.add(Node(element_id=9, coordinate=Coordinate(0, 0)))
    graph.add(Node(element_id=4, coordinate=Coordinate(0, 0)))
    graph.add(Node(element_id=1, coordinate=Coordinate(0, 0)), feature=False)

    assert [e.key for e in graph.features()] == [('node', 4), ('node', 9), ('way', 2), ('relation', -3)]
    assert len(list(graph.nodes())) == 3
    assert len(list(graph.ways())) == 1
    assert len(list(graph.relations())) == 1


def test_member_only_copy_does_not_replace_feature():
    graph = EntityGraph()
    tagged = Node(element_id=1, tags={'amenity': 'cafe'}, coordinate=Coordinate(0, 0))
    graph.add(tagged)
    graph.add(Node(element_id=1, coordinate=Coordinate(0, 0)), feature=False)

    assert graph.get('node', 1) is tagged
    assert graph.is_feature(tagged)
