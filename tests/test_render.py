from aggregator import Result
from coordinate import Coordinate
from entity import Node, Relation, Way
from render import format_result, format_results, osm_link


def test_osm_link_uses_absolute_id():
    assert osm_link('node', 42) == 'https://www.openstreetmap.org/node/42'
    assert osm_link('relation', -62422) == 'https://www.openstreetmap.org/relation/62422'


def test_format_node():
    node = Node(element_id=42, tags={'name': 'Kaffee', 'amenity': 'cafe', 'note': ''}, coordinate=Coordinate(0, 0))

    assert format_result(Result(entity=node, distance=120)) == \
        'meta:type: node\n' \
        'meta:id: 42\n' \
        'meta:distance: 120\n' \
        'meta:link: https://www.openstreetmap.org/node/42\n' \
        'amenity: cafe\n' \
        'name: Kaffee'


def test_verbose_keeps_empty_values():
    node = Node(element_id=1, tags={'note': ''}, coordinate=Coordinate(0, 0))

    assert format_result(Result(entity=node, distance=1), verbose=True).endswith('\nnote: ')


def test_unknown_distance_and_area():
    way = Way(element_id=7, tags={'building': 'yes'})
    text = format_result(Result(entity=way, distance=None, area=1234.5))

    assert 'meta:distance: unknown\n' in text
    assert 'meta:area: 1234.500000\n' in text


def test_records_separated_by_blank_line():
    results = [
        Result(entity=Relation(element_id=-1), distance=5),
        Result(entity=Relation(element_id=2), distance=6),
    ]

    assert format_results(results) == \
        'meta:type: relation\nmeta:id: -1\nmeta:distance: 5\nmeta:link: https://www.openstreetmap.org/relation/1\n\n' \
        'meta:type: relation\nmeta:id: 2\nmeta:distance: 6\nmeta:link: https://www.openstreetmap.org/relation/2'
