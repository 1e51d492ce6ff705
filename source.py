import json
from pathlib import Path
from typing import Iterable

from aggregator import Query
from entity import parse_element
from entity_graph import EntityGraph
from tag_filter import matches


def load_elements(path: Path) -> list[dict]:
    with open(path) as f:
        data = json.load(f)

    # overpass [out:json] response or a bare element list
    if isinstance(data, dict):
        data = data['elements']

    assert isinstance(data, list), 'Expected a list of OSM elements'
    return data


def build_graph(elements: Iterable[dict], query: Query, *, members: bool) -> EntityGraph:
    """
    Build the entity graph the resolver works on.

    Elements of a non-skipped type that match the tag filter and touch the
    query rectangle become features. Everything else is kept as member-only
    geometry when `members` is set, and dropped otherwise.
    """
    # every element is needed to decide which ways and relations touch the rectangle
    everything = EntityGraph()
    entities = []

    for entity in (parse_element(d) for d in elements):
        # overpass repeats recursed members as tagless skeletons after the full copy
        if entity is None or entity.key in everything:
            continue

        everything.add(entity)
        entities.append(entity)

    graph = EntityGraph()
    skip = query.skip

    for entity in entities:
        is_feature = \
            entity.element_type not in skip and \
            matches(entity.tags, query.tag_filter) and \
            query.is_admitted(entity, everything)

        if is_feature:
            graph.add(entity)
        elif members:
            graph.add(entity, feature=False)

    return graph
