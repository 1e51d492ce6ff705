from typing import Iterable, Iterator

from aliases import ElementKey, ElementType
from config import AREA_RELATION_TYPES
from coordinate import Coordinate, planar_distance, project
from entity import Entity, Node
from entity_graph import EntityGraph


def _members(entity: Entity, graph: EntityGraph) -> Iterator[Entity]:
    refs: Iterable[tuple[ElementType, tuple[int, ...]]]

    match entity.element_type:
        case 'way':
            refs = (('node', entity.nodes),)
        case 'relation':
            refs = (('node', entity.nodes), ('way', entity.ways), ('relation', entity.relations))
        case _:
            refs = ()

    for element_type, ids in refs:
        for element_id in ids:
            # members outside the extracted data are unresolvable, not errors
            if (member := graph.get(element_type, element_id)) is not None:
                yield member


def resolve_distance(origin: Coordinate, entity: Entity, graph: EntityGraph,
                     visited: frozenset[ElementKey] = frozenset()) -> int | None:
    """
    Distance in meters from `origin` to the nearest resolvable node of `entity`.

    Ways and relations recurse into their members. `visited` holds the keys on
    the current recursion path; a revisited entity contributes nothing. Returns
    None when no member resolves.
    """
    if entity.key in visited:
        return None

    if entity.element_type == 'node':
        return planar_distance(origin, entity.coordinate)

    visited = visited | {entity.key}
    distances = (resolve_distance(origin, m, graph, visited) for m in _members(entity, graph))

    return min((d for d in distances if d is not None), default=None)


def iter_nodes(entity: Entity, graph: EntityGraph,
               visited: frozenset[ElementKey] = frozenset()) -> Iterator[Node]:
    if entity.key in visited:
        return

    if entity.element_type == 'node':
        yield entity
        return

    visited = visited | {entity.key}

    for member in _members(entity, graph):
        yield from iter_nodes(member, graph, visited)


def _ring_area(origin: Coordinate, ring: tuple[int, ...], graph: EntityGraph) -> float | None:
    points = []

    for node_id in ring:
        if (node := graph.get('node', node_id)) is None:
            return None

        points.append(project(origin, node.coordinate))

    # shoelace
    doubled = sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in zip(points, points[1:]))
    return abs(doubled) / 2


def assemble_rings(segments: Iterable[tuple[int, ...]]) -> list[tuple[int, ...]] | None:
    """
    Join node id sequences sharing endpoints into closed rings.

    Segments may be reversed relative to each other. Returns None when any
    segment is left dangling.
    """
    rings = []
    pending = []

    for segment in segments:
        if len(segment) >= 4 and segment[0] == segment[-1]:
            rings.append(segment)
        elif len(segment) >= 2:
            pending.append(segment)
        else:
            return None

    while pending:
        current = list(pending.pop(0))

        while current[0] != current[-1]:
            for i, segment in enumerate(pending):
                if segment[0] == current[-1]:
                    current.extend(segment[1:])
                elif segment[-1] == current[-1]:
                    current.extend(reversed(segment[:-1]))
                else:
                    continue

                del pending[i]
                break
            else:
                return None

        if len(current) < 4:
            return None

        rings.append(tuple(current))

    return rings


def _rings_area(origin: Coordinate, segments: list[tuple[int, ...]], graph: EntityGraph) -> float | None:
    if (rings := assemble_rings(segments)) is None:
        return None

    total = 0.0

    for ring in rings:
        if (area := _ring_area(origin, ring, graph)) is None:
            return None

        total += area

    return total


def entity_area(origin: Coordinate, entity: Entity, graph: EntityGraph) -> float | None:
    """
    Planar area in square meters of a closed way or a multipolygon relation.

    Relation member ways are joined into outer and inner rings first; a missing
    member or a ring that does not close makes the area unknown.
    """
    match entity.element_type:
        case 'way':
            if not entity.is_closed:
                return None

            return _ring_area(origin, entity.nodes, graph)

        case 'relation':
            if entity.tags.get('type') not in AREA_RELATION_TYPES:
                return None

            outer = []
            inner = []

            for way_id in entity.ways:
                if (way := graph.get('way', way_id)) is None:
                    return None

                (inner if way_id in entity.inner_ways else outer).append(way.nodes)

            if not outer:
                return None

            outer_area = _rings_area(origin, outer, graph)
            inner_area = _rings_area(origin, inner, graph)

            if outer_area is None or inner_area is None:
                return None

            return max(outer_area - inner_area, 0.0)

    return None
