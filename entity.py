from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from aliases import ElementKey, Tags
from coordinate import Coordinate


@dataclass(frozen=True, kw_only=True, slots=True)
class Node:
    element_type: Literal['node'] = field(default='node', init=False)
    element_id: int
    tags: Tags = field(default_factory=dict)
    coordinate: Coordinate

    @property
    def key(self) -> ElementKey:
        return self.element_type, self.element_id


@dataclass(frozen=True, kw_only=True, slots=True)
class Way:
    element_type: Literal['way'] = field(default='way', init=False)
    element_id: int
    tags: Tags = field(default_factory=dict)
    nodes: tuple[int, ...] = ()

    @property
    def key(self) -> ElementKey:
        return self.element_type, self.element_id

    @property
    def is_closed(self) -> bool:
        return len(self.nodes) >= 4 and self.nodes[0] == self.nodes[-1]


@dataclass(frozen=True, kw_only=True, slots=True)
class Relation:
    element_type: Literal['relation'] = field(default='relation', init=False)
    element_id: int
    tags: Tags = field(default_factory=dict)
    nodes: tuple[int, ...] = ()
    ways: tuple[int, ...] = ()
    relations: tuple[int, ...] = ()

    # member ways with the "inner" role, only relevant for area
    inner_ways: frozenset[int] = frozenset()

    @property
    def key(self) -> ElementKey:
        return self.element_type, self.element_id


Entity: TypeAlias = Node | Way | Relation


def parse_element(e: dict) -> Entity | None:
    """Build an entity from an OSM JSON element, None for other element types (count, area, ...)."""
    tags = e.get('tags', {})

    match e['type']:
        case 'node':
            return Node(
                element_id=int(e['id']),
                tags=tags,
                coordinate=Coordinate.from_degrees(e['lat'], e['lon']),
            )

        case 'way':
            return Way(
                element_id=int(e['id']),
                tags=tags,
                nodes=tuple(int(n) for n in e.get('nodes', [])),
            )

        case 'relation':
            members = {'node': [], 'way': [], 'relation': []}
            inner_ways = set()

            for m in e.get('members', []):
                if m['type'] not in members:
                    continue

                members[m['type']].append(int(m['ref']))

                if m['type'] == 'way' and m.get('role') == 'inner':
                    inner_ways.add(int(m['ref']))

            return Relation(
                element_id=int(e['id']),
                tags=tags,
                nodes=tuple(members['node']),
                ways=tuple(members['way']),
                relations=tuple(members['relation']),
                inner_ways=frozenset(inner_ways),
            )

    return None
