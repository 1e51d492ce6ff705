from dataclasses import dataclass, field

from aliases import ElementType, TagFilter
from bbox import BoundingBox, bounding_box
from coordinate import Coordinate
from entity import Entity
from entity_graph import EntityGraph
from resolver import entity_area, iter_nodes, resolve_distance
from tag_filter import matches, skipped_types


@dataclass(frozen=True, kw_only=True, slots=True)
class Query:
    origin: Coordinate
    radius: float
    tag_filter: TagFilter = field(default_factory=dict)
    min_area: float | None = None
    max_area: float | None = None

    @property
    def bbox(self) -> BoundingBox:
        return bounding_box(self.origin, self.radius)

    @property
    def has_area_filter(self) -> bool:
        return self.min_area is not None or self.max_area is not None

    @property
    def skip(self) -> frozenset[ElementType]:
        return skipped_types(self.tag_filter, area_filter=self.has_area_filter)

    def is_admitted(self, entity: Entity, graph: EntityGraph) -> bool:
        bbox = self.bbox
        return any(bbox.contains(n.coordinate) for n in iter_nodes(entity, graph))

    def is_area_accepted(self, area: float | None) -> bool:
        if not self.has_area_filter:
            return True

        if area is None:
            return False

        if self.min_area is not None and area <= self.min_area:
            return False

        if self.max_area is not None and area >= self.max_area:
            return False

        return True


@dataclass(frozen=True, kw_only=True, slots=True)
class Result:
    entity: Entity
    distance: int | None
    area: float | None = None


def find_nearby(graph: EntityGraph, query: Query) -> list[Result]:
    result = []
    skip = query.skip

    for entity in graph.features():
        if entity.element_type in skip:
            continue

        if not matches(entity.tags, query.tag_filter):
            continue

        if not query.is_admitted(entity, graph):
            continue

        distance = resolve_distance(query.origin, entity, graph)

        # unknown distances can't be confirmed inside the radius
        if distance is None or distance > query.radius:
            continue

        area = None

        if query.has_area_filter:
            area = entity_area(query.origin, entity, graph)

            if not query.is_area_accepted(area):
                continue

        result.append(Result(entity=entity, distance=distance, area=area))

    # stable, equal distances keep the type-then-id order of features()
    result.sort(key=lambda r: r.distance)

    return result
