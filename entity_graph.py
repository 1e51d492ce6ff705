from typing import Iterator

from aliases import ElementKey, ElementType
from entity import Entity, Node, Relation, Way

TYPE_ORDER: tuple[ElementType, ...] = ('node', 'way', 'relation')


class EntityGraph:
    """
    Arena of nodes, ways and relations keyed by (type, id).

    Membership is expressed by ids only and resolved with `get` during
    traversal. Entities added with ``feature=False`` provide geometry for
    resolution but are never reported.
    """

    def __init__(self):
        self._entities: dict[ElementType, dict[int, Entity]] = {t: {} for t in TYPE_ORDER}
        self._features: set[ElementKey] = set()

    def add(self, entity: Entity, *, feature: bool = True) -> None:
        # never replace an entity with its member-only (possibly tagless) copy
        if not feature and entity.key in self:
            return

        self._entities[entity.element_type][entity.element_id] = entity

        if feature:
            self._features.add(entity.key)

    def get(self, element_type: ElementType, element_id: int) -> Entity | None:
        return self._entities[element_type].get(element_id)

    def is_feature(self, entity: Entity) -> bool:
        return entity.key in self._features

    def __contains__(self, key: ElementKey) -> bool:
        element_type, element_id = key
        return element_id in self._entities[element_type]

    def __len__(self) -> int:
        return sum(len(v) for v in self._entities.values())

    def nodes(self) -> Iterator[Node]:
        yield from self._entities['node'].values()

    def ways(self) -> Iterator[Way]:
        yield from self._entities['way'].values()

    def relations(self) -> Iterator[Relation]:
        yield from self._entities['relation'].values()

    def features(self) -> Iterator[Entity]:
        for element_type in TYPE_ORDER:
            entities = self._entities[element_type]

            for element_id in sorted(entities):
                if (element_type, element_id) in self._features:
                    yield entities[element_id]
