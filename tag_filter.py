from typing import Iterable

from aliases import ElementType, TagFilter, Tags
from config import NODE_ONLY_TAGS, WAY_ONLY_TAGS


def matches(tags: Tags, tag_filter: TagFilter) -> bool:
    for key, values in tag_filter.items():
        if (value := tags.get(key)) is None:
            return False

        if values:
            value = value.lower()

            if not any(v.lower() in value for v in values):
                return False

    return True


def parse_tag_filter(args: Iterable[str]) -> TagFilter:
    """
    Parse ``tag=value`` arguments into a tag filter.

    Repeating a tag accepts any of its values; ``tag=`` or a bare ``tag``
    only requires the tag to be present.
    """
    result: dict[str, list[str]] = {}

    for arg in args:
        key, _, value = arg.partition('=')
        key = key.strip()

        if not key:
            raise ValueError(f'Tag without name: {arg!r}')

        values = result.setdefault(key, [])

        if value:
            values.append(value)

    return {k: tuple(v) for k, v in result.items()}


def skipped_types(tag_filter: TagFilter, *, area_filter: bool = False) -> frozenset[ElementType]:
    skip = set()

    if any(t in tag_filter for t in WAY_ONLY_TAGS):
        skip.add('node')

    if any(t in tag_filter for t in NODE_ONLY_TAGS):
        skip.update(('way', 'relation'))

    # points have no area
    if area_filter:
        skip.add('node')

    return frozenset(skip)
