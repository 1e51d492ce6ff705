from typing import Iterable

from aggregator import Result
from config import OSM_URL


def osm_link(element_type: str, element_id: int) -> str:
    # relation ids may be negative in some source numbering conventions
    return f'{OSM_URL}/{element_type}/{abs(element_id)}'


def format_result(result: Result, *, verbose: bool = False) -> str:
    entity = result.entity
    distance = 'unknown' if result.distance is None else str(result.distance)

    lines = [
        f'meta:type: {entity.element_type}',
        f'meta:id: {entity.element_id}',
        f'meta:distance: {distance}',
    ]

    if result.area is not None:
        lines.append(f'meta:area: {result.area:f}')

    lines.append(f'meta:link: {osm_link(entity.element_type, entity.element_id)}')

    for key, value in sorted(entity.tags.items()):
        if value or verbose:
            lines.append(f'{key}: {value}')

    return '\n'.join(lines)


def format_results(results: Iterable[Result], *, verbose: bool = False) -> str:
    return '\n\n'.join(format_result(r, verbose=verbose) for r in results)
