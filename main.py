import argparse
import sys
import time
from pathlib import Path
from typing import Iterable

from geopy import Point

from aggregator import Query, Result, find_nearby
from config import RESOLVE_MEMBERS, VERBOSE
from coordinate import Coordinate
from entity_graph import TYPE_ORDER
from overpass import Overpass, build_query
from render import format_results
from source import build_graph, load_elements
from tag_filter import parse_tag_filter
from utils import status

USAGE_EPILOG = 'Filters: way_area<<value> way_area><value> <tag>=<value> <tag>\n' \
               'Info about tags: https://wiki.openstreetmap.org/wiki/Map_Features'


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='osmf',
        description='Find OpenStreetMap features near a coordinate, ordered by distance.',
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-v', '--verbose', action='store_true', default=VERBOSE,
                        help='verbose mode; also output empty values')
    parser.add_argument('--input', type=Path, default=None,
                        help='read OSM JSON from this file instead of querying Overpass')
    parser.add_argument('--members', action='store_true', default=RESOLVE_MEMBERS,
                        help='also extract untagged members to resolve way and relation distances')
    parser.add_argument('lat', type=float)
    parser.add_argument('lon', type=float)
    parser.add_argument('radius', type=float, help='radius in meters')
    parser.add_argument('filters', nargs='*', help='way_area<N, way_area>N or tag=value')
    return parser


def parse_area(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f'Invalid way_area bound: {value!r}') from None


def parse_query(lat: float, lon: float, radius: float, filters: Iterable[str]) -> Query:
    # validates the coordinate ranges
    point = Point(lat, lon)

    if radius < 0:
        raise ValueError(f'Radius must not be negative: {radius}')

    min_area = None
    max_area = None
    tags = []

    for arg in filters:
        if arg.startswith('way_area>'):
            min_area = parse_area(arg[9:])
        elif arg.startswith('way_area<'):
            max_area = parse_area(arg[9:])
        else:
            tags.append(arg)

    return Query(
        origin=Coordinate.from_degrees(point.latitude, point.longitude),
        radius=radius,
        tag_filter=parse_tag_filter(tags),
        min_area=min_area,
        max_area=max_area,
    )


def fetch_elements(query: Query, *, input_path: Path | None, members: bool) -> list[dict]:
    if input_path is not None:
        status(f'📂 Reading {input_path}')
        return load_elements(input_path)

    overpass = Overpass()
    status(f'🔍 Querying {overpass.base_url}')
    return overpass.query_elements(build_query(
        query.bbox,
        query.tag_filter,
        skip=query.skip,
        members=members,
        timeout=overpass.timeout,
    ))


def run(query: Query, *, input_path: Path | None = None, members: bool = False) -> list[Result]:
    if all(t in query.skip for t in TYPE_ORDER):
        status('🤷 Filters exclude every element type')
        return []

    elements = fetch_elements(query, input_path=input_path, members=members)
    graph = build_graph(elements, query, members=members)
    status(f'🧮 Resolving {len(graph)} element{"" if len(graph) == 1 else "s"}…')

    return find_nearby(graph, query)


def main(argv: list[str] | None = None) -> None:
    time_start = time.perf_counter()
    args = get_parser().parse_args(argv)

    try:
        query = parse_query(args.lat, args.lon, args.radius, args.filters)
    except ValueError as e:
        sys.exit(f'Could not parse arguments: {e}')

    results = run(query, input_path=args.input, members=args.members)

    if results:
        print(format_results(results, verbose=args.verbose))

    status(f'📍 Found {len(results)} result{"" if len(results) == 1 else "s"}')
    status(f'🏁 Finished in {time.perf_counter() - time_start:.1F} sec')


if __name__ == '__main__':
    main()
