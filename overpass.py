from tenacity import retry, stop_after_attempt, wait_exponential

from aliases import ElementType, TagFilter
from bbox import BoundingBox
from config import OVERPASS_API_INTERPRETER, OVERPASS_TIMEOUT
from entity_graph import TYPE_ORDER
from utils import escape_overpass, escape_overpass_regex, get_http_client


def build_selector(tag_filter: TagFilter) -> str:
    result = ''

    for key, values in tag_filter.items():
        key = escape_overpass(key)

        if values:
            regex = '|'.join(escape_overpass_regex(v) for v in values)
            result += f'["{key}"~"{regex}",i]'
        else:
            result += f'["{key}"]'

    return result


def build_query(bbox: BoundingBox, tag_filter: TagFilter, *,
                skip: frozenset[ElementType] = frozenset(), members: bool = False, timeout: int) -> str:
    selector = build_selector(tag_filter)
    area = f'({bbox.to_overpass()})'
    body = ''.join(f'{t}{selector}{area};' for t in TYPE_ORDER if t not in skip)

    query = f'[out:json][timeout:{timeout}];' \
            f'({body});' \
            f'out body;'

    if members:
        query += '>;' \
                 'out skel qt;'

    return query


class Overpass:
    def __init__(self, base_url: str = OVERPASS_API_INTERPRETER, timeout: int = OVERPASS_TIMEOUT):
        self.base_url = base_url
        self.timeout = timeout
        self.c = get_http_client(timeout=timeout * 2)

    @retry(stop=stop_after_attempt(5), wait=wait_exponential(), reraise=True)
    def query_elements(self, query: str) -> list[dict]:
        r = self.c.post(self.base_url, data={'data': query})
        r.raise_for_status()

        return r.json()['elements']
