import os

VERBOSE = os.getenv('VERBOSE') == '1'

# Member nodes/ways failing the tag filter are only extracted as geometry when enabled.
RESOLVE_MEMBERS = os.getenv('OSMF_RESOLVE_MEMBERS') == '1'

# Public instance list:
# https://wiki.openstreetmap.org/wiki/Overpass_API#Public_Overpass_API_instances
OVERPASS_API_INTERPRETER = os.getenv('OVERPASS_API_INTERPRETER', 'https://overpass-api.de/api/interpreter')
OVERPASS_TIMEOUT = int(os.getenv('OVERPASS_TIMEOUT', '180'))

USER_AGENT = os.getenv('USER_AGENT', 'osmf (+https://wiki.openstreetmap.org/wiki/Map_Features)')

OSM_URL = 'https://www.openstreetmap.org'

NANODEGREES = 1_000_000_000

METERS_PER_DEGREE_LAT = 111_000  # one degree is ca. 111km
EARTH_RADIUS_METERS = 6_367_000

# certain tags don't appear on all element types
NODE_ONLY_TAGS = ('capital', 'ele')
WAY_ONLY_TAGS = ('tracktype',)

AREA_RELATION_TYPES = ('multipolygon', 'boundary')
