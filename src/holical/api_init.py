"""Registry bootstrap (import side-effect)."""
from .api import set_registries
from .bootstrap import build_calendars, build_regions

set_registries(build_regions(), build_calendars())
