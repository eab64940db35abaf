from .common import *  # noqa
from .site_records import *  # noqa
