"""
The Mailchimp Marketing API data types, one module per area of the API.

Everything is re-exported here, so `from mailchimp_api.types import Campaign`
works.
"""

from .common import *
from .root import *
from .oauth import *
from .authorized_apps import *
from .conditions import *
from .campaigns import *
from .lists import *
from .automations import *
from .batches import *
from .reports import *
from .templates import *
from .file_manager import *
from .landing_pages import *
from .conversations import *
from .connected_sites import *
from .verified_domains import *
from .ecommerce import *
from .search import *
