"""
The endpoints of the API, grouped by area. Use them through the client:
`client.campaigns.get(...)`, `client.lists.add_member(...)` and so on.
"""

from .base import Resource, subscriber_hash
from .root import Root, Ping, ActivityFeed, AuthorizedApps
from .automations import Automations
from .batches import Batches, BatchWebhooks
from .campaigns import Campaigns, CampaignFolders
from .connected_sites import ConnectedSites
from .conversations import Conversations
from .ecommerce import Ecommerce
from .file_manager import FileManager
from .landing_pages import LandingPages
from .lists import Lists
from .reports import Reports
from .search import SearchCampaigns, SearchMembers
from .templates import Templates, TemplateFolders
from .verified_domains import VerifiedDomains
