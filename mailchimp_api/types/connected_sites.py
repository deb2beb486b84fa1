"""Connected sites (websites running the Mailchimp tracking script)."""

from datetime import datetime
from typing import List, Optional

from mailchimp_api.models import model, Factory
from mailchimp_api.types.common import Link, Links


@model
class SiteScript:
    url: str = ''
    fragment: str = ''


@model
class ConnectedSite:
    """GET /connected-sites/{connected_site_id}"""
    foreign_id: str = ''
    store_id: str = ''
    platform: str = ''
    domain: str = ''
    site_script: Optional[SiteScript] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    links: List[Link] = Links()


@model
class ConnectedSites:
    """GET /connected-sites"""
    sites: List[ConnectedSite] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateConnectedSite:
    foreign_id: str
    domain: str
