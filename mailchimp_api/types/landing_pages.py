"""Landing pages."""

from datetime import datetime
from typing import List, Optional

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Link, Links


class LandingPageStatus(ApiEnum):
    published = 'published'
    unpublished = 'unpublished'
    draft = 'draft'
    noop = ''
    fallthrough_string = '*'


class LandingPageType(ApiEnum):
    signup = 'signup'
    product = 'product'
    noop = ''
    fallthrough_string = '*'


class SortLandingPagesField(ApiEnum):
    created_at = 'created_at'
    updated_at = 'updated_at'
    noop = ''
    fallthrough_string = '*'


@model
class LandingPageTracking:
    track_with_mailchimp: bool = False
    enable_restricted_data_processing: bool = False


@model
class LandingPage:
    """GET /landing-pages/{page_id}"""
    id: str = ''
    name: str = ''
    title: str = ''
    description: str = ''
    template_id: int = 0
    status: LandingPageStatus = LandingPageStatus.noop
    list_id: str = ''
    store_id: str = ''
    web_id: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    unpublished_at: Optional[datetime] = None
    url: str = ''
    tracking: Optional[LandingPageTracking] = None
    created_by_source: str = ''
    links: List[Link] = Links()


@model
class LandingPages:
    """GET /landing-pages"""
    landing_pages: List[LandingPage] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateLandingPage:
    """The body for POST /landing-pages and PATCH /landing-pages/{page_id}."""
    name: str = ''
    title: str = ''
    description: str = ''
    store_id: str = ''
    list_id: str = ''
    type_: LandingPageType = LandingPageType.noop
    template_id: int = 0
    tracking: Optional[LandingPageTracking] = None


@model
class LandingPageContent:
    """GET /landing-pages/{page_id}/content"""
    html: str = ''
    json: str = ''
    links: List[Link] = Links()
