"""Search results for campaigns and members."""

from typing import List, Optional

from mailchimp_api.models import model, Factory
from mailchimp_api.types.common import Link, Links
from mailchimp_api.types.campaigns import Campaign
from mailchimp_api.types.lists import Member


@model
class CampaignSearchResult:
    campaign: Optional[Campaign] = None
    snippet: str = ''


@model
class CampaignSearchResults:
    """GET /search-campaigns"""
    results: List[CampaignSearchResult] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class MemberMatches:
    members: List[Member] = Factory(list)
    total_items: int = 0


@model
class MemberSearchResults:
    """GET /search-members

    `exact_matches` are members whose email address equals the query,
    `full_search` everything else that matched.
    """
    exact_matches: Optional[MemberMatches] = None
    full_search: Optional[MemberMatches] = None
    links: List[Link] = Links()
