"""The API root, ping and the activity feed."""

from datetime import datetime
from typing import List, Optional

from mailchimp_api.models import model, Factory
from mailchimp_api.types.common import Link, Links


@model
class ApiHealthStatus:
    """GET /ping"""
    health_status: str = ''


@model
class ApiRootContact:
    company: str = ''
    addr1: str = ''
    addr2: str = ''
    city: str = ''
    state: str = ''
    zip: str = ''
    country: str = ''


@model
class AccountIndustryStats:
    type_: str = ''
    open_rate: float = 0.0
    bounce_rate: float = 0.0
    click_rate: float = 0.0


@model
class ApiRoot:
    """GET / - details about the Mailchimp user account."""
    account_id: str = ''
    login_id: str = ''
    account_name: str = ''
    email: str = ''
    first_name: str = ''
    last_name: str = ''
    username: str = ''
    avatar_url: str = ''
    role: str = ''
    member_since: Optional[datetime] = None
    pricing_plan_type: str = ''
    first_payment: Optional[datetime] = None
    account_timezone: str = ''
    account_industry: str = ''
    contact: Optional[ApiRootContact] = None
    pro_enabled: bool = False
    last_login: Optional[datetime] = None
    total_subscribers: int = 0
    industry_stats: Optional[AccountIndustryStats] = None
    links: List[Link] = Links()


@model
class ChimpChatter:
    title: str = ''
    message: str = ''
    type_: str = ''
    update_time: Optional[datetime] = None
    url: str = ''
    list_id: str = ''
    campaign_id: str = ''


@model
class ChimpChatterFeed:
    """GET /activity-feed/chimp-chatter"""
    chimp_chatter: List[ChimpChatter] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()
