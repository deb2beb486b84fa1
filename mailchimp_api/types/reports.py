"""Campaign reports."""

from datetime import datetime
from typing import List, Optional, Dict, Any

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Link, Links, MergeFields
from mailchimp_api.types.campaigns import CampaignType, DeliveryStatus


class AdviceType(ApiEnum):
    negative = 'negative'
    positive = 'positive'
    neutral = 'neutral'
    noop = ''
    fallthrough_string = '*'


class SentStatus(ApiEnum):
    sent = 'sent'
    hard = 'hard'
    soft = 'soft'
    noop = ''
    fallthrough_string = '*'


@model
class Bounces:
    hard_bounces: int = 0
    soft_bounces: int = 0
    syntax_errors: int = 0


@model
class Forwards:
    forwards_count: int = 0
    forwards_opens: int = 0


@model
class Opens:
    opens_total: int = 0
    unique_opens: int = 0
    open_rate: float = 0.0
    last_open: Optional[datetime] = None


@model
class Clicks:
    clicks_total: int = 0
    unique_clicks: int = 0
    unique_subscriber_clicks: int = 0
    click_rate: float = 0.0
    last_click: Optional[datetime] = None


@model
class FacebookLikes:
    recipient_likes: int = 0
    unique_likes: int = 0
    facebook_likes: int = 0


@model
class IndustryStats:
    type_: str = ''
    open_rate: float = 0.0
    click_rate: float = 0.0
    bounce_rate: float = 0.0
    unopen_rate: float = 0.0
    unsub_rate: float = 0.0
    abuse_rate: float = 0.0


@model
class ReportListStats:
    sub_rate: float = 0.0
    unsub_rate: float = 0.0
    open_rate: float = 0.0
    click_rate: float = 0.0


@model
class TimeseriesPoint:
    timestamp: Optional[datetime] = None
    emails_sent: int = 0
    unique_opens: int = 0
    recipients_clicks: int = 0


@model
class ReportEcommerce:
    total_orders: int = 0
    total_spent: float = 0.0
    total_revenue: float = 0.0
    currency_code: str = ''


@model
class Report:
    """GET /reports/{campaign_id}"""
    id: str = ''
    campaign_title: str = ''
    type_: CampaignType = CampaignType.noop
    list_id: str = ''
    list_is_active: bool = False
    list_name: str = ''
    subject_line: str = ''
    preview_text: str = ''
    emails_sent: int = 0
    abuse_reports: int = 0
    unsubscribed: int = 0
    send_time: Optional[datetime] = None
    rss_last_send: Optional[datetime] = None
    bounces: Optional[Bounces] = None
    forwards: Optional[Forwards] = None
    opens: Optional[Opens] = None
    clicks: Optional[Clicks] = None
    facebook_likes: Optional[FacebookLikes] = None
    industry_stats: Optional[IndustryStats] = None
    list_stats: Optional[ReportListStats] = None
    # A/B split and multivariate results differ too much to model.
    ab_split: Dict[str, Any] = Factory(dict)
    timewarp: List[Dict[str, Any]] = Factory(list)
    timeseries: List[TimeseriesPoint] = Factory(list)
    share_report: Dict[str, Any] = Factory(dict)
    ecommerce: Optional[ReportEcommerce] = None
    delivery_status: Optional[DeliveryStatus] = None
    links: List[Link] = Links()


@model
class Reports:
    """GET /reports"""
    reports: List[Report] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class AbuseReport:
    id: int = 0
    campaign_id: str = ''
    list_id: str = ''
    email_id: str = ''
    email_address: str = ''
    merge_fields: MergeFields = Factory(dict)
    vip: bool = False
    date: Optional[datetime] = None
    links: List[Link] = Links()


@model
class AbuseReports:
    """GET /reports/{campaign_id}/abuse-reports"""
    abuse_reports: List[AbuseReport] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class Advice:
    type_: AdviceType = AdviceType.noop
    message: str = ''


@model
class CampaignAdvice:
    """GET /reports/{campaign_id}/advice"""
    advice: List[Advice] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class ABSplitClicks:
    click_percentage_a: float = 0.0
    click_percentage_b: float = 0.0
    total_clicks_a: int = 0
    total_clicks_b: int = 0
    unique_clicks_a: int = 0
    unique_clicks_b: int = 0


@model
class UrlClicked:
    id: str = ''
    url: str = ''
    total_clicks: int = 0
    click_percentage: float = 0.0
    unique_clicks: int = 0
    unique_click_percentage: float = 0.0
    last_click: Optional[datetime] = None
    ab_split: Optional[Dict[str, ABSplitClicks]] = None
    campaign_id: str = ''
    links: List[Link] = Links()


@model
class ClickDetails:
    """GET /reports/{campaign_id}/click-details"""
    urls_clicked: List[UrlClicked] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class OpenActivity:
    timestamp: Optional[datetime] = None


@model
class OpenedMember:
    campaign_id: str = ''
    list_id: str = ''
    list_is_active: bool = False
    contact_status: str = ''
    email_id: str = ''
    email_address: str = ''
    merge_fields: MergeFields = Factory(dict)
    vip: bool = False
    opens_count: int = 0
    opens: List[OpenActivity] = Factory(list)
    links: List[Link] = Links()


@model
class OpenDetails:
    """GET /reports/{campaign_id}/open-details"""
    members: List[OpenedMember] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    total_opens: int = 0
    links: List[Link] = Links()


@model
class DomainStats:
    domain: str = ''
    emails_sent: int = 0
    bounces: int = 0
    opens: int = 0
    clicks: int = 0
    unsubs: int = 0
    delivered: int = 0
    emails_pct: float = 0.0
    bounces_pct: float = 0.0
    opens_pct: float = 0.0
    clicks_pct: float = 0.0
    unsubs_pct: float = 0.0


@model
class DomainPerformance:
    """GET /reports/{campaign_id}/domain-performance"""
    domains: List[DomainStats] = Factory(list)
    total_sent: int = 0
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class EepurlClicks:
    clicks: int = 0
    first_click: Optional[datetime] = None
    last_click: Optional[datetime] = None
    locations: List[Dict[str, Any]] = Factory(list)


@model
class EepurlActivity:
    """GET /reports/{campaign_id}/eepurl"""
    twitter: Dict[str, Any] = Factory(dict)
    clicks: Optional[EepurlClicks] = None
    referrers: List[Dict[str, Any]] = Factory(list)
    eepurl: str = ''
    campaign_id: str = ''
    links: List[Link] = Links()


@model
class EmailAction:
    action: str = ''
    type_: str = ''
    timestamp: Optional[datetime] = None
    url: str = ''
    ip: str = ''


@model
class MemberEmailActivity:
    campaign_id: str = ''
    list_id: str = ''
    list_is_active: bool = False
    email_id: str = ''
    email_address: str = ''
    activity: List[EmailAction] = Factory(list)
    links: List[Link] = Links()


@model
class EmailActivity:
    """GET /reports/{campaign_id}/email-activity"""
    emails: List[MemberEmailActivity] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class OpenLocation:
    country_code: str = ''
    region: str = ''
    region_name: str = ''
    opens: int = 0


@model
class OpenLocations:
    """GET /reports/{campaign_id}/locations"""
    locations: List[OpenLocation] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class SentToRecipient:
    email_id: str = ''
    email_address: str = ''
    merge_fields: MergeFields = Factory(dict)
    vip: bool = False
    status: SentStatus = SentStatus.noop
    open_count: int = 0
    last_open: Optional[datetime] = None
    absplit_group: str = ''
    gmt_offset: int = 0
    campaign_id: str = ''
    list_id: str = ''
    list_is_active: bool = False
    links: List[Link] = Links()


@model
class SentTo:
    """GET /reports/{campaign_id}/sent-to"""
    sent_to: List[SentToRecipient] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class SubReports:
    """GET /reports/{campaign_id}/sub-reports"""
    reports: List[Report] = Factory(list)
    parent_campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class Unsubscribe:
    email_id: str = ''
    email_address: str = ''
    merge_fields: MergeFields = Factory(dict)
    vip: bool = False
    timestamp: Optional[datetime] = None
    reason: str = ''
    campaign_id: str = ''
    list_id: str = ''
    list_is_active: bool = False
    links: List[Link] = Links()


@model
class Unsubscribes:
    """GET /reports/{campaign_id}/unsubscribed"""
    unsubscribes: List[Unsubscribe] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()
