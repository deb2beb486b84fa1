"""Campaigns, their content, feedback and send checklist, and campaign folders."""

from datetime import datetime
from typing import List, Optional, Dict, Any

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Link, Links, NonNegativeInt
from mailchimp_api.types.conditions import SegmentOptions


class CampaignType(ApiEnum):
    regular = 'regular'
    plaintext = 'plaintext'
    absplit = 'absplit'
    rss = 'rss'
    variate = 'variate'
    noop = ''
    fallthrough_string = '*'


class CampaignStatus(ApiEnum):
    save = 'save'
    paused = 'paused'
    schedule = 'schedule'
    sending = 'sending'
    sent = 'sent'
    canceled = 'canceled'
    canceling = 'canceling'
    archived = 'archived'
    noop = ''
    fallthrough_string = '*'


class GetCampaignsStatus(ApiEnum):
    """The `status` filter when listing campaigns."""
    save = 'save'
    paused = 'paused'
    schedule = 'schedule'
    sending = 'sending'
    sent = 'sent'
    noop = ''
    fallthrough_string = '*'


class SortField(ApiEnum):
    create_time = 'create_time'
    send_time = 'send_time'
    noop = ''
    fallthrough_string = '*'


class ContentType(ApiEnum):
    template = 'template'
    html = 'html'
    url = 'url'
    multichannel = 'multichannel'
    noop = ''
    fallthrough_string = '*'


class RssFrequency(ApiEnum):
    daily = 'daily'
    weekly = 'weekly'
    monthly = 'monthly'
    noop = ''
    fallthrough_string = '*'


class WinnerCriteria(ApiEnum):
    opens = 'opens'
    clicks = 'clicks'
    manual = 'manual'
    total_revenue = 'total_revenue'
    noop = ''
    fallthrough_string = '*'


class SplitTest(ApiEnum):
    subject = 'subject'
    from_name = 'from_name'
    schedule = 'schedule'
    noop = ''
    fallthrough_string = '*'


class PickWinner(ApiEnum):
    opens = 'opens'
    clicks = 'clicks'
    manual = 'manual'
    noop = ''
    fallthrough_string = '*'


class WaitUnits(ApiEnum):
    hours = 'hours'
    days = 'days'
    noop = ''
    fallthrough_string = '*'


class TestSendType(ApiEnum):
    html = 'html'
    plaintext = 'plaintext'
    noop = ''
    fallthrough_string = '*'


class ChecklistItemType(ApiEnum):
    success = 'success'
    warning = 'warning'
    error = 'error'
    noop = ''
    fallthrough_string = '*'


class FeedbackSource(ApiEnum):
    api = 'api'
    email = 'email'
    sms = 'sms'
    web = 'web'
    ios = 'ios'
    android = 'android'
    noop = ''
    fallthrough_string = '*'


@model
class Recipients:
    list_id: str = ''
    list_is_active: bool = False
    list_name: str = ''
    segment_text: str = ''
    recipient_count: int = 0
    segment_opts: Optional[SegmentOptions] = None


@model
class Settings:
    subject_line: str = ''
    preview_text: str = ''
    title: str = ''
    from_name: str = ''
    reply_to: str = ''
    use_conversation: bool = False
    to_name: str = ''
    folder_id: str = ''
    authenticate: bool = False
    auto_footer: bool = False
    inline_css: bool = False
    auto_tweet: bool = False
    auto_fb_post: List[str] = Factory(list)
    fb_comments: bool = False
    timewarp: bool = False
    template_id: int = 0
    drag_and_drop: bool = False


@model
class Combination:
    id: str = ''
    subject_line: int = 0
    send_time: int = 0
    from_name: int = 0
    reply_to: int = 0
    content_description: int = 0
    recipients: int = 0


@model
class VariateSettings:
    winning_combination_id: str = ''
    winning_campaign_id: str = ''
    winner_criteria: WinnerCriteria = WinnerCriteria.noop
    wait_time: int = 0
    test_size: int = 0
    subject_lines: List[str] = Factory(list)
    send_times: List[Optional[datetime]] = Factory(list)
    from_names: List[str] = Factory(list)
    reply_to_addresses: List[str] = Factory(list)
    contents: List[str] = Factory(list)
    combinations: List[Combination] = Factory(list)


@model
class Salesforce:
    campaign: bool = False
    notes: bool = False


@model
class Capsule:
    notes: bool = False


@model
class Tracking:
    opens: bool = False
    html_clicks: bool = False
    text_clicks: bool = False
    goal_tracking: bool = False
    ecomm360: bool = False
    google_analytics: str = ''
    clicktale: str = ''
    salesforce: Optional[Salesforce] = None
    capsule: Optional[Capsule] = None


@model
class DailySend:
    sunday: bool = False
    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False


@model
class RssSchedule:
    hour: int = 0
    daily_send: Optional[DailySend] = None
    weekly_send_day: str = ''
    monthly_send_date: float = 0.0


@model
class RssOpts:
    feed_url: str = ''
    frequency: RssFrequency = RssFrequency.noop
    schedule: Optional[RssSchedule] = None
    last_sent: Optional[datetime] = None
    constrain_rss_img: bool = False


@model
class AbSplitOpts:
    split_test: SplitTest = SplitTest.noop
    pick_winner: PickWinner = PickWinner.noop
    wait_units: WaitUnits = WaitUnits.noop
    wait_time: int = 0
    split_size: int = 0
    from_name_a: str = ''
    from_name_b: str = ''
    reply_email_a: str = ''
    reply_email_b: str = ''
    subject_a: str = ''
    subject_b: str = ''
    send_time_a: Optional[datetime] = None
    send_time_b: Optional[datetime] = None
    send_time_winner: str = ''


@model
class SocialCard:
    image_url: str = ''
    description: str = ''
    title: str = ''


@model
class Ecommerce:
    total_orders: int = 0
    total_spent: float = 0.0
    total_revenue: float = 0.0


@model
class ReportSummary:
    opens: int = 0
    unique_opens: int = 0
    open_rate: float = 0.0
    clicks: int = 0
    subscriber_clicks: int = 0
    click_rate: float = 0.0
    ecommerce: Optional[Ecommerce] = None


@model
class DeliveryStatus:
    enabled: bool = False
    can_cancel: bool = False
    status: str = ''
    emails_sent: int = 0
    emails_canceled: int = 0


@model
class Campaign:
    """A Mailchimp campaign, as returned by GET /campaigns/{campaign_id}."""
    id: str = ''
    web_id: int = 0
    parent_campaign_id: str = ''
    type_: CampaignType = CampaignType.noop
    create_time: Optional[datetime] = None
    archive_url: str = ''
    long_archive_url: str = ''
    status: CampaignStatus = CampaignStatus.noop
    emails_sent: int = 0
    send_time: Optional[datetime] = None
    content_type: ContentType = ContentType.noop
    needs_block_refresh: bool = False
    resendable: bool = False
    recipients: Optional[Recipients] = None
    settings: Optional[Settings] = None
    variate_settings: Optional[VariateSettings] = None
    tracking: Optional[Tracking] = None
    rss_opts: Optional[RssOpts] = None
    ab_split_opts: Optional[AbSplitOpts] = None
    social_card: Optional[SocialCard] = None
    report_summary: Optional[ReportSummary] = None
    delivery_status: Optional[DeliveryStatus] = None
    links: List[Link] = Links()


@model
class Campaigns:
    """GET /campaigns"""
    campaigns: List[Campaign] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateCampaign:
    """The body for POST /campaigns; only `type` is required."""
    type_: CampaignType
    recipients: Optional[Recipients] = None
    settings: Optional[Settings] = None
    variate_settings: Optional[VariateSettings] = None
    tracking: Optional[Tracking] = None
    rss_opts: Optional[RssOpts] = None
    social_card: Optional[SocialCard] = None
    content_type: ContentType = ContentType.noop


@model
class UpdateCampaign:
    """The body for PATCH /campaigns/{campaign_id}."""
    settings: Settings
    recipients: Optional[Recipients] = None
    variate_settings: Optional[VariateSettings] = None
    tracking: Optional[Tracking] = None
    rss_opts: Optional[RssOpts] = None
    social_card: Optional[SocialCard] = None


@model
class BatchDelivery:
    batch_delay: int = 0
    batch_count: int = 0


@model
class ScheduleCampaign:
    schedule_time: datetime
    timewarp: bool = False
    batch_delivery: Optional[BatchDelivery] = None


@model
class TestCampaign:
    test_emails: List[str]
    send_type: TestSendType


@model
class ResendCampaign:
    shortcut_type: str = ''


@model
class ContentVariation:
    content_label: str = ''
    plain_text: str = ''
    html: str = ''


@model
class CampaignContent:
    """GET /campaigns/{campaign_id}/content"""
    variate_contents: List[ContentVariation] = Factory(list)
    plain_text: str = ''
    html: str = ''
    archive_html: str = ''
    links: List[Link] = Links()


@model
class ContentTemplate:
    id: int = 0
    sections: Dict[str, Any] = Factory(dict)


@model
class ContentArchive:
    archive_content: str = ''
    archive_type: str = ''


@model
class SetCampaignContent:
    """The body for PUT /campaigns/{campaign_id}/content.

    Exactly one of `plain_text`, `html`, `url`, `template` or `archive`
    is expected, unless `variate_contents` is given.
    """
    plain_text: str = ''
    html: str = ''
    url: str = ''
    template: Optional[ContentTemplate] = None
    archive: Optional[ContentArchive] = None
    variate_contents: List[Dict[str, Any]] = Factory(list)


@model
class ChecklistItem:
    type_: ChecklistItemType = ChecklistItemType.noop
    id: int = 0
    heading: str = ''
    details: str = ''


@model
class SendChecklist:
    """GET /campaigns/{campaign_id}/send-checklist"""
    is_ready: bool = False
    items: List[ChecklistItem] = Factory(list)
    links: List[Link] = Links()


@model
class Feedback:
    feedback_id: int = 0
    parent_id: int = 0
    block_id: int = 0
    message: str = ''
    is_complete: bool = False
    created_by: str = ''
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    source: FeedbackSource = FeedbackSource.noop
    campaign_id: str = ''
    links: List[Link] = Links()


@model
class CampaignFeedback:
    """GET /campaigns/{campaign_id}/feedback"""
    feedback: List[Feedback] = Factory(list)
    campaign_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class AddFeedback:
    message: str
    block_id: int = 0
    is_complete: bool = False


@model
class UpdateFeedback:
    block_id: Optional[int] = None
    message: str = ''
    is_complete: Optional[bool] = None


@model
class CampaignFolder:
    id: str = ''
    name: str = ''
    count: int = NonNegativeInt()
    links: List[Link] = Links()


@model
class CampaignFolders:
    """GET /campaign-folders"""
    folders: List[CampaignFolder] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class GalleryFolder:
    """The body for creating or renaming a campaign or template folder."""
    name: str
