"""Classic automations, their emails and email queues."""

from datetime import datetime
from typing import List, Optional, Dict, Any

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Link, Links
from mailchimp_api.types.conditions import SegmentOptions
from mailchimp_api.types.campaigns import ReportSummary, SocialCard


class AutomationStatus(ApiEnum):
    save = 'save'
    paused = 'paused'
    sending = 'sending'
    noop = ''
    fallthrough_string = '*'


class AutomationEmailStatus(ApiEnum):
    save = 'save'
    paused = 'paused'
    sending = 'sending'
    noop = ''
    fallthrough_string = '*'


class DelayUnit(ApiEnum):
    day = 'day'
    hour = 'hour'
    week = 'week'
    noop = ''
    fallthrough_string = '*'


@model
class AutomationRecipients:
    list_id: str = ''
    list_is_active: bool = False
    list_name: str = ''
    segment_opts: Optional[SegmentOptions] = None
    store_id: str = ''


@model
class AutomationSettings:
    title: str = ''
    from_name: str = ''
    reply_to: str = ''
    use_conversation: bool = False
    to_name: str = ''
    authenticate: bool = False
    auto_footer: bool = False
    inline_css: bool = False


@model
class AutomationTracking:
    opens: bool = False
    html_clicks: bool = False
    text_clicks: bool = False
    goal_tracking: bool = False
    ecomm360: bool = False
    google_analytics: str = ''
    clicktale: str = ''


@model
class TriggerSettings:
    workflow_type: str = ''
    workflow_title: str = ''
    runtime: Dict[str, Any] = Factory(dict)
    workflow_emails_count: int = 0


@model
class Automation:
    """A classic automation workflow, GET /automations/{workflow_id}."""
    id: str = ''
    create_time: Optional[datetime] = None
    start_time: Optional[datetime] = None
    status: AutomationStatus = AutomationStatus.noop
    emails_sent: int = 0
    recipients: Optional[AutomationRecipients] = None
    settings: Optional[AutomationSettings] = None
    tracking: Optional[AutomationTracking] = None
    trigger_settings: Optional[TriggerSettings] = None
    report_summary: Optional[ReportSummary] = None
    links: List[Link] = Links()


@model
class Automations:
    """GET /automations"""
    automations: List[Automation] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateAutomationRecipients:
    list_id: str
    store_id: str


@model
class CreateAutomationSettings:
    from_name: str = ''
    reply_to: str = ''


@model
class CreateAutomation:
    """The body for POST /automations. Only "abandonedCart" workflows can be created."""
    recipients: CreateAutomationRecipients
    trigger_settings: TriggerSettings
    settings: Optional[CreateAutomationSettings] = None


@model
class Delay:
    amount: int = 0
    type_: str = ''
    direction: str = ''
    action: str = ''
    action_description: str = ''
    full_description: str = ''


@model
class AutomationEmailSettings:
    subject_line: str = ''
    preview_text: str = ''
    title: str = ''
    from_name: str = ''
    reply_to: str = ''
    authenticate: bool = False
    auto_footer: bool = False
    inline_css: bool = False
    auto_tweet: bool = False
    auto_fb_post: List[str] = Factory(list)
    fb_comments: bool = False
    template_id: int = 0
    drag_and_drop: bool = False


@model
class AutomationEmail:
    """GET /automations/{workflow_id}/emails/{workflow_email_id}"""
    id: str = ''
    web_id: int = 0
    workflow_id: str = ''
    position: int = 0
    delay: Optional[Delay] = None
    create_time: Optional[datetime] = None
    start_time: Optional[datetime] = None
    archive_url: str = ''
    status: AutomationEmailStatus = AutomationEmailStatus.noop
    emails_sent: int = 0
    send_time: Optional[datetime] = None
    content_type: str = ''
    needs_block_refresh: bool = False
    has_logo_merge_tag: bool = False
    recipients: Optional[AutomationRecipients] = None
    settings: Optional[AutomationEmailSettings] = None
    tracking: Optional[AutomationTracking] = None
    social_card: Optional[SocialCard] = None
    trigger_settings: Optional[TriggerSettings] = None
    report_summary: Optional[ReportSummary] = None
    links: List[Link] = Links()


@model
class AutomationEmails:
    """GET /automations/{workflow_id}/emails"""
    emails: List[AutomationEmail] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class UpdateDelay:
    amount: Optional[int] = None
    type_: DelayUnit = DelayUnit.noop
    direction: str = ''
    action: str = ''


@model
class UpdateAutomationEmail:
    """The body for PATCH /automations/{workflow_id}/emails/{workflow_email_id}."""
    settings: Optional[AutomationEmailSettings] = None
    delay: Optional[UpdateDelay] = None


@model
class QueuedSubscriber:
    id: str = ''
    workflow_id: str = ''
    email_id: str = ''
    list_id: str = ''
    list_is_active: bool = False
    email_address: str = ''
    next_send: Optional[datetime] = None
    links: List[Link] = Links()


@model
class AutomationQueue:
    """GET /automations/{workflow_id}/emails/{workflow_email_id}/queue"""
    workflow_id: str = ''
    email_id: str = ''
    queue: List[QueuedSubscriber] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class SubscriberInAutomation:
    """The body for adding a subscriber to a queue, or removing one from a workflow."""
    email_address: str


@model
class RemovedSubscriber:
    id: str = ''
    workflow_id: str = ''
    list_id: str = ''
    email_address: str = ''
    links: List[Link] = Links()


@model
class RemovedSubscribers:
    """GET /automations/{workflow_id}/removed-subscribers"""
    workflow_id: str = ''
    subscribers: List[RemovedSubscriber] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()
