"""
Lists (audiences) and everything hanging off them: members, tags, notes,
events, segments, merge fields, interest categories, webhooks, activity,
growth history, signup forms and locations.
"""

from datetime import datetime
from typing import List, Optional, Dict

from mailchimp_api.models import model, attrib, ApiEnum, Factory
from mailchimp_api.types.common import Link, Links, Location, MergeFields
from mailchimp_api.types.conditions import SegmentSummary, SegmentOptions
from mailchimp_api.types.reports import AbuseReport


class Visibility(ApiEnum):
    pub = 'pub'
    prv = 'prv'
    noop = ''
    fallthrough_string = '*'


class MemberStatus(ApiEnum):
    subscribed = 'subscribed'
    unsubscribed = 'unsubscribed'
    cleaned = 'cleaned'
    pending = 'pending'
    transactional = 'transactional'
    archived = 'archived'
    noop = ''
    fallthrough_string = '*'


class EmailType(ApiEnum):
    html = 'html'
    text = 'text'
    noop = ''
    fallthrough_string = '*'


class SortListsField(ApiEnum):
    date_created = 'date_created'
    noop = ''
    fallthrough_string = '*'


class SortMembersField(ApiEnum):
    timestamp_opt = 'timestamp_opt'
    timestamp_signup = 'timestamp_signup'
    last_changed = 'last_changed'
    noop = ''
    fallthrough_string = '*'


class SegmentType(ApiEnum):
    saved = 'saved'
    static = 'static'
    fuzzy = 'fuzzy'
    noop = ''
    fallthrough_string = '*'


class TagStatus(ApiEnum):
    active = 'active'
    inactive = 'inactive'
    noop = ''
    fallthrough_string = '*'


class MergeFieldType(ApiEnum):
    text = 'text'
    number = 'number'
    address = 'address'
    phone = 'phone'
    date = 'date'
    url = 'url'
    imageurl = 'imageurl'
    radio = 'radio'
    dropdown = 'dropdown'
    birthday = 'birthday'
    zip = 'zip'
    noop = ''
    fallthrough_string = '*'


class InterestCategoryType(ApiEnum):
    checkboxes = 'checkboxes'
    dropdown = 'dropdown'
    radio = 'radio'
    hidden = 'hidden'
    noop = ''
    fallthrough_string = '*'


#### Lists


@model
class ListContact:
    company: str
    address1: str
    city: str
    state: str
    zip: str
    country: str
    address2: str = ''
    phone: str = ''


@model
class CampaignDefaults:
    from_name: str
    from_email: str
    subject: str
    language: str


@model
class ListStats:
    member_count: int = 0
    total_contacts: int = 0
    unsubscribe_count: int = 0
    cleaned_count: int = 0
    member_count_since_send: int = 0
    unsubscribe_count_since_send: int = 0
    cleaned_count_since_send: int = 0
    campaign_count: int = 0
    campaign_last_sent: Optional[datetime] = None
    merge_field_count: int = 0
    avg_sub_rate: float = 0.0
    avg_unsub_rate: float = 0.0
    target_sub_rate: float = 0.0
    open_rate: float = 0.0
    click_rate: float = 0.0
    last_sub_date: Optional[datetime] = None
    last_unsub_date: Optional[datetime] = None


@model
class SubscriberList:
    """A list, as returned by GET /lists/{list_id}."""
    id: str = ''
    web_id: int = 0
    name: str = ''
    contact: Optional[ListContact] = None
    permission_reminder: str = ''
    use_archive_bar: bool = False
    campaign_defaults: Optional[CampaignDefaults] = None
    notify_on_subscribe: str = ''
    notify_on_unsubscribe: str = ''
    date_created: Optional[datetime] = None
    list_rating: int = 0
    email_type_option: bool = False
    subscribe_url_short: str = ''
    subscribe_url_long: str = ''
    beamer_address: str = ''
    visibility: Visibility = Visibility.noop
    double_optin: bool = False
    has_welcome: bool = False
    marketing_permissions: bool = False
    modules: List[str] = Factory(list)
    stats: Optional[ListStats] = None
    links: List[Link] = Links()


@model
class Lists:
    """GET /lists"""
    lists: List[SubscriberList] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateList:
    """The body for POST /lists, and for PATCH /lists/{list_id}."""
    name: str
    contact: ListContact
    permission_reminder: str
    campaign_defaults: CampaignDefaults
    email_type_option: bool = attrib(default=False, keep_empty=True)
    use_archive_bar: bool = False
    notify_on_subscribe: str = ''
    notify_on_unsubscribe: str = ''
    visibility: Visibility = Visibility.noop
    double_optin: bool = False
    marketing_permissions: bool = False


@model
class ListActivityDay:
    day: str = ''
    emails_sent: int = 0
    unique_opens: int = 0
    recipient_clicks: int = 0
    hard_bounce: int = 0
    soft_bounce: int = 0
    subs: int = 0
    unsubs: int = 0
    other_adds: int = 0
    other_removes: int = 0


@model
class ListActivity:
    """GET /lists/{list_id}/activity"""
    activity: List[ListActivityDay] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class GrowthHistoryMonth:
    list_id: str = ''
    month: str = ''
    existing: int = 0
    imports: int = 0
    optins: int = 0
    subscribed: int = 0
    unsubscribed: int = 0
    reconfirm: int = 0
    cleaned: int = 0
    pending: int = 0
    deleted: int = 0
    transactional: int = 0
    links: List[Link] = Links()


@model
class GrowthHistory:
    """GET /lists/{list_id}/growth-history"""
    history: List[GrowthHistoryMonth] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class ListAbuseReports:
    """GET /lists/{list_id}/abuse-reports"""
    abuse_reports: List[AbuseReport] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class EmailClient:
    client: str = ''
    members: int = 0


@model
class EmailClients:
    """GET /lists/{list_id}/clients: the top email clients of the subscribers."""
    clients: List[EmailClient] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class ListLocation:
    country: str = ''
    cc: str = ''
    percent: float = 0.0
    total: int = 0


@model
class ListLocations:
    """GET /lists/{list_id}/locations: subscribers by country, from their IPs."""
    locations: List[ListLocation] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


#### Members


@model
class MemberStats:
    avg_open_rate: float = 0.0
    avg_click_rate: float = 0.0


@model
class MemberNoteSummary:
    note_id: int = 0
    created_at: Optional[datetime] = None
    created_by: str = ''
    note: str = ''


@model
class MarketingPermission:
    marketing_permission_id: str = ''
    text: str = ''
    enabled: bool = False


@model
class MemberTag:
    id: int = 0
    name: str = ''


@model
class Member:
    """A list member, as returned by GET /lists/{list_id}/members/{subscriber_hash}."""
    id: str = ''
    email_address: str = ''
    unique_email_id: str = ''
    contact_id: str = ''
    full_name: str = ''
    web_id: int = 0
    email_type: EmailType = EmailType.noop
    status: MemberStatus = MemberStatus.noop
    unsubscribe_reason: str = ''
    consents_to_one_to_one_messaging: bool = False
    merge_fields: MergeFields = Factory(dict)
    interests: Dict[str, bool] = Factory(dict)
    stats: Optional[MemberStats] = None
    ip_signup: str = ''
    timestamp_signup: Optional[datetime] = None
    ip_opt: str = ''
    timestamp_opt: Optional[datetime] = None
    member_rating: int = 0
    last_changed: Optional[datetime] = None
    language: str = ''
    vip: bool = False
    email_client: str = ''
    location: Optional[Location] = None
    marketing_permissions: List[MarketingPermission] = Factory(list)
    last_note: Optional[MemberNoteSummary] = None
    source: str = ''
    tags_count: int = 0
    tags: List[MemberTag] = Factory(list)
    list_id: str = ''
    links: List[Link] = Links()


@model
class Members:
    """GET /lists/{list_id}/members"""
    members: List[Member] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class AddMember:
    """The body for POST /lists/{list_id}/members.

    `status` is required by Mailchimp; `set_member` (a PUT) uses
    `status_if_new` instead, for the case where the member does not exist.
    """
    email_address: str
    status: MemberStatus = MemberStatus.noop
    status_if_new: MemberStatus = MemberStatus.noop
    email_type: EmailType = EmailType.noop
    merge_fields: MergeFields = Factory(dict)
    interests: Dict[str, bool] = Factory(dict)
    language: str = ''
    vip: bool = False
    location: Optional[Location] = None
    marketing_permissions: List[MarketingPermission] = Factory(list)
    ip_signup: str = ''
    timestamp_signup: Optional[datetime] = None
    ip_opt: str = ''
    timestamp_opt: Optional[datetime] = None
    tags: List[str] = Factory(list)


@model
class UpdateMember:
    """The body for PATCH /lists/{list_id}/members/{subscriber_hash}."""
    email_address: str = ''
    status: MemberStatus = MemberStatus.noop
    email_type: EmailType = EmailType.noop
    merge_fields: MergeFields = Factory(dict)
    interests: Dict[str, bool] = Factory(dict)
    language: str = ''
    vip: Optional[bool] = None
    location: Optional[Location] = None
    marketing_permissions: List[MarketingPermission] = Factory(list)
    ip_signup: str = ''
    timestamp_signup: Optional[datetime] = None
    ip_opt: str = ''
    timestamp_opt: Optional[datetime] = None


@model
class BatchSubscribe:
    """The body for POST /lists/{list_id}: add or update up to 500 members."""
    members: List[AddMember]
    update_existing: bool = False
    sync_tags: bool = False


@model
class BatchError:
    email_address: str = ''
    error: str = ''
    error_code: str = ''


@model
class BatchSubscribeResult:
    new_members: List[Member] = Factory(list)
    updated_members: List[Member] = Factory(list)
    errors: List[BatchError] = Factory(list)
    total_created: int = 0
    total_updated: int = 0
    error_count: int = 0
    links: List[Link] = Links()


@model
class MemberActivityEvent:
    action: str = ''
    timestamp: Optional[datetime] = None
    url: str = ''
    type_: str = ''
    campaign_id: str = ''
    title: str = ''
    parent_campaign: str = ''


@model
class MemberActivity:
    """GET /lists/{list_id}/members/{subscriber_hash}/activity"""
    activity: List[MemberActivityEvent] = Factory(list)
    email_id: str = ''
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class Tag:
    id: int = 0
    name: str = ''
    date_added: Optional[datetime] = None


@model
class MemberTags:
    """GET /lists/{list_id}/members/{subscriber_hash}/tags"""
    tags: List[Tag] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class TagUpdate:
    name: str
    status: TagStatus


@model
class UpdateMemberTags:
    tags: List[TagUpdate]
    is_syncing: bool = False


@model
class Note:
    id: int = 0
    created_at: Optional[datetime] = None
    created_by: str = ''
    updated_at: Optional[datetime] = None
    note: str = ''
    list_id: str = ''
    email_id: str = ''
    links: List[Link] = Links()


@model
class MemberNotes:
    """GET /lists/{list_id}/members/{subscriber_hash}/notes"""
    notes: List[Note] = Factory(list)
    list_id: str = ''
    email_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class AddNote:
    note: str


@model
class Event:
    """The body for POST /lists/{list_id}/members/{subscriber_hash}/events."""
    name: str
    properties: Dict[str, str] = Factory(dict)
    is_syncing: bool = False
    occurred_at: Optional[datetime] = None


@model
class MemberEvents:
    """GET /lists/{list_id}/members/{subscriber_hash}/events"""
    events: List[Event] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class ActivityFeedItem:
    """One entry of a member's activity feed.

    The fields besides `activity_type` depend on the type; those not listed
    here are dropped.
    """
    activity_type: str = ''
    created_at_timestamp: Optional[datetime] = None
    campaign_id: str = ''
    campaign_title: str = ''
    link_clicked: str = ''
    bounce_type: str = ''
    unsubscribe_reason: str = ''
    note_id: int = 0
    note_text: str = ''
    event_name: str = ''
    order_id: str = ''
    store_id: str = ''
    automation_workflow_id: str = ''
    automation_workflow_title: str = ''


@model
class MemberActivityFeed:
    """GET /lists/{list_id}/members/{subscriber_hash}/activity-feed"""
    activity: List[ActivityFeedItem] = Factory(list)
    email_id: str = ''
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class Goal:
    goal_id: int = 0
    event: str = ''
    last_visited_at: Optional[datetime] = None
    data: str = ''


@model
class MemberGoals:
    """GET /lists/{list_id}/members/{subscriber_hash}/goals: the last 50 goal events."""
    goals: List[Goal] = Factory(list)
    email_id: str = ''
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class TagSearchResult:
    id: int = 0
    name: str = ''


@model
class TagSearchResults:
    """GET /lists/{list_id}/tag-search"""
    tags: List[TagSearchResult] = Factory(list)
    total_items: int = 0


#### Segments


@model
class Segment:
    id: int = 0
    name: str = ''
    member_count: int = 0
    type_: SegmentType = SegmentType.noop
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    options: Optional[SegmentOptions] = None
    list_id: str = ''
    links: List[Link] = Links()


@model
class Segments:
    """GET /lists/{list_id}/segments"""
    segments: List[Segment] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateSegment:
    """The body for creating or updating a segment.

    Give `static_segment` (a list of emails) for a static segment or tag,
    `options` for a saved segment.
    """
    name: str
    static_segment: List[str] = Factory(list)
    options: Optional[SegmentSummary] = None


@model
class BatchSegmentMembers:
    members_to_add: List[str] = Factory(list)
    members_to_remove: List[str] = Factory(list)


@model
class BatchSegmentMembersResult:
    members_added: List[Member] = Factory(list)
    members_removed: List[Member] = Factory(list)
    errors: List[BatchError] = Factory(list)
    total_added: int = 0
    total_removed: int = 0
    error_count: int = 0
    links: List[Link] = Links()


@model
class SegmentMembers:
    """GET /lists/{list_id}/segments/{segment_id}/members"""
    members: List[Member] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class SegmentMember:
    email_address: str


#### Merge fields


@model
class MergeFieldOptions:
    default_country: int = 0
    phone_format: str = ''
    date_format: str = ''
    choices: List[str] = Factory(list)
    size: int = 0


@model
class MergeField:
    merge_id: int = 0
    tag: str = ''
    name: str = ''
    type_: MergeFieldType = MergeFieldType.noop
    required: bool = False
    default_value: str = ''
    public: bool = False
    display_order: int = 0
    options: Optional[MergeFieldOptions] = None
    help_text: str = ''
    list_id: str = ''
    links: List[Link] = Links()


@model
class ListMergeFields:
    """GET /lists/{list_id}/merge-fields"""
    merge_fields: List[MergeField] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateMergeField:
    name: str
    type_: MergeFieldType
    tag: str = ''
    required: bool = False
    default_value: str = ''
    public: bool = False
    display_order: int = 0
    options: Optional[MergeFieldOptions] = None
    help_text: str = ''


@model
class UpdateMergeField:
    name: str
    tag: str = ''
    required: Optional[bool] = None
    default_value: str = ''
    public: Optional[bool] = None
    display_order: Optional[int] = None
    options: Optional[MergeFieldOptions] = None
    help_text: str = ''


#### Interest categories


@model
class InterestCategory:
    list_id: str = ''
    id: str = ''
    title: str = ''
    display_order: int = 0
    type_: InterestCategoryType = InterestCategoryType.noop
    links: List[Link] = Links()


@model
class InterestCategories:
    """GET /lists/{list_id}/interest-categories"""
    categories: List[InterestCategory] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class Interest:
    category_id: str = ''
    list_id: str = ''
    id: str = ''
    name: str = ''
    subscriber_count: str = ''
    display_order: int = 0
    links: List[Link] = Links()


@model
class Interests:
    """GET /lists/{list_id}/interest-categories/{interest_category_id}/interests"""
    interests: List[Interest] = Factory(list)
    list_id: str = ''
    category_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateInterestCategory:
    """The body for POST and PATCH /lists/{list_id}/interest-categories."""
    title: str
    type_: InterestCategoryType
    display_order: Optional[int] = None


@model
class CreateInterest:
    """The body for POST and PATCH
    /lists/{list_id}/interest-categories/{interest_category_id}/interests.
    """
    name: str
    display_order: Optional[int] = None


#### Webhooks


@model
class WebhookEvents:
    subscribe: bool = False
    unsubscribe: bool = False
    profile: bool = False
    cleaned: bool = False
    upemail: bool = False
    campaign: bool = False


@model
class WebhookSources:
    user: bool = False
    admin: bool = False
    api: bool = False


@model
class ListWebhook:
    id: str = ''
    url: str = ''
    events: Optional[WebhookEvents] = None
    sources: Optional[WebhookSources] = None
    list_id: str = ''
    links: List[Link] = Links()


@model
class ListWebhooks:
    """GET /lists/{list_id}/webhooks"""
    webhooks: List[ListWebhook] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateListWebhook:
    url: str = ''
    events: Optional[WebhookEvents] = None
    sources: Optional[WebhookSources] = None


#### Signup forms


@model
class SignupFormHeader:
    image_url: str = ''
    text: str = ''
    image_width: str = ''
    image_height: str = ''
    image_alt: str = ''
    image_link: str = ''
    image_align: str = ''
    image_border_width: str = ''
    image_border_style: str = ''
    image_border_color: str = ''
    image_target: str = ''


@model
class SignupFormContent:
    section: str = ''
    value: str = ''


@model
class SignupFormStyleOption:
    property: str = ''
    value: str = ''


@model
class SignupFormStyle:
    selector: str = ''
    options: List[SignupFormStyleOption] = Factory(list)


@model
class SignupForm:
    """The body for POST /lists/{list_id}/signup-forms, which customizes the
    hosted signup form. Also what it returns.
    """
    header: Optional[SignupFormHeader] = None
    contents: List[SignupFormContent] = Factory(list)
    styles: List[SignupFormStyle] = Factory(list)
    signup_form_url: str = ''
    list_id: str = ''
    links: List[Link] = Links()


@model
class SignupForms:
    """GET /lists/{list_id}/signup-forms"""
    signup_forms: List[SignupForm] = Factory(list)
    list_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()
