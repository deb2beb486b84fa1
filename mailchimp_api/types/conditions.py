"""
Segment conditions (https://mailchimp.com/developer/marketing/docs/alternative-schemas/#segment-condition-schemas).

A segment is a list of conditions, each of which has a `condition_type`, a
`field`, an `op` and usually a `value`. Mailchimp describes them as a "oneOf"
without a formal discriminator, so `ConditionsOneOf` is an untagged union:

- If the JSON has a `condition_type` we know, that variant decodes it.
- Otherwise each variant is tried in the order below, and the first one that
  decodes wins. `Constant` properties make a variant reject data meant for
  another one.
"""

from typing import List, Union, Optional

import attr

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Constant


class SegmentCondition:
    """Mixin for all condition variants."""

    @classmethod
    def will_handle(cls, value):
        if not isinstance(value, dict):
            return False
        return value.get('condition_type') == attr.fields(cls).condition_type.default


#### Operator vocabularies


class Match(ApiEnum):
    any = 'any'
    all = 'all'
    noop = ''
    fallthrough_string = '*'


class AimOp(ApiEnum):
    open = 'open'
    click = 'click'
    sent = 'sent'
    noopen = 'noopen'
    noclick = 'noclick'
    nosent = 'nosent'
    noop = ''
    fallthrough_string = '*'


class AutomationOp(ApiEnum):
    started = 'started'
    completed = 'completed'
    not_started = 'not_started'
    not_completed = 'not_completed'
    noop = ''
    fallthrough_string = '*'


class MemberOp(ApiEnum):
    member = 'member'
    notmember = 'notmember'
    noop = ''
    fallthrough_string = '*'


class IsNotOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    noop = ''
    fallthrough_string = '*'


class NumberOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    greater = 'greater'
    less = 'less'
    noop = ''
    fallthrough_string = '*'


class GreaterLessOp(ApiEnum):
    greater = 'greater'
    less = 'less'
    noop = ''
    fallthrough_string = '*'


class StringOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    contains = 'contains'
    notcontain = 'notcontain'
    starts = 'starts'
    ends = 'ends'
    noop = ''
    fallthrough_string = '*'


class DateOp(ApiEnum):
    greater = 'greater'
    less = 'less'
    is_ = 'is'
    not_ = 'not'
    blank = 'blank'
    blank_not = 'blank_not'
    within = 'within'
    notwithin = 'notwithin'
    noop = ''
    fallthrough_string = '*'


class DateField(ApiEnum):
    timestamp_opt = 'timestamp_opt'
    info_changed = 'info_changed'
    ecomm_date = 'ecomm_date'
    noop = ''
    fallthrough_string = '*'


class EmailClientOp(ApiEnum):
    client_is = 'client_is'
    client_not = 'client_not'
    noop = ''
    fallthrough_string = '*'


class SignupSourceOp(ApiEnum):
    source_is = 'source_is'
    source_not = 'source_not'
    noop = ''
    fallthrough_string = '*'


class InterestsOp(ApiEnum):
    interestcontains = 'interestcontains'
    interestcontainsall = 'interestcontainsall'
    interestnotcontains = 'interestnotcontains'
    noop = ''
    fallthrough_string = '*'


class EcommCategoryField(ApiEnum):
    ecomm_cat = 'ecomm_cat'
    ecomm_prod = 'ecomm_prod'
    noop = ''
    fallthrough_string = '*'


class EcommNumberField(ApiEnum):
    ecomm_spent_avg = 'ecomm_spent_avg'
    ecomm_orders = 'ecomm_orders'
    ecomm_prod_all = 'ecomm_prod_all'
    ecomm_avg_ord = 'ecomm_avg_ord'
    noop = ''
    fallthrough_string = '*'


class EcommSpentField(ApiEnum):
    ecomm_spent_one = 'ecomm_spent_one'
    ecomm_spent_all = 'ecomm_spent_all'
    noop = ''
    fallthrough_string = '*'


class GoalActivityOp(ApiEnum):
    is_ = 'is'
    goalnotactivity = 'goalnotactivity'
    contains = 'contains'
    goalnotcontain = 'goalnotcontain'
    starts = 'starts'
    ends = 'ends'
    noop = ''
    fallthrough_string = '*'


class GoalTimestampOp(ApiEnum):
    greater = 'greater'
    less = 'less'
    is_ = 'is'
    noop = ''
    fallthrough_string = '*'


class FuzzySegmentOp(ApiEnum):
    fuzzy_is = 'fuzzy_is'
    fuzzy_not = 'fuzzy_not'
    noop = ''
    fallthrough_string = '*'


class StaticSegmentOp(ApiEnum):
    static_is = 'static_is'
    static_not = 'static_not'
    noop = ''
    fallthrough_string = '*'


class IPGeoCountryStateOp(ApiEnum):
    ipgeocountry = 'ipgeocountry'
    ipgeonotcountry = 'ipgeonotcountry'
    ipgeostate = 'ipgeostate'
    ipgeonotstate = 'ipgeonotstate'
    noop = ''
    fallthrough_string = '*'


class IPGeoInOp(ApiEnum):
    ipgeoin = 'ipgeoin'
    ipgeonotin = 'ipgeonotin'
    noop = ''
    fallthrough_string = '*'


class IPGeoZipOp(ApiEnum):
    ipgeoiszip = 'ipgeoiszip'
    ipgeonotzip = 'ipgeonotzip'
    noop = ''
    fallthrough_string = '*'


class SocialAge(ApiEnum):
    age_18_24 = '18-24'
    age_25_34 = '25-34'
    age_35_54 = '35-54'
    age_55_plus = '55+'
    noop = ''
    fallthrough_string = '*'


class PredictedAge(ApiEnum):
    age_18_24 = '18-24'
    age_25_34 = '25-34'
    age_35_44 = '35-44'
    age_45_54 = '45-54'
    age_55_64 = '55-64'
    age_65_plus = '65+'
    noop = ''
    fallthrough_string = '*'


class Gender(ApiEnum):
    male = 'male'
    female = 'female'
    noop = ''
    fallthrough_string = '*'


class SocialNetwork(ApiEnum):
    twitter = 'twitter'
    facebook = 'facebook'
    linkedin = 'linkedin'
    flickr = 'flickr'
    foursquare = 'foursquare'
    lastfm = 'lastfm'
    myspace = 'myspace'
    quora = 'quora'
    vimeo = 'vimeo'
    yelp = 'yelp'
    youtube = 'youtube'
    noop = ''
    fallthrough_string = '*'


class FollowOp(ApiEnum):
    follow = 'follow'
    notfollow = 'notfollow'
    noop = ''
    fallthrough_string = '*'


class AddressMergeOp(ApiEnum):
    contains = 'contains'
    notcontain = 'notcontain'
    blank = 'blank'
    blank_not = 'blank_not'
    noop = ''
    fallthrough_string = '*'


class BirthdayMergeOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    blank = 'blank'
    blank_not = 'blank_not'
    noop = ''
    fallthrough_string = '*'


class DateMergeOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    less = 'less'
    blank = 'blank'
    blank_not = 'blank_not'
    greater = 'greater'
    noop = ''
    fallthrough_string = '*'


class TextMergeOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    contains = 'contains'
    notcontain = 'notcontain'
    starts = 'starts'
    ends = 'ends'
    greater = 'greater'
    less = 'less'
    blank = 'blank'
    blank_not = 'blank_not'
    noop = ''
    fallthrough_string = '*'


class SelectMergeOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    blank = 'blank'
    blank_not = 'blank_not'
    contains = 'contains'
    notcontain = 'notcontain'
    noop = ''
    fallthrough_string = '*'


class EmailAddressField(ApiEnum):
    merge0 = 'merge0'
    email = 'EMAIL'
    noop = ''
    fallthrough_string = '*'


class EmailAddressOp(ApiEnum):
    is_ = 'is'
    not_ = 'not'
    contains = 'contains'
    notcontain = 'notcontain'
    starts = 'starts'
    ends = 'ends'
    greater = 'greater'
    less = 'less'
    noop = ''
    fallthrough_string = '*'


class NewSubscribersOp(ApiEnum):
    date_within = 'date_within'
    noop = ''
    fallthrough_string = '*'


#### Condition variants


@model
class AimConditions(SegmentCondition):
    """Segment by interaction with a specific campaign."""
    condition_type: str = Constant('Aim')
    field: str = Constant('aim')
    op: AimOp = AimOp.noop
    # A campaign id, or "any".
    value: str = ''


@model
class AutomationConditions(SegmentCondition):
    """Segment by interaction with an Automation workflow."""
    condition_type: str = Constant('Automation')
    field: str = Constant('automation')
    op: AutomationOp = AutomationOp.noop
    value: str = ''


@model
class CampaignPollConditions(SegmentCondition):
    condition_type: str = Constant('CampaignPoll')
    field: str = Constant('poll')
    op: MemberOp = MemberOp.noop
    value: float = 0.0


@model
class ConversationConditions(SegmentCondition):
    condition_type: str = Constant('Conversation')
    field: str = Constant('conversation')
    op: MemberOp = MemberOp.noop
    value: str = ''


@model
class DateConditions(SegmentCondition):
    condition_type: str = Constant('Date')
    field: DateField = DateField.noop
    op: DateOp = DateOp.noop
    value: str = ''
    extra: str = ''


@model
class EmailClientConditions(SegmentCondition):
    condition_type: str = Constant('EmailClient')
    field: str = Constant('email_client')
    op: EmailClientOp = EmailClientOp.noop
    value: str = ''


@model
class LanguageConditions(SegmentCondition):
    condition_type: str = Constant('Language')
    field: str = Constant('language')
    op: IsNotOp = IsNotOp.noop
    value: str = ''


@model
class MemberRatingConditions(SegmentCondition):
    condition_type: str = Constant('MemberRating')
    field: str = Constant('rating')
    op: NumberOp = NumberOp.noop
    value: float = 0.0


@model
class SignupSourceConditions(SegmentCondition):
    condition_type: str = Constant('SignupSource')
    field: str = Constant('source')
    op: SignupSourceOp = SignupSourceOp.noop
    value: str = ''


@model
class SurveyMonkeyConditions(SegmentCondition):
    condition_type: str = Constant('SurveyMonkey')
    field: str = Constant('survey_monkey')
    op: AutomationOp = AutomationOp.noop
    value: str = ''


@model
class VIPConditions(SegmentCondition):
    condition_type: str = Constant('VIP')
    field: str = Constant('gmonkey')
    op: MemberOp = MemberOp.noop


@model
class InterestsConditions(SegmentCondition):
    condition_type: str = Constant('Interests')
    # "interests-" followed by the group id, e.g. "interests-123".
    field: str = ''
    op: InterestsOp = InterestsOp.noop
    value: List[str] = Factory(list)


@model
class EcommCategoryConditions(SegmentCondition):
    condition_type: str = Constant('EcommCategory')
    field: EcommCategoryField = EcommCategoryField.noop
    op: StringOp = StringOp.noop
    value: str = ''


@model
class EcommNumberConditions(SegmentCondition):
    condition_type: str = Constant('EcommNumber')
    field: EcommNumberField = EcommNumberField.noop
    op: NumberOp = NumberOp.noop
    value: float = 0.0


@model
class EcommPurchasedConditions(SegmentCondition):
    condition_type: str = Constant('EcommPurchased')
    field: str = Constant('ecomm_purchased')
    op: MemberOp = MemberOp.noop


@model
class EcommSpentConditions(SegmentCondition):
    condition_type: str = Constant('EcommSpent')
    field: EcommSpentField = EcommSpentField.noop
    op: GreaterLessOp = GreaterLessOp.noop
    value: float = 0.0


@model
class EcommStoreConditions(SegmentCondition):
    condition_type: str = Constant('EcommStore')
    field: str = Constant('ecomm_store')
    op: IsNotOp = IsNotOp.noop
    value: str = ''


@model
class GoalActivityConditions(SegmentCondition):
    condition_type: str = Constant('GoalActivity')
    field: str = Constant('goal')
    op: GoalActivityOp = GoalActivityOp.noop
    value: str = ''


@model
class GoalTimestampConditions(SegmentCondition):
    condition_type: str = Constant('GoalTimestamp')
    field: str = Constant('goal_last_visited')
    op: GoalTimestampOp = GoalTimestampOp.noop
    value: str = ''


@model
class FuzzySegmentConditions(SegmentCondition):
    condition_type: str = Constant('FuzzySegment')
    field: str = Constant('fuzzy_segment')
    op: FuzzySegmentOp = FuzzySegmentOp.noop
    value: int = 0


@model
class StaticSegmentConditions(SegmentCondition):
    """Segment by membership in a tag or static segment."""
    condition_type: str = Constant('StaticSegment')
    field: str = Constant('static_segment')
    op: StaticSegmentOp = StaticSegmentOp.noop
    value: int = 0


@model
class IPGeoCountryStateConditions(SegmentCondition):
    condition_type: str = Constant('IPGeoCountryState')
    field: str = Constant('ipgeo')
    op: IPGeoCountryStateOp = IPGeoCountryStateOp.noop
    value: str = ''


@model
class IPGeoInConditions(SegmentCondition):
    condition_type: str = Constant('IPGeoIn')
    field: str = Constant('ipgeo')
    op: IPGeoInOp = IPGeoInOp.noop
    # The radius, in miles.
    value: int = 0
    lat: str = ''
    lng: str = ''
    addr: str = ''


@model
class IPGeoInZipConditions(SegmentCondition):
    condition_type: str = Constant('IPGeoInZip')
    field: str = Constant('ipgeo')
    op: str = Constant('ipgeoinzip')
    value: int = 0
    extra: int = 0


@model
class IPGeoUnknownConditions(SegmentCondition):
    condition_type: str = Constant('IPGeoUnknown')
    field: str = Constant('ipgeo')
    op: str = Constant('ipgeounknown')


@model
class IPGeoZipConditions(SegmentCondition):
    condition_type: str = Constant('IPGeoZip')
    field: str = Constant('ipgeo')
    op: IPGeoZipOp = IPGeoZipOp.noop
    value: int = 0


@model
class SocialAgeConditions(SegmentCondition):
    condition_type: str = Constant('SocialAge')
    field: str = Constant('social_age')
    op: IsNotOp = IsNotOp.noop
    value: SocialAge = SocialAge.noop


@model
class SocialGenderConditions(SegmentCondition):
    condition_type: str = Constant('SocialGender')
    field: str = Constant('social_gender')
    op: IsNotOp = IsNotOp.noop
    value: Gender = Gender.noop


@model
class SocialInfluenceConditions(SegmentCondition):
    condition_type: str = Constant('SocialInfluence')
    field: str = Constant('social_influence')
    op: NumberOp = NumberOp.noop
    value: float = 0.0


@model
class SocialNetworkMemberConditions(SegmentCondition):
    condition_type: str = Constant('SocialNetworkMember')
    field: str = Constant('social_network')
    op: MemberOp = MemberOp.noop
    value: SocialNetwork = SocialNetwork.noop


@model
class SocialNetworkFollowConditions(SegmentCondition):
    condition_type: str = Constant('SocialNetworkFollow')
    field: str = Constant('social_network')
    op: FollowOp = FollowOp.noop
    value: str = Constant('twitter_follow')


@model
class AddressMergeConditions(SegmentCondition):
    condition_type: str = Constant('AddressMerge')
    # The merge tag, e.g. "merge3" or "ADDRESS".
    field: str = ''
    op: AddressMergeOp = AddressMergeOp.noop
    value: str = ''


@model
class ZipMergeConditions(SegmentCondition):
    condition_type: str = Constant('ZipMerge')
    field: str = ''
    op: str = Constant('geoin')
    value: str = ''
    extra: str = ''


@model
class BirthdayMergeConditions(SegmentCondition):
    condition_type: str = Constant('BirthdayMerge')
    field: str = ''
    op: BirthdayMergeOp = BirthdayMergeOp.noop
    # MM/DD
    value: str = ''


@model
class DateMergeConditions(SegmentCondition):
    condition_type: str = Constant('DateMerge')
    field: str = ''
    op: DateMergeOp = DateMergeOp.noop
    value: str = ''


@model
class TextMergeConditions(SegmentCondition):
    condition_type: str = Constant('TextMerge')
    field: str = ''
    op: TextMergeOp = TextMergeOp.noop
    value: str = ''


@model
class SelectMergeConditions(SegmentCondition):
    condition_type: str = Constant('SelectMerge')
    field: str = ''
    op: SelectMergeOp = SelectMergeOp.noop
    value: str = ''


@model
class EmailAddressConditions(SegmentCondition):
    condition_type: str = Constant('EmailAddress')
    field: EmailAddressField = EmailAddressField.noop
    op: EmailAddressOp = EmailAddressOp.noop
    value: str = ''


@model
class PredictedGenderConditions(SegmentCondition):
    condition_type: str = Constant('PredictedGender')
    field: str = Constant('predicted_gender')
    op: IsNotOp = IsNotOp.noop
    value: Gender = Gender.noop


@model
class PredictedAgeConditions(SegmentCondition):
    condition_type: str = Constant('PredictedAge')
    field: str = Constant('predicted_age_range')
    op: str = Constant('is')
    value: PredictedAge = PredictedAge.noop


@model
class NewSubscribersConditions(SegmentCondition):
    condition_type: str = Constant('NewSubscribers')
    field: str = Constant('timestamp_opt')
    op: NewSubscribersOp = NewSubscribersOp.noop
    value: str = ''


ConditionsOneOf = Union[
    AimConditions,
    AutomationConditions,
    CampaignPollConditions,
    ConversationConditions,
    DateConditions,
    EmailClientConditions,
    LanguageConditions,
    MemberRatingConditions,
    SignupSourceConditions,
    SurveyMonkeyConditions,
    VIPConditions,
    InterestsConditions,
    EcommCategoryConditions,
    EcommNumberConditions,
    EcommPurchasedConditions,
    EcommSpentConditions,
    EcommStoreConditions,
    GoalActivityConditions,
    GoalTimestampConditions,
    FuzzySegmentConditions,
    StaticSegmentConditions,
    IPGeoCountryStateConditions,
    IPGeoInConditions,
    IPGeoInZipConditions,
    IPGeoUnknownConditions,
    IPGeoZipConditions,
    SocialAgeConditions,
    SocialGenderConditions,
    SocialInfluenceConditions,
    SocialNetworkMemberConditions,
    SocialNetworkFollowConditions,
    AddressMergeConditions,
    ZipMergeConditions,
    BirthdayMergeConditions,
    DateMergeConditions,
    TextMergeConditions,
    SelectMergeConditions,
    EmailAddressConditions,
    PredictedGenderConditions,
    PredictedAgeConditions,
    NewSubscribersConditions,
]


@model
class SegmentOptions:
    """The conditions of a saved segment, or of a campaign's recipients."""
    saved_segment_id: int = 0
    prebuilt_segment_id: str = ''
    match: Match = Match.noop
    conditions: List[ConditionsOneOf] = Factory(list)


@model
class SegmentSummary:
    """Just the conditions, as used when creating or updating a segment."""
    match: Match = Match.noop
    conditions: List[ConditionsOneOf] = Factory(list)
