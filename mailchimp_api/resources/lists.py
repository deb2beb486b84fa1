from datetime import datetime
from typing import Optional, Sequence

from mailchimp_api.resources.base import Resource, encode_path, subscriber_hash
from mailchimp_api import types


class Lists(Resource):
    """/lists

    Wherever a member is addressed, either the subscriber hash or the email
    address can be given.
    """

    def list(
        self,
        *,
        fields: Sequence[str] = (),
        exclude_fields: Sequence[str] = (),
        count: int = 0,
        offset: int = 0,
        before_date_created: Optional[datetime] = None,
        since_date_created: Optional[datetime] = None,
        before_campaign_last_sent: Optional[datetime] = None,
        since_campaign_last_sent: Optional[datetime] = None,
        email: str = '',
        sort_field: types.SortListsField = types.SortListsField.noop,
        sort_dir: types.SortDir = types.SortDir.noop,
        has_ecommerce_store: bool = False,
        include_total_contacts: bool = False,
    ) -> types.Lists:
        return self._get(
            '/lists', types.Lists,
            fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
            before_date_created=before_date_created, since_date_created=since_date_created,
            before_campaign_last_sent=before_campaign_last_sent,
            since_campaign_last_sent=since_campaign_last_sent,
            email=email, sort_field=sort_field, sort_dir=sort_dir,
            has_ecommerce_store=has_ecommerce_store,
            include_total_contacts=include_total_contacts,
        )

    def list_all(self, *, email: str = '', sort_field=types.SortListsField.noop,
                 sort_dir=types.SortDir.noop):
        """Iterate over all lists, across pages."""
        return self._paginate('/lists', types.Lists, 'lists',
                              email=email, sort_field=sort_field, sort_dir=sort_dir)

    def create(self, subscriber_list: types.CreateList) -> types.SubscriberList:
        return self.client.post('/lists', body=subscriber_list, response_type=types.SubscriberList)

    def get(self, list_id: str, *, fields=(), exclude_fields=(),
            include_total_contacts: bool = False) -> types.SubscriberList:
        return self._get(encode_path('lists', list_id), types.SubscriberList,
                         fields=fields, exclude_fields=exclude_fields,
                         include_total_contacts=include_total_contacts)

    def update(self, list_id: str, subscriber_list: types.CreateList) -> types.SubscriberList:
        return self.client.patch(encode_path('lists', list_id),
                                 body=subscriber_list, response_type=types.SubscriberList)

    def delete(self, list_id: str):
        self.client.delete(encode_path('lists', list_id))

    def batch_subscribe(self, list_id: str, batch: types.BatchSubscribe, *,
                        skip_merge_validation: bool = False) -> types.BatchSubscribeResult:
        """Add or update up to 500 members at once."""
        params = {'skip_merge_validation': 'true'} if skip_merge_validation else None
        return self.client.post(encode_path('lists', list_id), params=params,
                                body=batch, response_type=types.BatchSubscribeResult)

    def activity(self, list_id: str, *, fields=(), exclude_fields=()) -> types.ListActivity:
        """Up to the previous 180 days of daily activity."""
        return self._get(encode_path('lists', list_id, 'activity'), types.ListActivity,
                         fields=fields, exclude_fields=exclude_fields)

    def growth_history(self, list_id: str, *, fields=(), exclude_fields=(), count=0, offset=0,
                       sort_field: str = '', sort_dir=types.SortDir.noop) -> types.GrowthHistory:
        return self._get(encode_path('lists', list_id, 'growth-history'), types.GrowthHistory,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, sort_field=sort_field, sort_dir=sort_dir)

    def growth_history_month(self, list_id: str, month: str, *, fields=(),
                             exclude_fields=()) -> types.GrowthHistoryMonth:
        """The summary for one month, given as "YYYY-MM"."""
        return self._get(encode_path('lists', list_id, 'growth-history', month),
                         types.GrowthHistoryMonth, fields=fields, exclude_fields=exclude_fields)

    def list_abuse_reports(self, list_id: str, *, fields=(), exclude_fields=(), count=0,
                           offset=0) -> types.ListAbuseReports:
        return self._get(encode_path('lists', list_id, 'abuse-reports'), types.ListAbuseReports,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def get_abuse_report(self, list_id: str, report_id, *, fields=(),
                         exclude_fields=()) -> types.AbuseReport:
        return self._get(encode_path('lists', list_id, 'abuse-reports', report_id),
                         types.AbuseReport, fields=fields, exclude_fields=exclude_fields)

    def clients(self, list_id: str, *, fields=(), exclude_fields=()) -> types.EmailClients:
        return self._get(encode_path('lists', list_id, 'clients'), types.EmailClients,
                         fields=fields, exclude_fields=exclude_fields)

    def locations(self, list_id: str, *, fields=(), exclude_fields=()) -> types.ListLocations:
        return self._get(encode_path('lists', list_id, 'locations'), types.ListLocations,
                         fields=fields, exclude_fields=exclude_fields)

    def get_signup_forms(self, list_id: str) -> types.SignupForms:
        return self.client.get(encode_path('lists', list_id, 'signup-forms'),
                               response_type=types.SignupForms)

    def customize_signup_form(self, list_id: str, form: types.SignupForm) -> types.SignupForm:
        return self.client.post(encode_path('lists', list_id, 'signup-forms'),
                                body=form, response_type=types.SignupForm)

    #### Members

    def _member_path(self, list_id, email_or_hash, *rest):
        return encode_path('lists', list_id, 'members', subscriber_hash(email_or_hash), *rest)

    def list_members(
        self,
        list_id: str,
        *,
        fields: Sequence[str] = (),
        exclude_fields: Sequence[str] = (),
        count: int = 0,
        offset: int = 0,
        email_type: str = '',
        status: types.MemberStatus = types.MemberStatus.noop,
        since_timestamp_opt: Optional[datetime] = None,
        before_timestamp_opt: Optional[datetime] = None,
        since_last_changed: Optional[datetime] = None,
        before_last_changed: Optional[datetime] = None,
        unique_email_id: str = '',
        vip_only: bool = False,
        interest_category_id: str = '',
        interest_ids: Sequence[str] = (),
        interest_match: str = '',
        sort_field: types.SortMembersField = types.SortMembersField.noop,
        sort_dir: types.SortDir = types.SortDir.noop,
    ) -> types.Members:
        return self._get(
            encode_path('lists', list_id, 'members'), types.Members,
            fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
            email_type=email_type, status=status,
            since_timestamp_opt=since_timestamp_opt, before_timestamp_opt=before_timestamp_opt,
            since_last_changed=since_last_changed, before_last_changed=before_last_changed,
            unique_email_id=unique_email_id, vip_only=vip_only,
            interest_category_id=interest_category_id, interest_ids=interest_ids,
            interest_match=interest_match, sort_field=sort_field, sort_dir=sort_dir,
        )

    def list_all_members(self, list_id: str, *, status=types.MemberStatus.noop,
                         since_last_changed: Optional[datetime] = None):
        """Iterate over all members of a list, across pages."""
        return self._paginate(encode_path('lists', list_id, 'members'), types.Members, 'members',
                              status=status, since_last_changed=since_last_changed)

    def add_member(self, list_id: str, member: types.AddMember, *,
                   skip_merge_validation: bool = False) -> types.Member:
        params = {'skip_merge_validation': 'true'} if skip_merge_validation else None
        return self.client.post(encode_path('lists', list_id, 'members'), params=params,
                                body=member, response_type=types.Member)

    def get_member(self, list_id: str, email_or_hash: str, *, fields=(),
                   exclude_fields=()) -> types.Member:
        return self._get(self._member_path(list_id, email_or_hash), types.Member,
                         fields=fields, exclude_fields=exclude_fields)

    def set_member(self, list_id: str, email_or_hash: str, member: types.AddMember, *,
                   skip_merge_validation: bool = False) -> types.Member:
        """Add the member, or update it if it already exists."""
        params = {'skip_merge_validation': 'true'} if skip_merge_validation else None
        return self.client.put(self._member_path(list_id, email_or_hash), params=params,
                               body=member, response_type=types.Member)

    def update_member(self, list_id: str, email_or_hash: str, member: types.UpdateMember, *,
                      skip_merge_validation: bool = False) -> types.Member:
        params = {'skip_merge_validation': 'true'} if skip_merge_validation else None
        return self.client.patch(self._member_path(list_id, email_or_hash), params=params,
                                 body=member, response_type=types.Member)

    def archive_member(self, list_id: str, email_or_hash: str):
        """Archive a member. It can be added back later."""
        self.client.delete(self._member_path(list_id, email_or_hash))

    def delete_member_permanent(self, list_id: str, email_or_hash: str):
        """Delete all personally identifiable information of a member. This cannot be undone."""
        self.client.post(self._member_path(list_id, email_or_hash, 'actions', 'delete-permanent'))

    def member_activity(self, list_id: str, email_or_hash: str, *, fields=(), exclude_fields=(),
                        action: Sequence[str] = ()) -> types.MemberActivity:
        return self._get(self._member_path(list_id, email_or_hash, 'activity'),
                         types.MemberActivity, fields=fields,
                         exclude_fields=exclude_fields, action=action)

    def member_activity_feed(self, list_id: str, email_or_hash: str, *, fields=(),
                             exclude_fields=(), count=0, offset=0,
                             activity_filters: Sequence[str] = ()) -> types.MemberActivityFeed:
        """Opens, clicks, unsubscribes and other activity, newest first."""
        return self._get(self._member_path(list_id, email_or_hash, 'activity-feed'),
                         types.MemberActivityFeed, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset, activity_filters=activity_filters)

    def member_goals(self, list_id: str, email_or_hash: str, *, fields=(),
                     exclude_fields=()) -> types.MemberGoals:
        return self._get(self._member_path(list_id, email_or_hash, 'goals'), types.MemberGoals,
                         fields=fields, exclude_fields=exclude_fields)

    def get_member_tags(self, list_id: str, email_or_hash: str, *, fields=(), exclude_fields=(),
                        count=0, offset=0) -> types.MemberTags:
        return self._get(self._member_path(list_id, email_or_hash, 'tags'), types.MemberTags,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def update_member_tags(self, list_id: str, email_or_hash: str, tags: types.UpdateMemberTags):
        """Add or remove tags. A tag which does not exist yet is created."""
        self.client.post(self._member_path(list_id, email_or_hash, 'tags'), body=tags)

    def list_member_notes(self, list_id: str, email_or_hash: str, *, fields=(), exclude_fields=(),
                          count=0, offset=0) -> types.MemberNotes:
        return self._get(self._member_path(list_id, email_or_hash, 'notes'), types.MemberNotes,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def add_member_note(self, list_id: str, email_or_hash: str, note: str) -> types.Note:
        return self.client.post(self._member_path(list_id, email_or_hash, 'notes'),
                                body=types.AddNote(note=note), response_type=types.Note)

    def get_member_note(self, list_id: str, email_or_hash: str, note_id, *, fields=(),
                        exclude_fields=()) -> types.Note:
        return self._get(self._member_path(list_id, email_or_hash, 'notes', note_id), types.Note,
                         fields=fields, exclude_fields=exclude_fields)

    def update_member_note(self, list_id: str, email_or_hash: str, note_id,
                           note: str) -> types.Note:
        return self.client.patch(self._member_path(list_id, email_or_hash, 'notes', note_id),
                                 body=types.AddNote(note=note), response_type=types.Note)

    def delete_member_note(self, list_id: str, email_or_hash: str, note_id):
        self.client.delete(self._member_path(list_id, email_or_hash, 'notes', note_id))

    def list_member_events(self, list_id: str, email_or_hash: str, *, fields=(),
                           exclude_fields=(), count=0, offset=0) -> types.MemberEvents:
        return self._get(self._member_path(list_id, email_or_hash, 'events'), types.MemberEvents,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def add_member_event(self, list_id: str, email_or_hash: str, event: types.Event):
        self.client.post(self._member_path(list_id, email_or_hash, 'events'), body=event)

    def search_tags(self, list_id: str, name: str = '') -> types.TagSearchResults:
        return self._get(encode_path('lists', list_id, 'tag-search'), types.TagSearchResults,
                         name=name)

    #### Segments

    def list_segments(
        self,
        list_id: str,
        *,
        fields: Sequence[str] = (),
        exclude_fields: Sequence[str] = (),
        count: int = 0,
        offset: int = 0,
        type: types.SegmentType = types.SegmentType.noop,
        since_created_at: Optional[datetime] = None,
        before_created_at: Optional[datetime] = None,
        include_cleaned: bool = False,
        include_transactional: bool = False,
        include_unsubscribed: bool = False,
        since_updated_at: Optional[datetime] = None,
        before_updated_at: Optional[datetime] = None,
    ) -> types.Segments:
        return self._get(
            encode_path('lists', list_id, 'segments'), types.Segments,
            fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
            type=type, since_created_at=since_created_at, before_created_at=before_created_at,
            include_cleaned=include_cleaned, include_transactional=include_transactional,
            include_unsubscribed=include_unsubscribed,
            since_updated_at=since_updated_at, before_updated_at=before_updated_at,
        )

    def create_segment(self, list_id: str, segment: types.CreateSegment) -> types.Segment:
        return self.client.post(encode_path('lists', list_id, 'segments'),
                                body=segment, response_type=types.Segment)

    def get_segment(self, list_id: str, segment_id, *, fields=(), exclude_fields=()) -> types.Segment:
        return self._get(encode_path('lists', list_id, 'segments', segment_id), types.Segment,
                         fields=fields, exclude_fields=exclude_fields)

    def update_segment(self, list_id: str, segment_id, segment: types.CreateSegment) -> types.Segment:
        return self.client.patch(encode_path('lists', list_id, 'segments', segment_id),
                                 body=segment, response_type=types.Segment)

    def delete_segment(self, list_id: str, segment_id):
        self.client.delete(encode_path('lists', list_id, 'segments', segment_id))

    def batch_segment_members(self, list_id: str, segment_id,
                              members: types.BatchSegmentMembers) -> types.BatchSegmentMembersResult:
        """Add and remove members of a static segment."""
        return self.client.post(encode_path('lists', list_id, 'segments', segment_id),
                                body=members, response_type=types.BatchSegmentMembersResult)

    def list_segment_members(self, list_id: str, segment_id, *, fields=(), exclude_fields=(),
                             count=0, offset=0) -> types.SegmentMembers:
        return self._get(encode_path('lists', list_id, 'segments', segment_id, 'members'),
                         types.SegmentMembers, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset)

    def add_segment_member(self, list_id: str, segment_id, email_address: str) -> types.Member:
        return self.client.post(encode_path('lists', list_id, 'segments', segment_id, 'members'),
                                body=types.SegmentMember(email_address=email_address),
                                response_type=types.Member)

    def remove_segment_member(self, list_id: str, segment_id, email_or_hash: str):
        self.client.delete(encode_path('lists', list_id, 'segments', segment_id, 'members',
                                       subscriber_hash(email_or_hash)))

    #### Merge fields

    def list_merge_fields(self, list_id: str, *, fields=(), exclude_fields=(), count=0, offset=0,
                          type: types.MergeFieldType = types.MergeFieldType.noop,
                          required: bool = False) -> types.ListMergeFields:
        return self._get(encode_path('lists', list_id, 'merge-fields'), types.ListMergeFields,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, type=type, required=required)

    def create_merge_field(self, list_id: str, merge_field: types.CreateMergeField) -> types.MergeField:
        return self.client.post(encode_path('lists', list_id, 'merge-fields'),
                                body=merge_field, response_type=types.MergeField)

    def get_merge_field(self, list_id: str, merge_id, *, fields=(), exclude_fields=()) -> types.MergeField:
        return self._get(encode_path('lists', list_id, 'merge-fields', merge_id), types.MergeField,
                         fields=fields, exclude_fields=exclude_fields)

    def update_merge_field(self, list_id: str, merge_id,
                           merge_field: types.UpdateMergeField) -> types.MergeField:
        return self.client.patch(encode_path('lists', list_id, 'merge-fields', merge_id),
                                 body=merge_field, response_type=types.MergeField)

    def delete_merge_field(self, list_id: str, merge_id):
        self.client.delete(encode_path('lists', list_id, 'merge-fields', merge_id))

    #### Interest categories

    def list_interest_categories(self, list_id: str, *, fields=(), exclude_fields=(), count=0,
                                 offset=0, type: str = '') -> types.InterestCategories:
        return self._get(encode_path('lists', list_id, 'interest-categories'),
                         types.InterestCategories, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset, type=type)

    def get_interest_category(self, list_id: str, interest_category_id: str, *, fields=(),
                              exclude_fields=()) -> types.InterestCategory:
        return self._get(encode_path('lists', list_id, 'interest-categories', interest_category_id),
                         types.InterestCategory, fields=fields, exclude_fields=exclude_fields)

    def create_interest_category(self, list_id: str,
                                 category: types.CreateInterestCategory) -> types.InterestCategory:
        return self.client.post(encode_path('lists', list_id, 'interest-categories'),
                                body=category, response_type=types.InterestCategory)

    def update_interest_category(self, list_id: str, interest_category_id: str,
                                 category: types.CreateInterestCategory) -> types.InterestCategory:
        return self.client.patch(
            encode_path('lists', list_id, 'interest-categories', interest_category_id),
            body=category, response_type=types.InterestCategory)

    def delete_interest_category(self, list_id: str, interest_category_id: str):
        self.client.delete(encode_path('lists', list_id, 'interest-categories',
                                       interest_category_id))

    def _interests_path(self, list_id, interest_category_id, *rest):
        return encode_path('lists', list_id, 'interest-categories', interest_category_id,
                           'interests', *rest)

    def list_interests(self, list_id: str, interest_category_id: str, *, fields=(),
                       exclude_fields=(), count=0, offset=0) -> types.Interests:
        return self._get(self._interests_path(list_id, interest_category_id),
                         types.Interests, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset)

    def create_interest(self, list_id: str, interest_category_id: str,
                        interest: types.CreateInterest) -> types.Interest:
        return self.client.post(self._interests_path(list_id, interest_category_id),
                                body=interest, response_type=types.Interest)

    def get_interest(self, list_id: str, interest_category_id: str, interest_id: str, *,
                     fields=(), exclude_fields=()) -> types.Interest:
        return self._get(self._interests_path(list_id, interest_category_id, interest_id),
                         types.Interest, fields=fields, exclude_fields=exclude_fields)

    def update_interest(self, list_id: str, interest_category_id: str, interest_id: str,
                        interest: types.CreateInterest) -> types.Interest:
        return self.client.patch(self._interests_path(list_id, interest_category_id, interest_id),
                                 body=interest, response_type=types.Interest)

    def delete_interest(self, list_id: str, interest_category_id: str, interest_id: str):
        self.client.delete(self._interests_path(list_id, interest_category_id, interest_id))

    #### Webhooks

    def list_webhooks(self, list_id: str) -> types.ListWebhooks:
        return self.client.get(encode_path('lists', list_id, 'webhooks'),
                               response_type=types.ListWebhooks)

    def create_webhook(self, list_id: str, webhook: types.CreateListWebhook) -> types.ListWebhook:
        return self.client.post(encode_path('lists', list_id, 'webhooks'),
                                body=webhook, response_type=types.ListWebhook)

    def get_webhook(self, list_id: str, webhook_id: str) -> types.ListWebhook:
        return self.client.get(encode_path('lists', list_id, 'webhooks', webhook_id),
                               response_type=types.ListWebhook)

    def update_webhook(self, list_id: str, webhook_id: str,
                       webhook: types.CreateListWebhook) -> types.ListWebhook:
        return self.client.patch(encode_path('lists', list_id, 'webhooks', webhook_id),
                                 body=webhook, response_type=types.ListWebhook)

    def delete_webhook(self, list_id: str, webhook_id: str):
        self.client.delete(encode_path('lists', list_id, 'webhooks', webhook_id))
