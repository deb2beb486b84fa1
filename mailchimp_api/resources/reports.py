from datetime import datetime
from typing import Optional

from mailchimp_api.resources.base import Resource, encode_path, subscriber_hash
from mailchimp_api import types


class Reports(Resource):
    """/reports: the results of sent campaigns."""

    def list(
        self,
        *,
        fields=(),
        exclude_fields=(),
        count: int = 0,
        offset: int = 0,
        type: types.CampaignType = types.CampaignType.noop,
        before_send_time: Optional[datetime] = None,
        since_send_time: Optional[datetime] = None,
    ) -> types.Reports:
        return self._get('/reports', types.Reports,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, type=type, before_send_time=before_send_time,
                         since_send_time=since_send_time)

    def get(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.Report:
        return self._get(encode_path('reports', campaign_id), types.Report,
                         fields=fields, exclude_fields=exclude_fields)

    def abuse_reports(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.AbuseReports:
        return self._get(encode_path('reports', campaign_id, 'abuse-reports'), types.AbuseReports,
                         fields=fields, exclude_fields=exclude_fields)

    def advice(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.CampaignAdvice:
        return self._get(encode_path('reports', campaign_id, 'advice'), types.CampaignAdvice,
                         fields=fields, exclude_fields=exclude_fields)

    def click_details(self, campaign_id: str, *, fields=(), exclude_fields=(), count=0,
                      offset=0) -> types.ClickDetails:
        return self._get(encode_path('reports', campaign_id, 'click-details'), types.ClickDetails,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def click_detail(self, campaign_id: str, link_id: str, *, fields=(),
                     exclude_fields=()) -> types.UrlClicked:
        return self._get(encode_path('reports', campaign_id, 'click-details', link_id),
                         types.UrlClicked, fields=fields, exclude_fields=exclude_fields)

    def open_details(self, campaign_id: str, *, fields=(), exclude_fields=(), count=0, offset=0,
                     since: Optional[datetime] = None) -> types.OpenDetails:
        return self._get(encode_path('reports', campaign_id, 'open-details'), types.OpenDetails,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, since=since)

    def domain_performance(self, campaign_id: str, *, fields=(),
                           exclude_fields=()) -> types.DomainPerformance:
        return self._get(encode_path('reports', campaign_id, 'domain-performance'),
                         types.DomainPerformance, fields=fields, exclude_fields=exclude_fields)

    def eepurl(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.EepurlActivity:
        return self._get(encode_path('reports', campaign_id, 'eepurl'), types.EepurlActivity,
                         fields=fields, exclude_fields=exclude_fields)

    def email_activity(self, campaign_id: str, *, fields=(), exclude_fields=(), count=0,
                       offset=0, since: Optional[datetime] = None) -> types.EmailActivity:
        return self._get(encode_path('reports', campaign_id, 'email-activity'),
                         types.EmailActivity, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset, since=since)

    def member_email_activity(self, campaign_id: str, email_or_hash: str, *, fields=(),
                              exclude_fields=()) -> types.MemberEmailActivity:
        return self._get(encode_path('reports', campaign_id, 'email-activity',
                                     subscriber_hash(email_or_hash)),
                         types.MemberEmailActivity, fields=fields, exclude_fields=exclude_fields)

    def locations(self, campaign_id: str, *, fields=(), exclude_fields=(), count=0,
                  offset=0) -> types.OpenLocations:
        return self._get(encode_path('reports', campaign_id, 'locations'), types.OpenLocations,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def sent_to(self, campaign_id: str, *, fields=(), exclude_fields=(), count=0,
                offset=0) -> types.SentTo:
        return self._get(encode_path('reports', campaign_id, 'sent-to'), types.SentTo,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def sub_reports(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.SubReports:
        """The reports of the child campaigns of an A/B split or RSS campaign."""
        return self._get(encode_path('reports', campaign_id, 'sub-reports'), types.SubReports,
                         fields=fields, exclude_fields=exclude_fields)

    def unsubscribed(self, campaign_id: str, *, fields=(), exclude_fields=(), count=0,
                     offset=0) -> types.Unsubscribes:
        return self._get(encode_path('reports', campaign_id, 'unsubscribed'), types.Unsubscribes,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)
