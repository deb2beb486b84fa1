from datetime import datetime
from typing import Optional, Sequence

from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class Campaigns(Resource):
    """/campaigns"""

    def list(
        self,
        *,
        fields: Sequence[str] = (),
        exclude_fields: Sequence[str] = (),
        count: int = 0,
        offset: int = 0,
        type: types.CampaignType = types.CampaignType.noop,
        status: types.GetCampaignsStatus = types.GetCampaignsStatus.noop,
        before_send_time: Optional[datetime] = None,
        since_send_time: Optional[datetime] = None,
        before_create_time: Optional[datetime] = None,
        since_create_time: Optional[datetime] = None,
        list_id: str = '',
        folder_id: str = '',
        member_id: str = '',
        sort_field: types.SortField = types.SortField.noop,
        sort_dir: types.SortDir = types.SortDir.noop,
    ) -> types.Campaigns:
        return self._get(
            '/campaigns', types.Campaigns,
            fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
            type=type, status=status,
            before_send_time=before_send_time, since_send_time=since_send_time,
            before_create_time=before_create_time, since_create_time=since_create_time,
            list_id=list_id, folder_id=folder_id, member_id=member_id,
            sort_field=sort_field, sort_dir=sort_dir,
        )

    def list_all(
        self,
        *,
        type: types.CampaignType = types.CampaignType.noop,
        status: types.GetCampaignsStatus = types.GetCampaignsStatus.noop,
        list_id: str = '',
        folder_id: str = '',
        sort_field: types.SortField = types.SortField.noop,
        sort_dir: types.SortDir = types.SortDir.noop,
    ):
        """Iterate over all campaigns, across pages."""
        return self._paginate(
            '/campaigns', types.Campaigns, 'campaigns',
            type=type, status=status, list_id=list_id, folder_id=folder_id,
            sort_field=sort_field, sort_dir=sort_dir,
        )

    def create(self, campaign: types.CreateCampaign) -> types.Campaign:
        return self.client.post('/campaigns', body=campaign, response_type=types.Campaign)

    def get(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.Campaign:
        return self._get(encode_path('campaigns', campaign_id), types.Campaign,
                         fields=fields, exclude_fields=exclude_fields)

    def update(self, campaign_id: str, campaign: types.UpdateCampaign) -> types.Campaign:
        return self.client.patch(encode_path('campaigns', campaign_id),
                                 body=campaign, response_type=types.Campaign)

    def delete(self, campaign_id: str):
        self.client.delete(encode_path('campaigns', campaign_id))

    def _action(self, campaign_id, action, body=None, response_type=None):
        return self.client.post(
            encode_path('campaigns', campaign_id, 'actions', action),
            body=body, response_type=response_type)

    def cancel_send(self, campaign_id: str):
        """Cancel a Regular or Plain-Text campaign after sending it. Mailchimp Pro only."""
        self._action(campaign_id, 'cancel-send')

    def replicate(self, campaign_id: str) -> types.Campaign:
        return self._action(campaign_id, 'replicate', response_type=types.Campaign)

    def send(self, campaign_id: str):
        self._action(campaign_id, 'send')

    def schedule(self, campaign_id: str, schedule: types.ScheduleCampaign):
        self._action(campaign_id, 'schedule', body=schedule)

    def unschedule(self, campaign_id: str):
        self._action(campaign_id, 'unschedule')

    def test(self, campaign_id: str, test: types.TestCampaign):
        self._action(campaign_id, 'test', body=test)

    def pause(self, campaign_id: str):
        """Pause an RSS campaign."""
        self._action(campaign_id, 'pause')

    def resume(self, campaign_id: str):
        """Resume an RSS campaign."""
        self._action(campaign_id, 'resume')

    def create_resend(self, campaign_id: str, resend: Optional[types.ResendCampaign] = None) -> types.Campaign:
        return self._action(campaign_id, 'create-resend', body=resend, response_type=types.Campaign)

    def get_content(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.CampaignContent:
        return self._get(encode_path('campaigns', campaign_id, 'content'), types.CampaignContent,
                         fields=fields, exclude_fields=exclude_fields)

    def set_content(self, campaign_id: str, content: types.SetCampaignContent) -> types.CampaignContent:
        return self.client.put(encode_path('campaigns', campaign_id, 'content'),
                               body=content, response_type=types.CampaignContent)

    def send_checklist(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.SendChecklist:
        return self._get(encode_path('campaigns', campaign_id, 'send-checklist'), types.SendChecklist,
                         fields=fields, exclude_fields=exclude_fields)

    def list_feedback(self, campaign_id: str, *, fields=(), exclude_fields=()) -> types.CampaignFeedback:
        return self._get(encode_path('campaigns', campaign_id, 'feedback'), types.CampaignFeedback,
                         fields=fields, exclude_fields=exclude_fields)

    def add_feedback(self, campaign_id: str, feedback: types.AddFeedback) -> types.Feedback:
        return self.client.post(encode_path('campaigns', campaign_id, 'feedback'),
                                body=feedback, response_type=types.Feedback)

    def get_feedback(self, campaign_id: str, feedback_id: str, *, fields=(), exclude_fields=()) -> types.Feedback:
        return self._get(encode_path('campaigns', campaign_id, 'feedback', feedback_id), types.Feedback,
                         fields=fields, exclude_fields=exclude_fields)

    def update_feedback(self, campaign_id: str, feedback_id: str, feedback: types.UpdateFeedback) -> types.Feedback:
        return self.client.patch(encode_path('campaigns', campaign_id, 'feedback', feedback_id),
                                 body=feedback, response_type=types.Feedback)

    def delete_feedback(self, campaign_id: str, feedback_id: str):
        self.client.delete(encode_path('campaigns', campaign_id, 'feedback', feedback_id))


class CampaignFolders(Resource):
    """/campaign-folders"""

    def list(self, *, fields=(), exclude_fields=(), count=0, offset=0) -> types.CampaignFolders:
        return self._get('/campaign-folders', types.CampaignFolders, fields=fields,
                         exclude_fields=exclude_fields, count=count, offset=offset)

    def create(self, name: str) -> types.CampaignFolder:
        return self.client.post('/campaign-folders', body=types.GalleryFolder(name=name),
                                response_type=types.CampaignFolder)

    def get(self, folder_id: str, *, fields=(), exclude_fields=()) -> types.CampaignFolder:
        return self._get(encode_path('campaign-folders', folder_id), types.CampaignFolder,
                         fields=fields, exclude_fields=exclude_fields)

    def update(self, folder_id: str, name: str) -> types.CampaignFolder:
        return self.client.patch(encode_path('campaign-folders', folder_id),
                                 body=types.GalleryFolder(name=name), response_type=types.CampaignFolder)

    def delete(self, folder_id: str):
        self.client.delete(encode_path('campaign-folders', folder_id))
