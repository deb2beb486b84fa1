from datetime import datetime
from typing import Optional

from mailchimp_api.resources.base import Resource, encode_path, subscriber_hash
from mailchimp_api import types


class Automations(Resource):
    """/automations (classic automations)"""

    def list(
        self,
        *,
        fields=(),
        exclude_fields=(),
        count: int = 0,
        offset: int = 0,
        before_create_time: Optional[datetime] = None,
        since_create_time: Optional[datetime] = None,
        before_start_time: Optional[datetime] = None,
        since_start_time: Optional[datetime] = None,
        status: types.AutomationStatus = types.AutomationStatus.noop,
    ) -> types.Automations:
        return self._get(
            '/automations', types.Automations,
            fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
            before_create_time=before_create_time, since_create_time=since_create_time,
            before_start_time=before_start_time, since_start_time=since_start_time,
            status=status,
        )

    def create(self, automation: types.CreateAutomation) -> types.Automation:
        return self.client.post('/automations', body=automation, response_type=types.Automation)

    def get(self, workflow_id: str, *, fields=(), exclude_fields=()) -> types.Automation:
        return self._get(encode_path('automations', workflow_id), types.Automation,
                         fields=fields, exclude_fields=exclude_fields)

    def pause_all_emails(self, workflow_id: str):
        self.client.post(encode_path('automations', workflow_id, 'actions', 'pause-all-emails'))

    def start_all_emails(self, workflow_id: str):
        self.client.post(encode_path('automations', workflow_id, 'actions', 'start-all-emails'))

    def archive(self, workflow_id: str):
        """Archiving stops the automation for good; it cannot be restarted."""
        self.client.post(encode_path('automations', workflow_id, 'actions', 'archive'))

    #### Emails

    def list_emails(self, workflow_id: str) -> types.AutomationEmails:
        return self.client.get(encode_path('automations', workflow_id, 'emails'),
                               response_type=types.AutomationEmails)

    def get_email(self, workflow_id: str, workflow_email_id: str) -> types.AutomationEmail:
        return self.client.get(encode_path('automations', workflow_id, 'emails', workflow_email_id),
                               response_type=types.AutomationEmail)

    def delete_email(self, workflow_id: str, workflow_email_id: str):
        self.client.delete(encode_path('automations', workflow_id, 'emails', workflow_email_id))

    def update_email(self, workflow_id: str, workflow_email_id: str,
                     email: types.UpdateAutomationEmail) -> types.AutomationEmail:
        return self.client.patch(
            encode_path('automations', workflow_id, 'emails', workflow_email_id),
            body=email, response_type=types.AutomationEmail)

    def pause_email(self, workflow_id: str, workflow_email_id: str):
        self.client.post(encode_path(
            'automations', workflow_id, 'emails', workflow_email_id, 'actions', 'pause'))

    def start_email(self, workflow_id: str, workflow_email_id: str):
        self.client.post(encode_path(
            'automations', workflow_id, 'emails', workflow_email_id, 'actions', 'start'))

    #### Queues

    def list_queue(self, workflow_id: str, workflow_email_id: str) -> types.AutomationQueue:
        return self.client.get(
            encode_path('automations', workflow_id, 'emails', workflow_email_id, 'queue'),
            response_type=types.AutomationQueue)

    def add_to_queue(self, workflow_id: str, workflow_email_id: str,
                     email_address: str) -> types.QueuedSubscriber:
        """Manually add a subscriber to a workflow, bypassing the trigger."""
        return self.client.post(
            encode_path('automations', workflow_id, 'emails', workflow_email_id, 'queue'),
            body=types.SubscriberInAutomation(email_address=email_address),
            response_type=types.QueuedSubscriber)

    def get_queued_subscriber(self, workflow_id: str, workflow_email_id: str,
                              email_or_hash: str) -> types.QueuedSubscriber:
        return self.client.get(
            encode_path('automations', workflow_id, 'emails', workflow_email_id, 'queue',
                        subscriber_hash(email_or_hash)),
            response_type=types.QueuedSubscriber)

    #### Removed subscribers

    def list_removed_subscribers(self, workflow_id: str) -> types.RemovedSubscribers:
        return self.client.get(encode_path('automations', workflow_id, 'removed-subscribers'),
                               response_type=types.RemovedSubscribers)

    def remove_subscriber(self, workflow_id: str, email_address: str) -> types.RemovedSubscriber:
        """Remove a subscriber from a workflow; they can never be added back to it."""
        return self.client.post(
            encode_path('automations', workflow_id, 'removed-subscribers'),
            body=types.SubscriberInAutomation(email_address=email_address),
            response_type=types.RemovedSubscriber)

    def get_removed_subscriber(self, workflow_id: str, email_or_hash: str) -> types.RemovedSubscriber:
        return self.client.get(
            encode_path('automations', workflow_id, 'removed-subscribers',
                        subscriber_hash(email_or_hash)),
            response_type=types.RemovedSubscriber)
