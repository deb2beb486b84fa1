from datetime import datetime
from typing import Optional

from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class Conversations(Resource):
    """/conversations"""

    def list(self, *, fields=(), exclude_fields=(), count=0, offset=0, has_unread_messages='',
             list_id='', campaign_id='') -> types.Conversations:
        # `has_unread_messages` is the string "true" or "false".
        return self._get('/conversations', types.Conversations,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, has_unread_messages=has_unread_messages,
                         list_id=list_id, campaign_id=campaign_id)

    def get(self, conversation_id: str, *, fields=(), exclude_fields=()) -> types.Conversation:
        return self._get(encode_path('conversations', conversation_id), types.Conversation,
                         fields=fields, exclude_fields=exclude_fields)

    def list_messages(self, conversation_id: str, *, fields=(), exclude_fields=(), is_read='',
                      before_timestamp: Optional[datetime] = None,
                      since_timestamp: Optional[datetime] = None) -> types.ConversationMessages:
        return self._get(encode_path('conversations', conversation_id, 'messages'),
                         types.ConversationMessages, fields=fields,
                         exclude_fields=exclude_fields, is_read=is_read,
                         before_timestamp=before_timestamp, since_timestamp=since_timestamp)

    def get_message(self, conversation_id: str, message_id: str, *, fields=(),
                    exclude_fields=()) -> types.ConversationMessage:
        return self._get(encode_path('conversations', conversation_id, 'messages', message_id),
                         types.ConversationMessage, fields=fields, exclude_fields=exclude_fields)
