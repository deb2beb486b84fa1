"""Conversations: replies to campaigns, collected by Mailchimp."""

from datetime import datetime
from typing import List, Optional

from mailchimp_api.models import model, Factory
from mailchimp_api.types.common import Link, Links


@model
class ConversationMessageSummary:
    id: str = ''
    conversation_id: str = ''
    list_id: int = 0
    from_label: str = ''
    from_email: str = ''
    subject: str = ''
    message: str = ''
    read: bool = False
    timestamp: Optional[datetime] = None
    links: List[Link] = Links()


@model
class Conversation:
    """GET /conversations/{conversation_id}"""
    id: str = ''
    message_count: int = 0
    campaign_id: str = ''
    list_id: str = ''
    unread_messages: int = 0
    from_label: str = ''
    from_email: str = ''
    subject: str = ''
    last_message: Optional[ConversationMessageSummary] = None
    links: List[Link] = Links()


@model
class Conversations:
    """GET /conversations"""
    conversations: List[Conversation] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class ConversationMessage(ConversationMessageSummary):
    """GET /conversations/{conversation_id}/messages/{message_id}"""


@model
class ConversationMessages:
    """GET /conversations/{conversation_id}/messages"""
    conversation_messages: List[ConversationMessage] = Factory(list)
    conversation_id: str = ''
    total_items: int = 0
    links: List[Link] = Links()
