"""Batch operations and batch webhooks."""

from datetime import datetime
from typing import List, Optional, Dict, Any

from mailchimp_api.models import model, attrib, ApiEnum, Factory
from mailchimp_api.types.common import HttpMethod, Link, Links


class BatchStatus(ApiEnum):
    pending = 'pending'
    preprocessing = 'preprocessing'
    started = 'started'
    finalizing = 'finalizing'
    finished = 'finished'
    noop = ''
    fallthrough_string = '*'


@model
class Operation:
    """One request in a batch.

    `params` are the query arguments, `body` the JSON body as a string.
    """
    method: HttpMethod
    path: str
    params: Dict[str, Any] = Factory(dict)
    body: str = ''
    operation_id: str = ''


@model
class CreateBatch:
    """The body for POST /batches."""
    operations: List[Operation]


@model
class Batch:
    """GET /batches/{batch_id}"""
    id: str = ''
    status: BatchStatus = BatchStatus.noop
    total_operations: int = 0
    finished_operations: int = 0
    errored_operations: int = 0
    submitted_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    response_body_url: str = ''
    links: List[Link] = Links()


@model
class Batches:
    """GET /batches"""
    batches: List[Batch] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class BatchWebhook:
    id: str = ''
    url: str = ''
    enabled: bool = False
    links: List[Link] = Links()


@model
class BatchWebhooks:
    """GET /batch-webhooks"""
    webhooks: List[BatchWebhook] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class AddBatchWebhook:
    """The body for creating or updating a batch webhook."""
    url: str
    # Mailchimp defaults new webhooks to enabled, so an explicit false must be sent.
    enabled: bool = attrib(default=True, keep_empty=True)
