import enum
import hashlib
import re
from datetime import datetime
from urllib.parse import quote

from mailchimp_api.models.fields import serialize_iso8601


# Subscriber hashes are 32 hex digits.
SUBSCRIBER_HASH = re.compile(r'^[0-9a-f]{32}$', re.IGNORECASE)


def subscriber_hash(email_or_hash: str) -> str:
    """The id of a list member: the MD5 of the lowercased email address.
    Given something which is already a hash, returns it lowercased.
    Given something which is already a hash, returns it as is.
    """
    if SUBSCRIBER_HASH.match(email_or_hash):
        return email_or_hash.lower()
    return hashlib.md5(email_or_hash.lower().encode('utf-8')).hexdigest()


def encode_path(*parts) -> str:
    """Join the given segments into a path, percent-encoding each of them."""
    return ''.join('/' + quote(str(part), safe='') for part in parts)


def query_value(value):
    """How a query argument is sent, or None to leave it out."""
    if value is None:
        return None
    if isinstance(value, enum.Enum):
        return value.value or None
    if isinstance(value, datetime):
        return serialize_iso8601(value)
    if isinstance(value, bool):
        return 'true' if value else None
    if isinstance(value, (list, tuple, set)):
        return ','.join(str(v) for v in value) or None
    if isinstance(value, (int, float)) and value == 0:
        return None
    if value == '':
        return None
    return value


def make_query(**kwargs):
    """Build query arguments, skipping all those which are empty."""
    query = {}
    for key, value in kwargs.items():
        value = query_value(value)
        if value is not None:
            query[key] = value
    return query


class Resource:
    """Base for the groups of endpoints (`client.campaigns`, `client.lists`...)."""

    def __init__(self, client):
        self.client = client

    def _get(self, path, response_type, **query):
        return self.client.get(path, params=make_query(**query), response_type=response_type)

    def _paginate(self, path, response_type, items_attr, **query):
        return self.client.paginate(path, response_type, items_attr, params=make_query(**query))
