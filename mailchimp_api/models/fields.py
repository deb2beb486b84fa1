import datetime
from marshmallow import fields


def serialize_iso8601(date):
    """
    Mailchimp wants ISO 8601 with an offset: 2015-10-21T15:41:36+00:00.

    A naive datetime is taken to be UTC.
    """
    if date.utcoffset() is None:
        date = date.replace(tzinfo=datetime.timezone.utc)

    # Remove the fractions
    date = date.replace(microsecond=0)

    return date.isoformat()


def deserialize_iso8601(date):
    # fromisoformat() only learned about "Z" in Python 3.11
    if date.endswith('Z'):
        date = date[:-1] + '+00:00'
    return datetime.datetime.fromisoformat(date)


class MailchimpDateTime(fields.DateTime):
    """
    Mailchimp uses ISO 8601 timestamps, but when a timestamp is not set, it
    tends to send an empty string rather than null or nothing. We read the
    empty string as None.

    We parse whatever offset we get and give back a tz-aware datetime object.
    """

    SERIALIZATION_FUNCS = {
        **fields.DateTime.SERIALIZATION_FUNCS,
        'mailchimp-iso8601': serialize_iso8601
    }

    DESERIALIZATION_FUNCS = {
        **fields.DateTime.DESERIALIZATION_FUNCS,
        'mailchimp-iso8601': deserialize_iso8601
    }

    DEFAULT_FORMAT = 'mailchimp-iso8601'

    def _deserialize(self, value, attr, data, **kwargs):
        if value == '':
            return None
        return super()._deserialize(value, attr, data, **kwargs)
