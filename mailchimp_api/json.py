import enum
from datetime import datetime
from json import JSONEncoder

from mailchimp_api.models.fields import serialize_iso8601
from mailchimp_api.models.marshal import is_model


class MailchimpJSONEncoder(JSONEncoder):
    """
    Allows models to be used anywhere in a request body, also inside plain
    dicts and lists.
    """

    def default(self, obj):
        if is_model(type(obj)):
            return obj.marshal()
        if isinstance(obj, enum.Enum):
            return obj.value
        if isinstance(obj, datetime):
            return serialize_iso8601(obj)
        return JSONEncoder.default(self, obj)
