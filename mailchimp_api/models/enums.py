import enum


class ApiEnum(enum.Enum):
    """
    Base for the fixed string vocabularies of the Mailchimp API.

    Every subclass defines two special members next to the real values:

        noop = ''
        fallthrough_string = '*'

    `noop` is the default, and stands for "not set"; it is never serialized.
    `fallthrough_string` is what any value we do not know about decodes to,
    so that Mailchimp adding a new status does not break decoding a campaign.
    """

    def __str__(self):
        return self.value

    @classmethod
    def default(cls):
        return cls('')

    def is_noop(self):
        return self.value == ''

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.__members__.get('fallthrough_string')
        return None
