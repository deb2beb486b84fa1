from marshmallow import ValidationError

from mailchimp_api.types.common import ProblemDetailDocument


class MailchimpError(Exception):
    pass


class ConfigurationError(MailchimpError):
    """The client is missing configuration it needs, or it is invalid."""


class TokenError(MailchimpError):
    """Getting or refreshing an OAuth token failed, or was not possible."""


class InvalidResponse(MailchimpError):
    """
    Mailchimp answered with a success status, but the body did not have the
    shape we expected.
    """

    def __init__(self, description, validation_error=None):
        super().__init__(description)
        self.description = description
        self.validation_error = validation_error


class APIError(MailchimpError):
    """
    Mailchimp answered with an error status.

    The body is a problem detail document
    (https://mailchimp.com/developer/marketing/docs/errors/), which we unpack
    into the attributes here.
    """

    typename = None
    statuscode = None

    def __init__(self, status=None, title='', detail='', type='', instance='', errors=None):
        super().__init__(f'{status} {title}: {detail}' if title else f'{status}: {detail}')
        self.status = status if status is not None else self.statuscode
        self.title = title
        self.detail = detail
        self.type = type
        self.instance = instance
        self.errors = errors or []

    def to_json(self):
        result = {
            'type': self.type,
            'title': self.title,
            'status': self.status,
            'detail': self.detail,
            'instance': self.instance,
        }
        if self.errors:
            result['errors'] = [e.marshal() for e in self.errors]
        return result

    @staticmethod
    def from_response(response) -> 'APIError':
        """Build the right error for a `requests.Response` with an error status."""
        klass = ERRORS_BY_STATUS.get(response.status_code, APIError)

        try:
            document = ProblemDetailDocument.unmarshal(response.json())
        except (ValueError, ValidationError):
            # Not JSON, or not a problem document; a proxy in between may have answered.
            return klass(status=response.status_code, title=response.reason or '',
                         detail=response.text)

        return klass(
            status=response.status_code,
            title=document.title,
            detail=document.detail,
            type=document.type_,
            instance=document.instance,
            errors=document.errors,
        )


class BadRequest(APIError):
    typename = 'BadRequest'
    statuscode = 400


class Unauthorized(APIError):
    """API key or token missing, or invalid."""
    typename = 'APIKeyInvalid'
    statuscode = 401


class Forbidden(APIError):
    typename = 'Forbidden'
    statuscode = 403


class ResourceNotFound(APIError):
    typename = 'ResourceNotFound'
    statuscode = 404


class MethodNotAllowed(APIError):
    typename = 'MethodNotAllowed'
    statuscode = 405


class ResourceNestingTooDeep(APIError):
    typename = 'ResourceNestingTooDeep'
    statuscode = 414


class InvalidMethodOverride(APIError):
    typename = 'InvalidMethodOverride'
    statuscode = 422


class TooManyRequests(APIError):
    """More than 10 simultaneous connections."""
    typename = 'TooManyRequests'
    statuscode = 429


class InternalServerError(APIError):
    typename = 'InternalServerError'
    statuscode = 500


class ServiceUnavailable(APIError):
    typename = 'ServiceUnavailable'
    statuscode = 503


ERRORS_BY_STATUS = {
    klass.statuscode: klass
    for klass in (
        BadRequest, Unauthorized, Forbidden, ResourceNotFound, MethodNotAllowed,
        ResourceNestingTooDeep, InvalidMethodOverride, TooManyRequests,
        InternalServerError, ServiceUnavailable,
    )
}
