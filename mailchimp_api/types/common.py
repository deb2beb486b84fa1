"""Building blocks shared by all of the Mailchimp resources.

Mailchimp type guide:

string                  ===>  str = ''
string|null             ===>  str = ''              (null is read as empty)
integer / number        ===>  int = 0 / float = 0.0
boolean                 ===>  bool = False
date-time               ===>  Optional[datetime] = None   ("" is read as None)
array                   ===>  List[X] = Factory(list)
object                  ===>  Optional[Model] = None
fixed vocabulary        ===>  SomeEnum = SomeEnum.noop

Only properties the API needs when creating a resource have no default.

To give more information to an attribute, such as validation logic, write:

    count: int = NonNegativeInt(default=0)
"""

from typing import List, Any, Dict

from mailchimp_api.models import model, attrib, Factory, ApiEnum


def NonNegativeInt(default=0, **kwargs):
    """An integer which must be >= 0.

    This is a `attrib` which defines a validator. Use like this:

        @model
        class Foo:
            bar: int = NonNegativeInt(default=42)
    """
    def not_negative(self, attribute, value):
        if value is not None and value < 0:
            raise ValueError(f'{attribute.name} must be >= 0, but was given: {value}')
    return attrib(validator=not_negative, default=default, **kwargs)


def Constant(value, **kwargs):
    """A property which, if given, must have exactly the value `value`.

    Segment conditions use this for their `condition_type`, and for `field`
    where the condition only ever applies to one field. It is what allows the
    untagged `ConditionsOneOf` union to tell its variants apart.
    """
    def must_equal(self, attribute, given):
        if given != value:
            raise ValueError(f'{attribute.name} must be "{value}", but was given: "{given}"')
    return attrib(validator=must_equal, default=value, **kwargs)


def Links(**kwargs):
    return attrib(data_key='_links', factory=list, **kwargs)


class HttpMethod(ApiEnum):
    """The HTTP method of a link or a batch operation."""

    get = 'GET'
    post = 'POST'
    put = 'PUT'
    patch = 'PATCH'
    delete = 'DELETE'
    options = 'OPTIONS'
    head = 'HEAD'
    noop = ''
    fallthrough_string = '*'


class SortDir(ApiEnum):
    asc = 'ASC'
    desc = 'DESC'
    noop = ''
    fallthrough_string = '*'


@model
class Link:
    """
    Every resource has a `_links` list, pointing to related resources
    (https://mailchimp.com/developer/marketing/docs/methods-parameters/).
    """
    rel: str = ''
    href: str = ''
    method: HttpMethod = HttpMethod.noop
    target_schema: str = attrib(default='', data_key='targetSchema')
    schema: str = ''


@model
class ProblemDetailError:
    field: str = ''
    message: str = ''


@model
class ProblemDetailDocument:
    """
    The body Mailchimp returns for every error: an RFC 7807 problem detail
    document, plus a list of per-field `errors` for validation failures.
    """
    type_: str = ''
    title: str = ''
    status: int = 0
    detail: str = ''
    instance: str = ''
    errors: List[ProblemDetailError] = Factory(list)


@model
class Address:
    address1: str = ''
    address2: str = ''
    city: str = ''
    province: str = ''
    province_code: str = ''
    postal_code: str = ''
    country: str = ''
    country_code: str = ''
    longitude: float = 0.0
    latitude: float = 0.0


@model
class Location:
    latitude: float = 0.0
    longitude: float = 0.0
    gmtoff: int = 0
    dstoff: int = 0
    country_code: str = ''
    timezone: str = ''
    region: str = ''


MergeFields = Dict[str, Any]
