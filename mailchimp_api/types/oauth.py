"""The OAuth token endpoint's response."""

from mailchimp_api.models import model, attrib


@model
class AccessToken:
    access_token: str = ''
    token_type: str = ''
    # Seconds. Mailchimp tokens usually never expire, and send 0.
    expires_in: int = 0
    refresh_token: str = ''
    refresh_token_expires_in: int = attrib(
        default=0, aliases=('x_refresh_token_expires_in',))
    scope: str = ''
