"""
Configuration from the environment.

A `.env` file in the working directory (or a parent) is loaded first; it does
not override variables which are already set.

    MAILCHIMP_CLIENT_ID        OAuth client id
    MAILCHIMP_CLIENT_SECRET    OAuth client secret
    MAILCHIMP_REDIRECT_URI     OAuth redirect URI
    MAILCHIMP_API_KEY          an API key, as an alternative to OAuth
    MAILCHIMP_HOST             defaults to https://us1.api.mailchimp.com/3.0
    MAILCHIMP_TIMEOUT          request timeout in seconds
"""

import os
from typing import Optional

import attr
import dotenv

from mailchimp_api.errors import ConfigurationError


DEFAULT_TIMEOUT = 30.0

OAUTH_VARIABLES = {
    'client_id': 'MAILCHIMP_CLIENT_ID',
    'client_secret': 'MAILCHIMP_CLIENT_SECRET',
    'redirect_uri': 'MAILCHIMP_REDIRECT_URI',
}


@attr.s(auto_attribs=True, kw_only=True)
class Config:
    client_id: str = ''
    client_secret: str = ''
    redirect_uri: str = ''
    api_key: str = ''
    host: str = ''
    timeout: float = DEFAULT_TIMEOUT

    def require_oauth(self):
        missing = [
            variable for name, variable in OAUTH_VARIABLES.items()
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f'Missing OAuth configuration: {", ".join(missing)} must be set')


def load_config(environ: Optional[dict] = None) -> Config:
    """Read the configuration.

    Pass `environ` to read from a dict instead of the process environment;
    the `.env` file is then not consulted.
    """
    if environ is None:
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
        environ = os.environ

    timeout = environ.get('MAILCHIMP_TIMEOUT') or DEFAULT_TIMEOUT
    try:
        timeout = float(timeout)
    except ValueError:
        raise ConfigurationError(f'MAILCHIMP_TIMEOUT must be a number, got: {timeout}')

    return Config(
        client_id=environ.get('MAILCHIMP_CLIENT_ID', ''),
        client_secret=environ.get('MAILCHIMP_CLIENT_SECRET', ''),
        redirect_uri=environ.get('MAILCHIMP_REDIRECT_URI', ''),
        api_key=environ.get('MAILCHIMP_API_KEY', ''),
        host=environ.get('MAILCHIMP_HOST', ''),
        timeout=timeout,
    )
