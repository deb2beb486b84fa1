"""
A client for the Mailchimp Marketing API, v3.0.

With OAuth:

    client = Client.from_env()
    url = client.user_consent_url()
    # ... redirect the user, capture `code` and `state` on the redirect URI
    client.get_access_token(code, state)

    for campaign in client.campaigns.list_all():
        print(campaign.settings.title)

Or with an API key:

    client = Client.from_api_key('0123456789abcdef-us6')
"""

import copy
import json
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Iterator, Any, Dict
from urllib.parse import urlencode

import requests
from marshmallow import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from mailchimp_api.config import load_config, DEFAULT_TIMEOUT
from mailchimp_api.errors import APIError, ConfigurationError, InvalidResponse, TokenError
from mailchimp_api.json import MailchimpJSONEncoder
from mailchimp_api.types import AccessToken
from mailchimp_api import resources


log = logging.getLogger(__name__)


DEFAULT_HOST = 'https://us1.api.mailchimp.com/3.0'
TOKEN_ENDPOINT = 'https://login.mailchimp.com/oauth2/token'
USER_CONSENT_ENDPOINT = 'https://login.mailchimp.com/oauth2/authorize'

# A token is considered expired this long before it actually expires, so that
# a request does not race its expiry.
REFRESH_THRESHOLD = timedelta(seconds=60)

RETRY_STATUSES = (429, 500, 502, 503, 504)


class LoggingRetry(Retry):
    """Logs each retry at WARNING before it happens."""

    def increment(self, method=None, url=None, response=None, error=None, **kwargs):
        retry = super().increment(method, url, response=response, error=error, **kwargs)
        cause = error if error is not None else getattr(response, 'status', None)
        log.warning('Retrying %s %s after %s (%s left)', method, url, cause, retry.total)
        return retry


def make_session(retries=3, backoff_factor=0.5) -> requests.Session:
    """A session which retries connection errors and transient error statuses.

    Only idempotent methods are retried; a POST may have had an effect even
    if we never saw the response.
    """
    retry = LoggingRetry(
        total=retries,
        backoff_factor=backoff_factor,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=Retry.DEFAULT_ALLOWED_METHODS,
        raise_on_status=False,
    )
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=retry)
    session.mount('https://', adapter)
    session.mount('http://', adapter)
    return session


def host_from_api_key(api_key: str) -> str:
    """API keys end in the data center of the account: "...-us6"."""
    _, sep, datacenter = api_key.rpartition('-')
    if not sep or not datacenter:
        raise ConfigurationError(
            'The API key does not end in a data center, like "-us6"')
    return f'https://{datacenter}.api.mailchimp.com/3.0'


class Client:

    def __init__(
        self,
        client_id: str = '',
        client_secret: str = '',
        redirect_uri: str = '',
        token: str = '',
        refresh_token: str = '',
        *,
        api_key: str = '',
        host: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.token = token
        self.refresh_token = refresh_token
        self.api_key = api_key
        self.host = (host or DEFAULT_HOST).rstrip('/')
        self.timeout = timeout
        self.session = session or make_session()

        self.auto_refresh = False
        self._expires_at: Optional[datetime] = None

    @classmethod
    def from_env(cls, token: str = '', refresh_token: str = '', **kwargs) -> 'Client':
        """An OAuth client configured from the environment (see `mailchimp_api.config`).

        Pass the tokens if you have stored them from an earlier authorization.
        """
        config = load_config()
        config.require_oauth()
        return cls(
            config.client_id,
            config.client_secret,
            config.redirect_uri,
            token,
            refresh_token,
            host=config.host or None,
            timeout=config.timeout,
            **kwargs
        )

    @classmethod
    def from_api_key(cls, api_key: str, *, host: Optional[str] = None, **kwargs) -> 'Client':
        if not api_key:
            raise ConfigurationError('An API key is required')
        return cls(api_key=api_key, host=host or host_from_api_key(api_key), **kwargs)

    def with_host(self, host: str) -> 'Client':
        """A copy of this client which talks to `host`."""
        client = copy.copy(self)
        client.host = host.rstrip('/')
        return client

    #### Token lifecycle

    def set_auto_access_token_refresh(self, enabled: bool) -> 'Client':
        """Refresh the access token before a request, if we know it has expired."""
        self.auto_refresh = enabled
        return self

    @property
    def expires_at(self) -> Optional[datetime]:
        return self._expires_at

    @expires_at.setter
    def expires_at(self, value: Optional[datetime]):
        self._expires_at = value

    def set_expires_in(self, expires_in: int) -> 'Client':
        self._expires_at = self._compute_expires_at(expires_in)
        return self

    def expires_in(self) -> Optional[timedelta]:
        """Time until the token should be refreshed, or None if unknown."""
        if self._expires_at is None:
            return None
        return max(self._expires_at - datetime.now(timezone.utc), timedelta(0))

    def is_expired(self) -> Optional[bool]:
        if self._expires_at is None:
            return None
        return self._expires_at <= datetime.now(timezone.utc)

    @staticmethod
    def _compute_expires_at(expires_in: int) -> datetime:
        valid_for = max(timedelta(seconds=expires_in) - REFRESH_THRESHOLD, timedelta(0))
        return datetime.now(timezone.utc) + valid_for

    #### OAuth

    def user_consent_url(self, scopes=()) -> str:
        """The URL to send the user to, to authorize this app.

        A random `state` is included; scopes are only added if given.
        """
        query = {
            'client_id': self.client_id,
            'response_type': 'code',
            'redirect_uri': self.redirect_uri,
            'state': str(uuid.uuid4()),
        }
        if scopes:
            query['scope'] = ' '.join(scopes)
        return f'{USER_CONSENT_ENDPOINT}?{urlencode(query)}'

    def get_access_token(self, code: str, state: str) -> AccessToken:
        """Exchange the `code` given to the redirect URI for an access token."""
        token = self._request_token({
            'grant_type': 'authorization_code',
            'code': code,
            'client_id': self.client_id,
            'client_secret': self.client_secret,
            'redirect_uri': self.redirect_uri,
            'state': state,
        })
        self.token = token.access_token
        self.refresh_token = token.refresh_token
        self._expires_at = self._compute_expires_at(token.expires_in)
        return token

    def refresh_access_token(self) -> AccessToken:
        if not self.refresh_token:
            raise TokenError('Cannot refresh the access token without a refresh token')

        log.info('Refreshing the access token')
        token = self._request_token({
            'grant_type': 'refresh_token',
            'refresh_token': self.refresh_token,
            'client_id': self.client_id,
            'client_secret': self.client_secret,
            'redirect_uri': self.redirect_uri,
        })
        # Mailchimp does not rotate refresh tokens.
        self.token = token.access_token
        self._expires_at = self._compute_expires_at(token.expires_in)
        return token

    def _request_token(self, form: Dict[str, str]) -> AccessToken:
        try:
            response = self.session.post(
                TOKEN_ENDPOINT,
                data=form,
                auth=(self.client_id, self.client_secret),
                headers={'Accept': 'application/json'},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TokenError(f'Token request failed: {exc}') from exc

        if not response.ok:
            log.warning('Token request failed with %s: %s', response.status_code, response.text)
            raise TokenError(
                f'Token request failed with {response.status_code}: {response.text}')

        try:
            return AccessToken.unmarshal(response.json())
        except (ValueError, ValidationError) as exc:
            raise TokenError(f'Invalid token response: {exc}') from exc

    #### Requests

    def url(self, path: str) -> str:
        if path.startswith('https://') or path.startswith('http://'):
            return path
        return self.host + path

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
        response_type=None,
    ):
        """Send a request, and decode the response into `response_type`.

        `body` can be a model, or plain JSON data, which can contain models.
        Returns None if there is no `response_type`, or Mailchimp answered
        with 204 No Content.
        """
        if self.auto_refresh and self.is_expired():
            self.refresh_access_token()

        url = self.url(path)
        headers = {'Accept': 'application/json'}
        data = None
        if body is not None:
            data = json.dumps(body, cls=MailchimpJSONEncoder)
            headers['Content-Type'] = 'application/json'

        auth = None
        if self.api_key:
            # Any username works.
            auth = ('anystring', self.api_key)
        elif self.token:
            headers['Authorization'] = f'Bearer {self.token}'

        log.debug('%s %s params=%s', method, url, params)
        if data is not None:
            log.debug('Request body: %s', data)

        response = self.session.request(
            method, url, params=params, data=data, headers=headers, auth=auth,
            timeout=self.timeout)

        if not response.ok:
            log.warning('%s %s failed with %s', method, url, response.status_code)
            raise APIError.from_response(response)

        if response.status_code == 204 or response_type is None:
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidResponse(f'Response to {method} {url} is not JSON') from exc
        log.debug('Response payload: %s', payload)

        try:
            return response_type.unmarshal(payload)
        except ValidationError as exc:
            raise InvalidResponse(
                f'Response to {method} {url} is not a valid {response_type.__name__}: {exc.messages}',
                validation_error=exc
            ) from exc

    def get(self, path, **kwargs):
        return self.request('GET', path, **kwargs)

    def post(self, path, **kwargs):
        return self.request('POST', path, **kwargs)

    def put(self, path, **kwargs):
        return self.request('PUT', path, **kwargs)

    def patch(self, path, **kwargs):
        return self.request('PATCH', path, **kwargs)

    def delete(self, path, **kwargs):
        return self.request('DELETE', path, **kwargs)

    def paginate(
        self,
        path: str,
        response_type,
        items_attr: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        page_size: int = 1000
    ) -> Iterator:
        """Iterate over every item of a collection, a page at a time.

        `items_attr` names the list in `response_type` which holds the items,
        for example "campaigns" for `Campaigns`.
        """
        params = dict(params or {})
        offset = 0
        while True:
            page = self.get(path, params={**params, 'count': page_size, 'offset': offset},
                            response_type=response_type)
            items = getattr(page, items_attr)
            yield from items

            offset += len(items)
            if not items or offset >= page.total_items:
                break

    #### Resources

    @property
    def activity_feed(self):
        return resources.ActivityFeed(self)

    @property
    def authorized_apps(self):
        return resources.AuthorizedApps(self)

    @property
    def automations(self):
        return resources.Automations(self)

    @property
    def batch_webhooks(self):
        return resources.BatchWebhooks(self)

    @property
    def batches(self):
        return resources.Batches(self)

    @property
    def campaign_folders(self):
        return resources.CampaignFolders(self)

    @property
    def campaigns(self):
        return resources.Campaigns(self)

    @property
    def connected_sites(self):
        return resources.ConnectedSites(self)

    @property
    def conversations(self):
        return resources.Conversations(self)

    @property
    def ecommerce(self):
        return resources.Ecommerce(self)

    @property
    def file_manager(self):
        return resources.FileManager(self)

    @property
    def landing_pages(self):
        return resources.LandingPages(self)

    @property
    def lists(self):
        return resources.Lists(self)

    @property
    def ping(self):
        return resources.Ping(self)

    @property
    def reports(self):
        return resources.Reports(self)

    @property
    def root(self):
        return resources.Root(self)

    @property
    def search_campaigns(self):
        return resources.SearchCampaigns(self)

    @property
    def search_members(self):
        return resources.SearchMembers(self)

    @property
    def template_folders(self):
        return resources.TemplateFolders(self)

    @property
    def templates(self):
        return resources.Templates(self)

    @property
    def verified_domains(self):
        return resources.VerifiedDomains(self)
