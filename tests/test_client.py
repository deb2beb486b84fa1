import json
import logging
from datetime import datetime, timedelta, timezone
from urllib.parse import urlparse, parse_qs

import pytest
import responses
from responses import matchers
from responses.registries import OrderedRegistry

from mailchimp_api import Client
from mailchimp_api.client import TOKEN_ENDPOINT, host_from_api_key, make_session
from mailchimp_api.errors import (
    APIError, BadRequest, ConfigurationError, InternalServerError, InvalidResponse,
    ResourceNotFound, ServiceUnavailable, TokenError, TooManyRequests)
from mailchimp_api.types import ApiHealthStatus, Campaigns


HOST = 'https://us6.api.mailchimp.com/3.0'


@pytest.fixture
def client():
    return Client('client-id', 'client-secret', 'https://example.com/callback',
                  token='access-token', host=HOST, session=make_session(backoff_factor=0))


class TestOAuth:

    def test_user_consent_url(self, client):
        url = urlparse(client.user_consent_url())
        query = parse_qs(url.query)

        assert url.netloc == 'login.mailchimp.com'
        assert url.path == '/oauth2/authorize'
        assert query['client_id'] == ['client-id']
        assert query['response_type'] == ['code']
        assert query['redirect_uri'] == ['https://example.com/callback']
        assert query['state'][0]
        assert 'scope' not in query

        query = parse_qs(urlparse(client.user_consent_url(scopes=['a', 'b'])).query)
        assert query['scope'] == ['a b']

    def test_state_is_random(self, client):
        first = parse_qs(urlparse(client.user_consent_url()).query)['state']
        second = parse_qs(urlparse(client.user_consent_url()).query)['state']
        assert first != second

    @responses.activate
    def test_get_access_token(self, client):
        responses.add(responses.POST, TOKEN_ENDPOINT, json={
            'access_token': 'new-token',
            'token_type': 'bearer',
            'expires_in': 3600,
            'refresh_token': 'refresh-me',
            'scope': None,
        })

        token = client.get_access_token('the-code', 'the-state')

        assert token.access_token == 'new-token'
        assert client.token == 'new-token'
        assert client.refresh_token == 'refresh-me'
        assert client.is_expired() is False

        request = responses.calls[0].request
        form = parse_qs(request.body)
        assert form['grant_type'] == ['authorization_code']
        assert form['code'] == ['the-code']
        assert form['state'] == ['the-state']
        assert form['redirect_uri'] == ['https://example.com/callback']
        assert request.headers['Authorization'].startswith('Basic ')

    @responses.activate
    def test_token_request_fails(self, client):
        responses.add(responses.POST, TOKEN_ENDPOINT, status=400,
                      json={'error': 'invalid_grant'})

        with pytest.raises(TokenError):
            client.get_access_token('the-code', 'the-state')
        assert client.token == 'access-token'

    @responses.activate
    def test_refresh_access_token(self, client):
        client.refresh_token = 'refresh-me'
        responses.add(responses.POST, TOKEN_ENDPOINT, json={
            'access_token': 'fresh-token', 'expires_in': 3600})

        client.refresh_access_token()

        assert client.token == 'fresh-token'
        # Not rotated
        assert client.refresh_token == 'refresh-me'
        form = parse_qs(responses.calls[0].request.body)
        assert form['grant_type'] == ['refresh_token']
        assert form['refresh_token'] == ['refresh-me']

    def test_refresh_without_refresh_token(self, client):
        with pytest.raises(TokenError):
            client.refresh_access_token()

    @responses.activate
    def test_auto_refresh(self, client):
        client.refresh_token = 'refresh-me'
        client.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
        client.set_auto_access_token_refresh(True)

        responses.add(responses.POST, TOKEN_ENDPOINT, json={
            'access_token': 'fresh-token', 'expires_in': 3600})
        responses.add(responses.GET, f'{HOST}/ping', json={'health_status': "Everything's Chimpy!"})

        client.ping.get()

        assert len(responses.calls) == 2
        assert responses.calls[1].request.headers['Authorization'] == 'Bearer fresh-token'

    @responses.activate
    def test_no_refresh_when_disabled(self, client):
        client.refresh_token = 'refresh-me'
        client.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)

        responses.add(responses.GET, f'{HOST}/ping', json={'health_status': 'ok'})
        client.ping.get()

        assert len(responses.calls) == 1


class TestExpiry:

    def test_unknown(self, client):
        assert client.expires_at is None
        assert client.expires_in() is None
        assert client.is_expired() is None

    def test_set_expires_in(self, client):
        client.set_expires_in(3600)

        assert client.is_expired() is False
        remaining = client.expires_in()
        assert timedelta(seconds=3530) < remaining <= timedelta(seconds=3540)

    def test_short_lived_token_is_expired(self, client):
        client.set_expires_in(30)
        assert client.is_expired() is True
        assert client.expires_in() == timedelta(0)


class TestApiKey:

    def test_host_from_api_key(self):
        assert host_from_api_key('0123456789abcdef-us6') == 'https://us6.api.mailchimp.com/3.0'

        with pytest.raises(ConfigurationError):
            host_from_api_key('0123456789abcdef')

    def test_from_api_key(self):
        client = Client.from_api_key('0123456789abcdef-us6')
        assert client.host == HOST

        client = Client.from_api_key('0123456789abcdef-us6', host='http://localhost:8080/3.0/')
        assert client.host == 'http://localhost:8080/3.0'

        with pytest.raises(ConfigurationError):
            Client.from_api_key('')

    @responses.activate
    def test_basic_auth(self):
        client = Client.from_api_key('0123456789abcdef-us6')
        responses.add(responses.GET, f'{HOST}/ping', json={'health_status': 'ok'})

        client.ping.get()

        assert responses.calls[0].request.headers['Authorization'] == \
            'Basic YW55c3RyaW5nOjAxMjM0NTY3ODlhYmNkZWYtdXM2'


class TestRequest:

    @responses.activate
    def test_decodes_response(self, client):
        responses.add(responses.GET, f'{HOST}/ping', json={'health_status': "Everything's Chimpy!"})

        result = client.get('/ping', response_type=ApiHealthStatus)

        assert result == ApiHealthStatus(health_status="Everything's Chimpy!")
        request = responses.calls[0].request
        assert request.headers['Authorization'] == 'Bearer access-token'
        assert request.headers['Accept'] == 'application/json'

    @responses.activate
    def test_absolute_url(self, client):
        responses.add(responses.GET, 'https://us1.api.mailchimp.com/3.0/ping',
                      json={'health_status': 'ok'})
        client.get('https://us1.api.mailchimp.com/3.0/ping', response_type=ApiHealthStatus)

    @responses.activate
    def test_body_is_json(self, client):
        responses.add(responses.POST, f'{HOST}/things', json={})

        client.post('/things', body={
            'when': datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            'health': [ApiHealthStatus(health_status='ok')],
        })

        request = responses.calls[0].request
        assert request.headers['Content-Type'] == 'application/json'
        assert json.loads(request.body) == {
            'when': '2020-01-02T03:04:05+00:00',
            'health': [{'health_status': 'ok'}],
        }

    @responses.activate
    def test_no_content(self, client):
        responses.add(responses.DELETE, f'{HOST}/campaigns/abc', status=204)
        assert client.delete('/campaigns/abc', response_type=Campaigns) is None

    @responses.activate
    def test_no_response_type(self, client):
        responses.add(responses.POST, f'{HOST}/campaigns/abc/actions/send', json={'x': 1})
        assert client.post('/campaigns/abc/actions/send') is None

    @responses.activate
    def test_invalid_response(self, client):
        responses.add(responses.GET, f'{HOST}/ping', json={'health_status': 5})

        with pytest.raises(InvalidResponse) as excinfo:
            client.get('/ping', response_type=ApiHealthStatus)
        assert excinfo.value.validation_error is not None

    @responses.activate
    def test_not_json(self, client):
        responses.add(responses.GET, f'{HOST}/ping', body='<html>', content_type='text/html')

        with pytest.raises(InvalidResponse):
            client.get('/ping', response_type=ApiHealthStatus)


class TestErrors:

    @responses.activate
    def test_problem_document(self, client):
        responses.add(responses.GET, f'{HOST}/campaigns/nope', status=404, json={
            'type': 'https://mailchimp.com/developer/marketing/docs/errors/',
            'title': 'Resource Not Found',
            'status': 404,
            'detail': 'The requested resource could not be found.',
            'instance': '995c5cb0-3280-4a6e-808b-3b096d0bb219',
        })

        with pytest.raises(ResourceNotFound) as excinfo:
            client.campaigns.get('nope')

        error = excinfo.value
        assert error.status == 404
        assert error.title == 'Resource Not Found'
        assert error.detail == 'The requested resource could not be found.'
        assert error.instance == '995c5cb0-3280-4a6e-808b-3b096d0bb219'
        assert error.to_json()['type'].endswith('/errors/')

    @responses.activate
    def test_field_errors(self, client):
        responses.add(responses.POST, f'{HOST}/lists/abc/members', status=400, json={
            'title': 'Invalid Resource',
            'status': 400,
            'detail': 'Your merge fields were invalid.',
            'errors': [{'field': 'FNAME', 'message': 'Please enter a value'}],
        })

        with pytest.raises(BadRequest) as excinfo:
            client.post('/lists/abc/members', body={'email_address': 'x@example.com'})

        assert excinfo.value.errors[0].field == 'FNAME'
        assert excinfo.value.to_json()['errors'] == [
            {'field': 'FNAME', 'message': 'Please enter a value'}]

    @responses.activate
    def test_body_is_not_json(self, client):
        responses.add(responses.GET, f'{HOST}/ping', status=500, body='Bad gateway, probably')

        with pytest.raises(InternalServerError) as excinfo:
            client.ping.get()
        assert excinfo.value.detail == 'Bad gateway, probably'

    @responses.activate
    def test_status_mapping(self, client):
        responses.add(responses.GET, f'{HOST}/ping', status=429, json={'title': 'Too Many Requests'})
        responses.add(responses.GET, f'{HOST}/root', status=418, json={'title': 'Teapot'})

        with pytest.raises(TooManyRequests):
            client.ping.get()

        with pytest.raises(APIError) as excinfo:
            client.get('/root')
        assert type(excinfo.value) is APIError
        assert excinfo.value.status == 418


class TestRetries:

    @responses.activate(registry=OrderedRegistry)
    def test_get_is_retried(self, client, caplog):
        responses.add(responses.GET, f'{HOST}/ping', status=503)
        responses.add(responses.GET, f'{HOST}/ping', status=503)
        responses.add(responses.GET, f'{HOST}/ping', json={'health_status': "Everything's Chimpy!"})

        with caplog.at_level(logging.WARNING, logger='mailchimp_api.client'):
            assert client.ping.get().health_status == "Everything's Chimpy!"

        assert len(responses.calls) == 3
        retries = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(retries) == 2
        assert 'GET' in retries[0].getMessage()
        assert '503' in retries[0].getMessage()

    @responses.activate
    def test_post_is_not_retried(self, client):
        responses.add(responses.POST, f'{HOST}/campaigns/abc/actions/replicate', status=503)

        with pytest.raises(ServiceUnavailable):
            client.campaigns.replicate('abc')
        assert len(responses.calls) == 1

    @responses.activate
    def test_gives_up(self, client):
        responses.add(responses.GET, f'{HOST}/ping', status=503)

        with pytest.raises(ServiceUnavailable):
            client.ping.get()
        assert len(responses.calls) == 4

    @responses.activate
    def test_other_statuses_are_not_retried(self, client):
        responses.add(responses.GET, f'{HOST}/ping', status=404, json={'title': 'Not Found'})

        with pytest.raises(ResourceNotFound):
            client.ping.get()
        assert len(responses.calls) == 1


class TestPaginate:

    @responses.activate
    def test_pages(self, client):
        responses.add(
            responses.GET, f'{HOST}/campaigns',
            match=[matchers.query_param_matcher({'count': '2', 'offset': '0'})],
            json={'campaigns': [{'id': 'a'}, {'id': 'b'}], 'total_items': 3})
        responses.add(
            responses.GET, f'{HOST}/campaigns',
            match=[matchers.query_param_matcher({'count': '2', 'offset': '2'})],
            json={'campaigns': [{'id': 'c'}], 'total_items': 3})

        campaigns = list(client.paginate('/campaigns', Campaigns, 'campaigns', page_size=2))

        assert [c.id for c in campaigns] == ['a', 'b', 'c']
        assert len(responses.calls) == 2

    @responses.activate
    def test_stops_at_empty_page(self, client):
        responses.add(responses.GET, f'{HOST}/campaigns',
                      json={'campaigns': [], 'total_items': 10})

        assert list(client.paginate('/campaigns', Campaigns, 'campaigns')) == []
        assert len(responses.calls) == 1


def test_with_host(client):
    other = client.with_host('https://us2.api.mailchimp.com/3.0/')
    assert other.host == 'https://us2.api.mailchimp.com/3.0'
    assert other.token == client.token
    assert client.host == HOST


def test_from_env(monkeypatch):
    monkeypatch.setenv('MAILCHIMP_CLIENT_ID', 'env-id')
    monkeypatch.setenv('MAILCHIMP_CLIENT_SECRET', 'env-secret')
    monkeypatch.setenv('MAILCHIMP_REDIRECT_URI', 'https://example.com/cb')
    monkeypatch.setenv('MAILCHIMP_HOST', HOST)

    client = Client.from_env(token='stored')

    assert client.client_id == 'env-id'
    assert client.redirect_uri == 'https://example.com/cb'
    assert client.token == 'stored'
    assert client.host == HOST


def test_from_env_incomplete(monkeypatch):
    monkeypatch.setenv('MAILCHIMP_CLIENT_ID', 'env-id')
    monkeypatch.setenv('MAILCHIMP_CLIENT_SECRET', '')
    monkeypatch.setenv('MAILCHIMP_REDIRECT_URI', '')

    with pytest.raises(ConfigurationError) as excinfo:
        Client.from_env()
    assert 'MAILCHIMP_CLIENT_SECRET' in str(excinfo.value)
    assert 'MAILCHIMP_REDIRECT_URI' in str(excinfo.value)
