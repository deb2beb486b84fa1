import pytest

from mailchimp_api.config import Config, load_config, DEFAULT_TIMEOUT
from mailchimp_api.errors import ConfigurationError


def test_load_from_environ():
    config = load_config({
        'MAILCHIMP_CLIENT_ID': 'id',
        'MAILCHIMP_CLIENT_SECRET': 'secret',
        'MAILCHIMP_REDIRECT_URI': 'https://example.com/cb',
        'MAILCHIMP_API_KEY': 'key-us6',
        'MAILCHIMP_HOST': 'https://us6.api.mailchimp.com/3.0',
        'MAILCHIMP_TIMEOUT': '5',
    })

    assert config == Config(
        client_id='id',
        client_secret='secret',
        redirect_uri='https://example.com/cb',
        api_key='key-us6',
        host='https://us6.api.mailchimp.com/3.0',
        timeout=5.0,
    )
    config.require_oauth()


def test_defaults():
    config = load_config({})
    assert config == Config()
    assert config.timeout == DEFAULT_TIMEOUT


def test_invalid_timeout():
    with pytest.raises(ConfigurationError):
        load_config({'MAILCHIMP_TIMEOUT': 'soon'})


def test_require_oauth_names_missing_variables():
    config = load_config({'MAILCHIMP_CLIENT_ID': 'id'})

    with pytest.raises(ConfigurationError) as excinfo:
        config.require_oauth()

    message = str(excinfo.value)
    assert 'MAILCHIMP_CLIENT_SECRET' in message
    assert 'MAILCHIMP_REDIRECT_URI' in message
    assert 'MAILCHIMP_CLIENT_ID' not in message


def test_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / '.env').write_text('MAILCHIMP_API_KEY=from-dotenv-us3\n')
    monkeypatch.chdir(tmp_path)
    # Registers the variable to be removed again after the test.
    monkeypatch.setenv('MAILCHIMP_API_KEY', 'placeholder')
    monkeypatch.delenv('MAILCHIMP_API_KEY')

    assert load_config().api_key == 'from-dotenv-us3'
