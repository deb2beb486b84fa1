from mailchimp_api.client import Client
from mailchimp_api.config import Config, load_config
from mailchimp_api.errors import (
    MailchimpError, ConfigurationError, TokenError, InvalidResponse, APIError)
from mailchimp_api.resources import subscriber_hash
