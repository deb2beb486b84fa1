"""Domains verified for sending email."""

from typing import List

from mailchimp_api.models import model, Factory
from mailchimp_api.types.common import Link, Links


@model
class VerifiedDomain:
    """GET /verified-domains/{domain_name}"""
    domain: str = ''
    verified: bool = False
    authenticated: bool = False
    verification_email: str = ''
    verification_sent: str = ''
    links: List[Link] = Links()


@model
class VerifiedDomains:
    """GET /verified-domains"""
    domains: List[VerifiedDomain] = Factory(list)
    total_items: int = 0


@model
class CreateVerifiedDomain:
    """The body for POST /verified-domains; Mailchimp emails a code to `verification_email`."""
    verification_email: str


@model
class VerifyDomain:
    """The body for POST /verified-domains/{domain_name}/actions/verify."""
    code: str
