"""Apps the account has authorized through OAuth."""

from typing import List

from mailchimp_api.models import model, Factory
from mailchimp_api.types.common import Link, Links


@model
class AuthorizedApp:
    id: int = 0
    name: str = ''
    description: str = ''
    users: List[str] = Factory(list)
    links: List[Link] = Links()


@model
class AuthorizedApps:
    """GET /authorized-apps"""
    apps: List[AuthorizedApp] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()
