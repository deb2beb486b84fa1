"""Templates and template folders."""

from datetime import datetime
from typing import List, Optional, Dict, Any

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Link, Links, NonNegativeInt


class TemplateType(ApiEnum):
    user = 'user'
    base = 'base'
    gallery = 'gallery'
    noop = ''
    fallthrough_string = '*'


class SortTemplatesField(ApiEnum):
    date_created = 'date_created'
    date_edited = 'date_edited'
    name_ = 'name'
    noop = ''
    fallthrough_string = '*'


@model
class Template:
    """GET /templates/{template_id}"""
    id: int = 0
    type_: TemplateType = TemplateType.noop
    name: str = ''
    drag_and_drop: bool = False
    responsive: bool = False
    category: str = ''
    date_created: Optional[datetime] = None
    date_edited: Optional[datetime] = None
    created_by: str = ''
    edited_by: str = ''
    active: bool = False
    folder_id: str = ''
    thumbnail: str = ''
    share_url: str = ''
    content_type: str = ''
    links: List[Link] = Links()


@model
class Templates:
    """GET /templates"""
    templates: List[Template] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateTemplate:
    """The body for creating or updating a template."""
    name: str
    html: str
    folder_id: str = ''


@model
class TemplateDefaultContent:
    """GET /templates/{template_id}/default-content

    `sections` maps the editable section names of the template to their
    default content.
    """
    sections: Dict[str, Any] = Factory(dict)
    links: List[Link] = Links()


@model
class TemplateFolder:
    id: str = ''
    name: str = ''
    count: int = NonNegativeInt()
    links: List[Link] = Links()


@model
class TemplateFolders:
    """GET /template-folders"""
    folders: List[TemplateFolder] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()
