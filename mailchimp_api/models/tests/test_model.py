from typing import List

import attr
import pytest

from mailchimp_api.models import model, attrib, Factory


def test_constructor_is_keyword_only():
    """
    `Campaign('x')` does not work; every property is named.
    """
    @model
    class Folder:
        name: str
        count: int = 0

    with pytest.raises(TypeError):
        Folder('x')

    # A property without a default is required
    with pytest.raises(TypeError):
        Folder()

    assert Folder(name='x').count == 0


def test_model_decorator_with_arguments():
    @model()
    class Folder:
        name: str = ''

    assert Folder.unmarshal({'name': 'x'}) == Folder(name='x')


def test_attrib_metadata():
    @model
    class Link:
        target_schema: str = attrib(default='', data_key='targetSchema')
        expires: int = attrib(default=0, aliases=['x_expires', 'expiry'])
        name: str = attrib(default='', keep_empty=True, metadata={'doc': 'kept'})

    target_schema, expires, name = attr.fields(Link)

    assert target_schema.metadata == {'data_key': 'targetSchema'}
    assert expires.metadata == {'aliases': ('x_expires', 'expiry')}
    assert name.metadata == {'doc': 'kept', 'keep_empty': True}


def test_aliases_are_tried_in_order():
    @model
    class Token:
        expires: int = attrib(default=0, aliases=['x_expires', 'expiry'])

    assert Token.unmarshal({'expiry': 2}).expires == 2
    assert Token.unmarshal({'x_expires': 1, 'expiry': 2}).expires == 1


def test_validators_run_on_construction():
    def positive(self, attribute, value):
        if value < 1:
            raise ValueError('must be positive')

    @model
    class Page:
        count: int = attrib(default=1, validator=positive)

    with pytest.raises(ValueError):
        Page(count=0)


def test_instances_can_be_changed():
    """
    Models are not frozen; building a request body step by step is fine.
    """
    @model
    class Settings:
        title: str = ''
        tags: List[str] = Factory(list)

    settings = Settings()
    settings.title = 'Hello'
    settings.tags.append('a')

    assert settings.marshal() == {'title': 'Hello', 'tags': ['a']}
    # Every instance has its own list.
    assert Settings().tags == []
    assert attr.has(Settings)
