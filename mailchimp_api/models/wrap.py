"""
We wrap attrs. It is just flexible enough to support what we need.
"""

import attr

from .marshal import marshallable


def attrib(*, data_key=None, aliases=(), keep_empty=False, **kwargs):
    """Like `attr.ib`, but knows about the JSON side of the property.

    `data_key` - the key in JSON, if it cannot be derived from the attribute
        name (for example `_links`).
    `aliases` - other keys Mailchimp is known to use for the same value.
    `keep_empty` - serialize the value even if it is empty.
    """
    metadata = dict(kwargs.pop('metadata', None) or {})
    if data_key:
        metadata['data_key'] = data_key
    if aliases:
        metadata['aliases'] = tuple(aliases)
    if keep_empty:
        metadata['keep_empty'] = True

    return attr.ib(metadata=metadata, **kwargs)


def model(maybe_cls=None):
    def wrap(cls):
        attr_class = attr.s(
            # Slots would break the class-level helpers some models define
            # (`will_handle`), and we do not deal with enough objects to care.
            slots=False,

            auto_attribs=True,
            kw_only=True
        )(cls)

        # Add the marshal helpers.
        return marshallable(attr_class)

    if maybe_cls is None:
        return wrap
    else:
        return wrap(maybe_cls)
