"""This is the model system we use for the Mailchimp data types.

Here is what we need from it
----------------------------

1) The models should be fun to use from Python, when writing code against the
   Mailchimp API, providing some amount of validation to help the programmer
   achieve correctness.

2) We need to be able to take the JSON coming back from Mailchimp, validate it,
   and convert it into those objects.

In addition:

3) The Mailchimp API is not consistent about empty values. A string property
   may be missing, may be `""` or may be `null`; timestamps that are not set
   come back as `""`. On the way in, we want all of those to end up as the
   property's default. On the way out, we do not want to send empty values
   at all, since for a PATCH they would overwrite what is on the server.

4) A handful of JSON keys are not valid (or not nice) Python identifiers:
   `_links`, `type`, `from`. The models need to map those.

For this, we use `attrs` combined with `marshmallow`.


Why this combination
--------------------

`attrs` gives us very nice Python models: keyword-only constructors (which avoid
the usual subclassing issues with defaults), MyPy annotations and (some)
runtime validation through validators.

What `attrs` does not do is validating incoming JSON: checking the types,
handling nested objects and lists, and giving us error messages that point to
specific fields. This is what `marshmallow` is good at, so we generate a
`marshmallow` schema from the type annotations of every `attrs` model. See
`marshal.py` for how a type annotation becomes a field.
"""


from attr import Factory

from .enums import ApiEnum
from .wrap import model, attrib
