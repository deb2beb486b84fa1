"""
This implements a custom marshaling system for `attr` models based on
`marshmallow`.

Use the `@marshallable` decorator on a attr class, and it will add two
methods, `cls.unmarshal` and `instance.marshal` - based on the Python 3
type annotations.


Ultimately, the result will be that:

1. You have the unmodified attr behaviour, which means:

    - Creating a model instance will validate attribute existence,
      and run custom validators, but will not validate types.

    - Properties which have a default value need not be specified.

2. The marshmallow deserialization helpers will:

    - Run any attr validation code.
    - Further validate the types of all properties, including nested
      structures.
    - Map JSON keys which are not valid Python names (`_links`, `type`).
    - Treat a `null` the same as a missing key, if the property has a
      default and its type is not `Optional`. This is how we deal with
      Mailchimp sending `null` where it means "empty".
    - Ignore keys they do not know about.

3. The marshmallow serialization helpers will:

    - Convert enums, datetimes and nested models to JSON.
    - Leave out properties that are empty (None, "", [], {}), unless the
      attribute asks for `keep_empty`.
"""

import enum
from datetime import datetime
from inspect import isclass
from typing import Union, Dict, Tuple, Any, Optional

import attr
import marshmallow
from marshmallow import EXCLUDE, ValidationError, post_load, pre_load, post_dump, fields

from .fields import MailchimpDateTime


NoneType = type(None)


TYPE_MAPPING = {
    str: fields.String,
    float: fields.Float,
    bool: fields.Boolean,
    int: fields.Integer,
    datetime: MailchimpDateTime,
}


def is_model(klass):
    return hasattr(klass, '__marshmallow_schema__')


def is_empty(value):
    if value is None:
        return True
    return isinstance(value, (str, list, dict)) and not value


def get_marshmallow_field_class_from_python_type(klass):
    # Is this another marshallable data class?
    if is_model(klass):
        mm_type = CustomNested
        args = {'nested': klass.__marshmallow_schema__}

    # Is it an enum
    elif isclass(klass) and issubclass(klass, enum.Enum):
        mm_type = EnumField
        args = {'enum': klass}

    # Otherwise, see if this type as a direct mapping to a marshmallow field
    else:
        if not klass in TYPE_MAPPING:
            raise ValueError('%s is not a valid type' % klass)
        mm_type = TYPE_MAPPING[klass]
        args = {}

    return mm_type, args


def make_marshmallow_field_from_python_type(klass):
    mm_type, args = get_marshmallow_field_class_from_python_type(klass)
    return mm_type(**args)


def get_marshmallow_field_class_from_mypy_annotation(mypy_type) -> Tuple[Any, Dict]:
    # Any types we read as "Raw"
    if mypy_type is Any:
        return fields.Raw, {}

    # Resolve MyPy types. Have a look at how this is done in pydantic.fields.py:_populate_sub_fields
    # Indicates a MyPy type; those hide their real type because
    # they do not want `isinstance(foo, Union)` to be abused.
    real_mypy_type = getattr(mypy_type, '__origin__', None)

    if real_mypy_type is Union:
        # Optional[foo] is, in MyPy internally, Union[foo, None]. Anything
        # with more than one real member becomes a PolyField.
        union_types = []
        allow_none = False
        for type_ in mypy_type.__args__:
            if type_ is NoneType:
                allow_none = True
            else:
                union_types.append(type_)

        if len(union_types) > 1:
            field_type = PolyField
            field_args = {
                'union_types': {
                    t: make_marshmallow_field_from_python_type(t)
                    for t in union_types
                },
                'allow_none': allow_none
            }
            return field_type, field_args

        else:
            field_type, field_args = \
                get_marshmallow_field_class_from_mypy_annotation(union_types[0])
            return field_type, {**field_args, 'allow_none': allow_none}

    elif real_mypy_type is list:
        item_type = mypy_type.__args__[0]
        item_field_class, item_field_args =\
            get_marshmallow_field_class_from_mypy_annotation(item_type)

        if issubclass(item_field_class, marshmallow.fields.Nested):
            return item_field_class, {'many': True, **item_field_args}
        else:
            field_instance = item_field_class(**item_field_args)
            return marshmallow.fields.List, {'cls_or_instance': field_instance}

    elif real_mypy_type is dict:
        key_type, value_type = mypy_type.__args__
        key_field = make_marshmallow_field_from_python_type(key_type)
        value_field = make_marshmallow_field_from_mypy_annotation(value_type)

        field_type = fields.Dict
        field_args = {
            'keys': key_field,
            'values': value_field,
        }

        return field_type, field_args

    # Is this another marshallable data class?
    field_type, field_args = get_marshmallow_field_class_from_python_type(mypy_type)
    return field_type, field_args


def make_marshmallow_field_from_mypy_annotation(mypy_type):
    mm_type, args = get_marshmallow_field_class_from_mypy_annotation(mypy_type)
    return mm_type(**args)


def json_key(attr_field):
    """The key in JSON for this field.

    An explicit `data_key` wins; otherwise the attribute name, without the
    trailing underscore we use to avoid Python keywords and builtins (`type_`).
    """
    data_key = attr_field.metadata.get('data_key')
    if data_key:
        return data_key

    name = attr_field.name
    if name.endswith('_'):
        name = name[:-1]
    return name


def make_marshmallow_field(attr_field) -> Optional[fields.Field]:
    """For the given `attr` field, create a `marshmallow` field.

    We convert the field type, attr validators, if the field is required, or allows None.
    """

    field_type, field_args = \
        get_marshmallow_field_class_from_mypy_annotation(attr_field.type)

    # Only do not require it if it has a default. Effectively, marshmallow
    # will return a dict without that field, and attrs will initialize the
    # model with the default value.
    required = attr_field.default is attr.NOTHING

    # Convert validators
    if attr_field.validator:
        def marshmallow_impl(value):
            try:
                attr_field.validator(None, attr_field, value)
            except ValueError as exc:
                # Assume that attrs validators raise a ValueError. Any other exceptions we
                # assume are programming errors and do not catch them.
                raise ValidationError(str(exc))

        assert not 'validate' in field_args
        field_args['validate'] = marshmallow_impl

    return field_type(
        data_key=json_key(attr_field),
        required=required,
        **field_args
    )


def unmarshall_func(cls, input: Dict):
    schema = cls.__marshmallow_schema__()
    return schema.load(input)


def marshall_func(self):
    schema = self.__marshmallow_schema__()
    return schema.dump(self)


def marshallable(attrclass):
    """Adds a `unmarshal` classmethod to the attrs class to create the class from
    incoming unstructured data with validation, and a `marshal` method to go the
    other way.

    To this end, internally constructs a marshmallow schema based on the type
    definitions, and the attrs validators.
    """

    attr_fields = attr.fields(attrclass)
    marshmallow_fields = {
        field.name: make_marshmallow_field(field)
        for field in attr_fields
    }

    # JSON keys where a null means "use the default".
    null_means_default = {
        mm_field.data_key
        for field, mm_field in zip(attr_fields, marshmallow_fields.values())
        if field.default is not attr.NOTHING and not mm_field.allow_none
    }
    aliases = {
        json_key(field): field.metadata['aliases']
        for field in attr_fields
        if field.metadata.get('aliases')
    }
    keep_empty = {
        json_key(field)
        for field in attr_fields
        if field.metadata.get('keep_empty')
    }

    def prepare_input(self, data, **kwargs):
        if not isinstance(data, dict):
            # Let marshmallow report the type error.
            return data

        data = dict(data)
        for key, names in aliases.items():
            if key in data:
                continue
            for alias in names:
                if alias in data:
                    data[key] = data.pop(alias)
                    break

        for key in null_means_default:
            if key in data and data[key] is None:
                del data[key]
        return data

    def make_object(self, data, **kwargs):
        # The part where we convert the validated input data into an actual `attr` instance
        # is here, implemented via marshmallow @post_load. That is, marshmallow itself
        # will give us the instance directly. This is easiest as it means that when the class
        # is used as a relationship, then a marshmallow.fields.Nested() is all we need.
        #
        # Note: Unfortunately, attr will run the validators again, although we already
        # did so.
        return attrclass(**data)

    def drop_empty_values(self, data, **kwargs):
        return {
            key: value for key, value in data.items()
            if key in keep_empty or not is_empty(value)
        }

    class Meta:
        unknown = EXCLUDE

    marshmallow_fields['Meta'] = Meta
    marshmallow_fields['_internal_prepare_input'] = pre_load(prepare_input)
    marshmallow_fields['_internal_make_object'] = post_load(make_object)
    marshmallow_fields['_internal_drop_empty_values'] = post_dump(drop_empty_values)

    marshmallow_schema = type(f'{attrclass.__name__}Schema', (marshmallow.Schema,), marshmallow_fields)
    attrclass.__marshmallow_schema__ = marshmallow_schema
    attrclass.unmarshal = classmethod(unmarshall_func)
    attrclass.marshal = marshall_func
    return attrclass


class CustomNested(fields.Nested):
    """
    Like marshmallow's Nested, but when serializing, when given a dict
    (rather than a model), just outputs the dict as given.

    We use this to allow developers to skip the model system and instead directly
    include the desired Mailchimp structures.
    """

    def _serialize(self, nested_obj, attr, obj, **kwargs):
        dump_dict = False
        if self.many and nested_obj and len(nested_obj) and isinstance(nested_obj[0], dict):
            dump_dict = True
        elif not self.many and isinstance(nested_obj, dict):
            dump_dict = True
        if dump_dict:
            return nested_obj

        # Serialize as normal
        return super()._serialize(nested_obj, attr, obj, **kwargs)


class EnumField(fields.Field):
    """
    Adapted from: https://github.com/justanr/marshmallow_enum/blob/master/marshmallow_enum/__init__.py

    Always by value. An empty string loads as the enum's default (the `noop`
    member of an `ApiEnum`). Unknown strings are left to the enum itself:
    `ApiEnum` maps them to its `fallthrough_string` member, a plain enum
    rejects them.
    """

    default_error_messages = {
        'by_value': 'Invalid enum value {input}',
        'must_be_string': 'Enum value must be string, got {input}',
    }

    def __init__(self, enum, **kwargs):
        self.enum = enum
        super().__init__(**kwargs)

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.value

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise self.make_error('must_be_string', input=value)

        if value == '' and hasattr(self.enum, 'default'):
            return self.enum.default()

        try:
            return self.enum(value)
        except ValueError:
            raise self.make_error('by_value', input=value)


class PolyField(fields.Field):
    """
    Adapted from https://github.com/Bachmann1234/marshmallow-polyfield/blob/master/marshmallow_polyfield/polyfield.py

    However, ours does not need a manual decider function. Instead, it will
    check the following to make a decision as to which of the subtypes to parse:

    - A type which has a `will_handle` classmethod is asked first; if it
      claims the value, it is the one to parse it, and if that fails, the
      whole field fails.
    - The primitives associated with the type (int, str).
    - In case of nested models, the models are tried in the order given, and
      the first one which loads the value without a validation error wins.
      This is what an "untagged" union does.
    """

    def __init__(
        self,
        union_types: Dict[Any, Any],
        many=False,
        **metadata
    ):
        super(PolyField, self).__init__(**metadata)
        self.many = many
        self.union_types = union_types

    def _serialize(self, value, attr, obj, **kwargs):
        if not self.many:
            value = [value]

        results = []
        for v in value:
            if isinstance(v, dict):
                # A raw structure given by the developer.
                results.append(v)
                continue

            # Figure out which type it is
            for pytype, field in self.union_types.items():
                if isinstance(v, pytype):
                    if is_model(pytype):
                        results.append(v.marshal())
                    else:
                        results.append(field._serialize(v, attr, obj))
                    break
            else:
                raise ValidationError(f'Not a valid value for "{attr}": {v}')

        if self.many:
            return results
        else:
            return results[0]

    def _deserialize(self, value, attr, data, **kwargs):
        if not self.many:
            value = [value]

        results = [self._deserialize_one(v, attr, data) for v in value]

        if self.many:
            return results
        else:
            return results[0]

    def _deserialize_one(self, value, attr, data):
        # See if any of the given types has a custom "pick me" helper.
        for pytype in self.union_types:
            if hasattr(pytype, 'will_handle') and pytype.will_handle(value):
                return pytype.unmarshal(value)

        # This only works with primitives
        for pytype, field in self.union_types.items():
            if not is_model(pytype) and isinstance(value, pytype):
                return field._deserialize(value, attr, data)

        if isinstance(value, dict):
            for pytype in self.union_types:
                if not is_model(pytype):
                    continue
                try:
                    return pytype.unmarshal(value)
                except ValidationError:
                    continue

        raise ValidationError(f'Not one of the possible valid types for "{attr}": {value}')
