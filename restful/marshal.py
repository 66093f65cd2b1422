"""
Key case conversion for use as ``marshal`` and ``unmarshal`` of a :class:`restful.requester.DefaultRequester`::

    api = restful.default('https://example.com/api', marshal=camelize, unmarshal=underscore)
"""
import re

_UPPER_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def to_camel_case(s):
    return s[0].lower() + s.title().replace('_', '')[1:] if s else s


def to_snake_case(s):
    return _UPPER_BOUNDARY.sub('_', s).lower()


def _convert_keys(value, convert):
    if isinstance(value, dict):
        return {convert(k) if isinstance(k, str) else k: _convert_keys(v, convert) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert_keys(item, convert) for item in value]
    return value


def camelize(value):
    """Recursively converts the keys of any dictionaries in ``value`` from ``snake_case`` to ``camelCase``."""
    return _convert_keys(value, to_camel_case)


def underscore(value):
    """Recursively converts the keys of any dictionaries in ``value`` from ``camelCase`` to ``snake_case``."""
    return _convert_keys(value, to_snake_case)
