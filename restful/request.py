from collections.abc import Mapping
from enum import Enum
from urllib.parse import parse_qsl

from werkzeug.datastructures import MultiDict


class Method(str, Enum):
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    PATCH = 'PATCH'
    DELETE = 'DELETE'

    @property
    def has_body(self):
        """``True`` for methods invoked with a request body before the options."""
        return self in (Method.POST, Method.PUT, Method.PATCH)

    @classmethod
    def coerce(cls, method):
        if isinstance(method, cls):
            return method
        return cls(str(method).upper())


HTTP_METHODS = tuple(method.value for method in Method)


def query_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def normalize_query(query):
    """
    Returns the query as an ordered :class:`MultiDict`.

    A :class:`MultiDict`, a query string or a sequence of ``(key, value)`` pairs counts as pre-built
    and is used verbatim. Any other mapping has its ``None`` values dropped and the remaining values
    converted to strings (booleans as ``true`` and ``false``); list and tuple values become repeated keys.
    """
    if query is None:
        return MultiDict()
    if isinstance(query, MultiDict):
        return query
    if isinstance(query, str):
        return MultiDict(parse_qsl(query.lstrip('?'), keep_blank_values=True))
    if not isinstance(query, Mapping):
        return MultiDict(list(query))

    normalized = MultiDict()
    for key, value in query.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is not None:
                normalized.add(key, query_value(item))
    return normalized


class RestRequest(object):
    """
    Everything a requester needs to perform a single call. Created fresh for every invocation.

    :param Method method: HTTP method
    :param restful.path.Endpoint endpoint: the endpoint being called
    :param body: request body or ``None``
    :param MultiDict query: normalized query
    :param dict headers: request headers or ``None``
    :param extra: any other options passed with the call, left for the requester to interpret
    """

    def __init__(self, method, endpoint, body=None, query=None, headers=None, **extra):
        self.method = method
        self.endpoint = endpoint
        self.body = body
        self.query = query
        self.headers = headers
        self.extra = extra

    @property
    def path(self):
        return self.endpoint.render()

    def __repr__(self):
        return "<RestRequest {} '/{}'>".format(self.method.value, self.path)
