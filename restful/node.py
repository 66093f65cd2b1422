import inspect
from collections import OrderedDict
from collections.abc import Mapping
from enum import Enum

from .exceptions import RestfulException
from .path import Endpoint, to_segment
from .request import Method, RestRequest, normalize_query
from .signals import before_request, after_request, request_failed


class Morph(Enum):
    BODY = 'body'
    QUERY = 'query'
    HEADERS = 'headers'
    RESULT = 'result'


class MorphSet(object):
    """
    The morph hooks of a single endpoint node. Each hook is called as ``hook(path, value)`` with the
    rendered endpoint path and returns the replacement value. Hooks that are ``None`` leave values
    untouched.

    Hooks are never inherited by child nodes.
    """
    __slots__ = ('body', 'query', 'headers', 'result')

    def __init__(self, body=None, query=None, headers=None, result=None):
        self.body = body
        self.query = query
        self.headers = headers
        self.result = result

    def get(self, kind):
        return getattr(self, Morph(kind).value)

    def set(self, kind, morph):
        setattr(self, Morph(kind).value, morph)

    def apply(self, kind, path, value):
        morph = self.get(kind)
        if morph is None:
            return value
        return morph(path, value)


class EndpointMeta(object):
    """
    State kept by an :class:`EndpointNode` apart from its children's namespace.

    .. attribute:: endpoint

        the node's :class:`restful.path.Endpoint`

    .. attribute:: morphs

        a :class:`MorphSet`

    .. attribute:: children

        child nodes created so far, by segment name

    .. attribute:: requester

        the requester; only set on the root node

    .. attribute:: root

        the root node of the tree
    """
    __slots__ = ('endpoint', 'morphs', 'children', 'requester', 'root')

    def __init__(self, endpoint, root, requester=None):
        self.endpoint = endpoint
        self.morphs = MorphSet()
        self.children = OrderedDict()
        self.requester = requester
        self.root = root


class EndpointNode(object):
    """
    A callable handle to one endpoint of a REST API.

    Child endpoints are looked up with ``node[key]`` or, for names that are valid identifiers and do
    not start with an underscore, ``node.key``. Children are created on first access and the same
    instance is returned on every later access.

    Calling the node performs a request::

        await api.users('GET', query={'name': 'John'})
        await api.users[1]('PUT', {'name': 'John Doe'})
        await api.users[1]('DELETE', {'headers': {'X-Reason': 'duplicate'}})

    ``GET`` and ``DELETE`` take an optional options dictionary. ``POST``, ``PUT`` and ``PATCH`` take the
    body first and an optional options dictionary second. Keyword arguments are merged into the
    options; ``query`` and ``headers`` are understood here, anything else is handed to the requester.
    """
    __slots__ = ('_meta',)

    __iter__ = None

    def __init__(self, endpoint, root=None, requester=None):
        self._meta = EndpointMeta(endpoint, root or self, requester)

    def __getitem__(self, key):
        segment = to_segment(key)
        name = str(segment)
        children = self._meta.children

        try:
            return children[name]
        except KeyError:
            child = children[name] = EndpointNode(self._meta.endpoint.extend(segment),
                                                  root=self._meta.root)
            return child

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return self[name]

    async def __call__(self, method, *args, **options):
        method = Method.coerce(method)

        body = None
        if method.has_body and args:
            body, args = args[0], args[1:]

        # arguments past the options are ignored, as are options that are not a mapping
        opts = dict(args[0]) if args and isinstance(args[0], Mapping) else {}
        opts.update(options)

        meta = self._meta
        morphs = meta.morphs
        path = meta.endpoint.render()

        body = morphs.apply(Morph.BODY, path, body)
        query = morphs.apply(Morph.QUERY, path, normalize_query(opts.pop('query', None)))
        headers = morphs.apply(Morph.HEADERS, path, opts.pop('headers', None))

        request = RestRequest(method, meta.endpoint, body=body, query=query, headers=headers, **opts)
        requester = meta.root._meta.requester
        if requester is None:
            raise RestfulException('{!r} is not bound to a requester'.format(self))

        before_request.send(self, request=request)
        try:
            result = requester(request)
            if inspect.isawaitable(result):
                result = await result
            result = morphs.apply(Morph.RESULT, path, result)
        except Exception as e:
            request_failed.send(self, request=request, exception=e)
            raise

        after_request.send(self, request=request, result=result)
        return result

    def __repr__(self):
        return "<EndpointNode '/{}'>".format(self._meta.endpoint.render())


def meta(node):
    """
    Returns the :class:`EndpointMeta` of a node, giving access to its morph hooks and, on the root, its
    requester.
    """
    return node._meta


def set_morph(node, kind, morph):
    node._meta.morphs.set(kind, morph)


def get_morph(node, kind):
    return node._meta.morphs.get(kind)


def create_root(requester):
    return EndpointNode(Endpoint.empty(), requester=requester)
