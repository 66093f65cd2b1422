from .exceptions import RestfulException, InvalidPathSegment, RestError
from .node import EndpointNode, EndpointMeta, Morph, MorphSet, meta, set_morph, get_morph, create_root
from .path import Endpoint, Resource, is_resource
from .request import Method, RestRequest
from .requester import DefaultRequester

__all__ = (
    'restful',
    'default',
    'retarget',
    'meta',
    'set_morph',
    'get_morph',
    'Endpoint',
    'EndpointNode',
    'EndpointMeta',
    'Morph',
    'MorphSet',
    'Method',
    'Resource',
    'RestRequest',
    'DefaultRequester',
    'RestfulException',
    'InvalidPathSegment',
    'RestError',
    'is_resource',
    'marshal',
    'signals',
)


def restful(requester):
    """
    Creates the root :class:`EndpointNode` of a REST API.

    :param callable requester: called with a :class:`RestRequest` for every request made through the
        tree; may return the result or an awaitable resolving to it
    """
    return create_root(requester)


def default(base_url, headers=None, marshal=None, unmarshal=None, session=None):
    """
    Creates a REST API backed by a :class:`DefaultRequester`; see there for the parameters.
    """
    return restful(DefaultRequester(base_url,
                                    headers=headers,
                                    marshal=marshal,
                                    unmarshal=unmarshal,
                                    session=session))


def retarget(node):
    """
    Creates a new tree sharing the requester of the tree ``node`` belongs to.

    Morph hooks and child nodes of the existing tree are not carried over.
    """
    return restful(meta(meta(node).root).requester)
