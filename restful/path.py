from numbers import Number

from .exceptions import InvalidPathSegment


class Resource(object):
    """
    A path segment standing in for a dynamic resource identifier, such as the ``1`` in ``/foo/1``.

    Renders as its wrapped value.
    """
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = str(value)

    def __eq__(self, other):
        return isinstance(other, Resource) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Resource, self.value))

    def __str__(self):
        return self.value

    def __repr__(self):
        return "<Resource '{}'>".format(self.value)


def is_resource(segment):
    return isinstance(segment, Resource)


def to_segment(key):
    """
    Converts a lookup key to a path segment. Strings are literal route fragments, numbers become
    :class:`Resource` markers.

    :raises InvalidPathSegment: if the key cannot be represented as a URL component
    """
    if isinstance(key, (str, Resource)):
        return key
    if isinstance(key, Number) and not isinstance(key, bool):
        return Resource(key)
    raise InvalidPathSegment(key)


class Endpoint(object):
    """
    Immutable sequence of path segments addressing a single API endpoint.

    :param segments: an iterable of strings and :class:`Resource` markers
    """
    __slots__ = ('_segments',)

    def __init__(self, segments=()):
        self._segments = tuple(segments)

    @classmethod
    def empty(cls):
        return cls()

    @property
    def segments(self):
        return self._segments

    def extend(self, segment):
        return Endpoint(self._segments + (to_segment(segment),))

    def render(self):
        return '/'.join(str(segment) for segment in self._segments)

    def __iter__(self):
        return iter(self._segments)

    def __len__(self):
        return len(self._segments)

    def __eq__(self, other):
        return isinstance(other, Endpoint) and self._segments == other._segments

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._segments)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return "<Endpoint '/{}'>".format(self.render())
