class RestfulException(Exception):
    pass


class InvalidPathSegment(RestfulException, TypeError):

    def __init__(self, key):
        super(InvalidPathSegment, self).__init__(
            'Invalid path part type {}: {!r}'.format(type(key).__name__, key))
        self.key = key


class RestError(RestfulException):
    """
    Raised by :class:`restful.requester.DefaultRequester` on non-2xx responses.

    The body is not parsed so that any error payload can be inspected as-is.

    .. attribute:: response

        the :class:`requests.Response` received

    .. attribute:: body

        the raw response body text
    """

    def __init__(self, response, body):
        super(RestError, self).__init__('{} {} {}: {}'.format(response.url,
                                                              response.status_code,
                                                              response.reason,
                                                              body))
        self.response = response
        self.body = body

    @property
    def status_code(self):
        return self.response.status_code
