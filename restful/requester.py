import asyncio
import inspect
import json
import logging
import re
from functools import partial
from urllib.parse import urlencode

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import RestError, RestfulException
from .request import normalize_query

logger = logging.getLogger(__name__)

# keyword arguments of requests.Session.request the requester does not set itself
TRANSPORT_OPTIONS = ('cookies', 'auth', 'timeout', 'allow_redirects', 'proxies', 'hooks', 'stream', 'verify', 'cert')


def _identity(value):
    return value


def build_url(base_url, path, query=None):
    """
    Joins base URL and endpoint path with exactly one ``/`` and appends the query string if there is one.
    """
    url = '{}/{}'.format(re.sub(r'/$', '', base_url), re.sub(r'^/', '', path))
    params = list(normalize_query(query).items(multi=True))
    if params:
        url = '{}?{}'.format(url, urlencode(params))
    return url


class DefaultRequester(object):
    """
    A requester for common JSON APIs.

    - request bodies are sent as JSON, ``Content-Type: application/json`` is set by default
    - endpoint URLs take the form ``{base_url}/{path}``
    - non-2xx responses raise :class:`restful.exceptions.RestError` with the unparsed response body
    - successful responses are parsed as JSON

    The HTTP call is made with a :class:`requests.Session` on the event loop's default executor.

    :param base_url: a string, or a function or coroutine function returning one, called for every request
    :param dict headers: headers sent with every request; per-call headers take precedence
    :param callable marshal: applied to truthy bodies before JSON encoding, e.g. to convert key case
    :param callable unmarshal: applied to parsed response bodies
    :param requests.Session session: an optional session to use instead of a new one
    """

    def __init__(self, base_url, headers=None, marshal=None, unmarshal=None, session=None):
        self.base_url = base_url
        self.headers = dict(headers or {})
        self.marshal = marshal or _identity
        self.unmarshal = unmarshal or _identity
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, prefix='RESTFUL_', **kwargs):
        """
        Creates a requester from a configuration mapping, such as a Flask ``app.config``.

        Reads ``{prefix}BASE_URL`` (required), ``{prefix}HEADERS``, ``{prefix}MARSHAL`` and
        ``{prefix}UNMARSHAL``. Keyword arguments take precedence over configured values.
        """
        try:
            kwargs.setdefault('base_url', config['{}BASE_URL'.format(prefix)])
        except KeyError:
            raise RestfulException('Missing configuration value {}BASE_URL'.format(prefix))

        for option in ('headers', 'marshal', 'unmarshal'):
            kwargs.setdefault(option, config.get('{}{}'.format(prefix, option.upper())))
        return cls(**kwargs)

    async def resolve_base_url(self):
        base_url = self.base_url
        if callable(base_url):
            base_url = base_url()
        if inspect.isawaitable(base_url):
            base_url = await base_url
        return base_url

    def build_headers(self, headers=None):
        merged = CaseInsensitiveDict({'Content-Type': 'application/json'})
        merged.update(self.headers)
        merged.update(headers or {})
        return merged

    def transport_options(self, extra):
        """Picks the options understood by the session from a request's extra options; others are ignored."""
        return {key: value for key, value in extra.items() if key in TRANSPORT_OPTIONS}

    async def __call__(self, request):
        method = getattr(request.method, 'value', request.method)
        url = build_url(await self.resolve_base_url(), request.path, request.query)
        data = json.dumps(self.marshal(request.body)) if request.body else None

        logger.debug('%s %s', method, url)
        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(None, partial(self.session.request,
                                                            method,
                                                            url,
                                                            headers=self.build_headers(request.headers),
                                                            data=data,
                                                            **self.transport_options(request.extra)))

        if not 200 <= response.status_code < 300:
            logger.debug('%s %s failed with status %d', method, url, response.status_code)
            raise RestError(response, response.text)

        if not response.content:
            return None
        return self.unmarshal(response.json())

    def close(self):
        self.session.close()

    def __repr__(self):
        return "<DefaultRequester '{}'>".format(self.base_url)
