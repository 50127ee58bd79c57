"""
HTTP transport used by the Client.

Anything with a ``send(request)`` method returning an ``ApiResponse``
can be passed to ``Client(transport=...)``. The default one is built on
``requests``.
"""
import json
import logging
import requests
from .excs import TransportError, MalformedResponseError

__all__ = [
    'ApiRequest',
    'ApiResponse',
    'RequestsTransport',
]

logger = logging.getLogger(__name__)

class ApiRequest:
    """A single outgoing request.

    ``params`` is sent as the query string for GET and as a form body
    for POST.
    """
    def __init__(self, method, url, params=None, headers=None):
        self.method = method.upper()
        self.url = url
        self.params = dict(params or {})
        self.headers = dict(headers or {})

    def __repr__(self):
        """Represent a request."""
        return "<ApiRequest {method} {url} action={action}>".format(
            method=self.method, url=self.url,
            action=self.params.get('action'))

    __str__ = __repr__

class ApiResponse:
    """A response as seen by the client."""
    def __init__(self, status=200, text='', headers=None, set_cookies=None):
        self.status = status
        self.text = text
        self.headers = dict(headers or {})
        self.set_cookies = list(set_cookies or ())

    def __repr__(self):
        """Represent a response."""
        return "<ApiResponse {status}>".format(status=self.status)

    __str__ = __repr__

    def json(self):
        """Decode the body, raising MalformedResponseError if it isn't JSON."""
        try:
            data = json.loads(self.text)
        except ValueError as exc:
            raise MalformedResponseError(
                'response body is not JSON', self.text) from exc
        if not isinstance(data, dict):
            raise MalformedResponseError(
                'response body is not a JSON object', self.text)
        return data

def _set_cookie_headers(response):
    """Every Set-Cookie header of a requests response, unmerged."""
    raw_headers = getattr(response.raw, 'headers', None)
    if hasattr(raw_headers, 'getlist'):
        return raw_headers.getlist('Set-Cookie')
    # requests folds repeated headers into one value; use its parsed jar
    return ['{}={}'.format(cookie.name, cookie.value)
            for cookie in response.cookies]

class RequestsTransport:
    """Send ApiRequests with ``requests``.

    Cookies are owned by the client's Session, so the underlying
    ``requests.Session`` is kept from remembering any of them.
    """
    def __init__(self, session=None, timeout=None):
        self._session = session if session is not None else requests.session()
        self.timeout = timeout

    def send(self, request):
        """Perform the exchange; no retries."""
        logger.debug('%s %s action=%s', request.method, request.url,
                     request.params.get('action'))
        try:
            if request.method == 'POST':
                response = self._session.post(request.url, data=request.params,
                                              headers=request.headers,
                                              timeout=self.timeout)
            else:
                response = self._session.get(request.url, params=request.params,
                                             headers=request.headers,
                                             timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(str(exc), status) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(str(exc)) from exc
        finally:
            self._session.cookies.clear()
        logger.debug('%s %s -> %s', request.method, request.url,
                     response.status_code)
        return ApiResponse(response.status_code, response.text,
                           response.headers, _set_cookie_headers(response))
