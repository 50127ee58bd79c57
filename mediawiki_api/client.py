"""
See the Client docstrings.
"""
import logging
from warnings import warn as _warn
from .auth import authenticate, LOGIN, CREATE_ACCOUNT
from .excs import WikiError, WikiWarning, MalformedResponseError
from .page import Page
from .session import Session
from .tokens import TokenGate
from .transport import ApiRequest, RequestsTransport

__all__ = [
    'USER_AGENT',
    'Client',
]

logger = logging.getLogger(__name__)

USER_AGENT = "mediawiki_api/1.0.0, python-requests"

def _default_index_url(api_url):
    """http://host/w/api.php -> http://host/w/index.php"""
    if api_url.endswith('api.php'):
        return api_url[:-len('api.php')] + 'index.php'
    return api_url.rstrip('/') + '/index.php'

class Client: #pylint: disable=too-many-instance-attributes
    """A client for one wiki, holding one login session."""

    def __init__(self, api_url, index_url=None, user_agent=None,
                 transport=None):
        """Initialize a client with its URLs.

        ``index_url`` (used only by get_wikitext) defaults to the
        ``index.php`` beside ``api_url``.

        If user_agent is specified, all requests will use that user agent.
        Otherwise, USER_AGENT is used.

        ``transport`` is anything with a ``send(ApiRequest)`` method;
        a RequestsTransport is created if it is None.
        """
        self.api_url = api_url
        self.index_url = (index_url if index_url is not None
                          else _default_index_url(api_url))
        self.user_agent = user_agent if user_agent is not None else USER_AGENT
        self.transport = (transport if transport is not None
                          else RequestsTransport())
        self.session = Session()
        self.tokens = TokenGate(self)

    def __repr__(self):
        """Represent a Client object."""
        return "<Client at {addr}>".format(addr=self.api_url)

    __str__ = __repr__

    @property
    def logged_in(self):
        """Whether log_in has succeeded on this client."""
        return self.session.logged_in

    def _headers(self, extra=None):
        headers = {
            "User-Agent": self.user_agent,
        }
        cookie = self.session.cookie_header()
        if cookie:
            headers["Cookie"] = cookie
        headers.update(extra if extra is not None else {})
        return headers

    def _send(self, method, url, params, headers=None):
        """Send one request and merge its cookies into the session."""
        params = {key: value for key, value in params.items()
                  if value is not None}
        request = ApiRequest(method, url, params, self._headers(headers))
        response = self.transport.send(request)
        self.session.update_from_response(response)
        return response

    def request(self, _headers=None, _post=False, **params):
        """Inner request method.

        Remains public since it might be used per se.
        """
        params["format"] = "json"
        logger.debug('api request action=%s post=%s',
                     params.get('action'), _post)

        response = self._send('POST' if _post else 'GET', self.api_url,
                              params, _headers)
        data = response.json()

        if 'error' in data:
            error = data['error']
            if not (isinstance(error, dict)
                    and isinstance(error.get('code', ''), str)):
                raise MalformedResponseError('malformed error object', data)
            raise WikiError.from_error(error)

        if 'warnings' in data:
            warnings = data['warnings']
            for module, value in warnings.items():
                text = value.get('*', value) if isinstance(value, dict) else value
                _warn('warning from {} module: {}'.format(module, text),
                      WikiWarning)

        return data

    def post_request(self, **params):
        """Alias for Client.request(_post=True)"""
        return self.request(_post=True, **params)

    def log_in(self, name, password):
        """Log in; the session keeps the cookies.

        Returns True, or raises LoginError with the wiki's result code.
        """
        return authenticate(self, LOGIN, name, password)

    def create_account(self, name, password):
        """Create an account. Does not log in.

        Returns True, or raises CreateAccountError with the wiki's
        result code.
        """
        return authenticate(self, CREATE_ACCOUNT, name, password)

    def create_page(self, title, text, **evil):
        """Create (or overwrite) the page ``title`` with ``text``."""
        params = {
            'title': title,
            'text': text,
        }
        params.update(evil)
        return self.tokens.perform('edit', 'edit', params)

    def delete_page(self, title, reason, **evil):
        """Delete the page ``title``."""
        params = {
            'title': title,
            'reason': reason,
        }
        params.update(evil)
        return self.tokens.perform('delete', 'delete', params)

    def watch_page(self, title, **evil):
        """Add ``title`` to the watchlist."""
        params = {
            'titles': title,
        }
        params.update(evil)
        return self.tokens.perform('watch', 'watch', params)

    def unwatch_page(self, title, **evil):
        """Remove ``title`` from the watchlist."""
        evil = dict(evil, unwatch='true')
        return self.watch_page(title, **evil)

    def get_wikitext(self, title):
        """Fetch the raw wikitext of ``title`` from index.php."""
        response = self._send('GET', self.index_url, {
            'action': 'raw',
            'title': title,
        })
        return response.text

    def page(self, title, **evil):
        """Return a Page instance based off of the title of the page."""
        if isinstance(title, Page):
            return title
        return Page(self, title=title, **evil)
