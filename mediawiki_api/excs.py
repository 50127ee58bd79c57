"""
mediawiki_api.excs - Exceptions raised by the client.

To tell a rejected login apart from a network failure:

..code-block:: python

    try:
        client.log_in('Example', password)
    except mw.LoginError.WrongPass:
        print('bad password')
    except mw.LoginError as exc:
        print('login rejected:', exc.code)
    except mw.TransportError:
        print('the wiki could not be reached')

Note that ``TransportError`` and ``MalformedResponseError`` do NOT
inherit from ``AuthError``.
"""

__all__ = [
    'WikiError',
    'AuthError',
    'LoginError',
    'CreateAccountError',
    'TransportError',
    'MalformedResponseError',
    'WikiWarning',
]

class _MetaGetattr(type):
    """Metaclass to provide __getattr__ on a class.

    Looking up an unknown attribute creates (and remembers) a subclass
    named after it, so that ``LoginError.WrongPass`` can be both raised
    and caught.
    """
    def __getattr__(cls, name):
        if name.startswith('__'):
            raise AttributeError(name)
        setattr(cls, name, type(name, (cls,), {}))
        return getattr(cls, name)

def _subclass_for(cls, code):
    """``cls.<code>``, or ``cls`` itself if that name is already taken."""
    subclass = getattr(cls, code, None) if code else None
    if isinstance(subclass, type) and issubclass(subclass, cls):
        return subclass
    return cls

#pylint: disable=too-few-public-methods
class WikiError(Exception, metaclass=_MetaGetattr):
    """An error object returned by the wiki's API. Raised by Client.request."""
    @property
    def code(self):
        """Return the API error code."""
        return type(self).__name__

    @classmethod
    def from_error(cls, error):
        """Build the exception for an API ``error`` object."""
        code = error.get('code', 'unknown')
        return _subclass_for(cls, code)(code + ': ' + error.get('info', ''))

class AuthError(Exception, metaclass=_MetaGetattr):
    """The wiki rejected an authentication request.

    The message is the literal ``result`` code sent by the wiki.
    """
    @property
    def code(self):
        """Return the remote result code."""
        if self.args:
            return self.args[0]
        return type(self).__name__

    @classmethod
    def from_code(cls, code):
        """Build the per-code subclass instance for ``code``."""
        return _subclass_for(cls, code)(code)

class LoginError(AuthError):
    """``action=login`` ended with anything other than Success."""
    pass

class CreateAccountError(AuthError):
    """``action=createaccount`` ended with anything other than Success."""
    pass

class TransportError(Exception):
    """The request never produced a usable HTTP response.

    Connection failures, timeouts and HTTP error statuses all end up here;
    the original ``requests`` exception is chained as ``__cause__``.
    """
    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status

class MalformedResponseError(Exception):
    """The response body was not JSON or lacked an expected field."""
    def __init__(self, message, body=None):
        super().__init__(message)
        self.body = body

class WikiWarning(UserWarning, metaclass=_MetaGetattr):
    """The API sent a warning in the response."""
    pass
