"""
The two-phase authentication flow shared by login and account creation.

The wiki answers the first credentialed POST with either Success,
NeedToken (plus a token tied to the cookies it just set), or some other
result code. On NeedToken the same POST is repeated once with the token
and the cookies; nothing after that is retried.
"""
import logging
from .excs import LoginError, CreateAccountError, MalformedResponseError
from .tokens import ActionToken

__all__ = [
    'AuthKind',
    'LOGIN',
    'CREATE_ACCOUNT',
    'AuthResult',
    'Success',
    'NeedToken',
    'Failure',
    'decode_result',
    'authenticate',
]

logger = logging.getLogger(__name__)

#pylint: disable=too-few-public-methods,too-many-arguments
class AuthKind:
    """Field names and semantics of one authentication action."""
    def __init__(self, action, name_field, password_field, token_field,
                 error, logs_in):
        self.action = action
        self.name_field = name_field
        self.password_field = password_field
        self.token_field = token_field
        self.error = error
        self.logs_in = logs_in

    def __repr__(self):
        """Represent an AuthKind."""
        return "<AuthKind {action}>".format(action=self.action)

    __str__ = __repr__

    def credentials(self, name, password):
        """The credential fields of the first request."""
        return {
            'action': self.action,
            self.name_field: name,
            self.password_field: password,
        }

LOGIN = AuthKind('login', 'lgname', 'lgpassword', 'lgtoken',
                 LoginError, logs_in=True)
CREATE_ACCOUNT = AuthKind('createaccount', 'name', 'password', 'token',
                          CreateAccountError, logs_in=False)

class AuthResult:
    """Base of the decoded ``result`` variants."""
    code = None

    def __repr__(self):
        return "<{name} {code}>".format(name=type(self).__name__,
                                        code=self.code)

    __str__ = __repr__

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), self.code))

class Success(AuthResult):
    """The wiki accepted the credentials."""
    code = 'Success'

class NeedToken(AuthResult):
    """Retry once with ``token``."""
    code = 'NeedToken'

    def __init__(self, token):
        self.token = token

class Failure(AuthResult):
    """Any other result; ``code`` is the wiki's literal result string."""
    def __init__(self, code):
        self.code = code

def decode_result(kind, data):
    """Turn the response body of ``kind`` into an AuthResult."""
    try:
        body = data[kind.action]
        code = body['result']
    except (KeyError, TypeError) as exc:
        raise MalformedResponseError(
            'response has no {}.result'.format(kind.action), data) from exc
    if not isinstance(code, str):
        raise MalformedResponseError(
            '{}.result is not a string'.format(kind.action), data)
    if code == Success.code:
        return Success()
    if code == NeedToken.code:
        if not body.get('token'):
            raise MalformedResponseError(
                '{}.result is NeedToken but no token was sent'.format(
                    kind.action), data)
        return NeedToken(body['token'])
    return Failure(code)

def _succeed(client, kind, name):
    if kind.logs_in:
        client.session.mark_logged_in()
    logger.info('%s succeeded for %s', kind.action, name)
    return True

def _fail(kind, name, result):
    logger.info('%s failed for %s: %s', kind.action, name, result.code)
    return kind.error.from_code(result.code)

def authenticate(client, kind, name, password):
    """Run the ``kind`` flow (LOGIN or CREATE_ACCOUNT) against ``client``.

    Returns True on Success. Raises ``kind.error`` with the wiki's result
    code otherwise. Session cookies are merged after each response by
    ``client.post_request``.
    """
    params = kind.credentials(name, password)
    result = decode_result(kind, client.post_request(**params))

    if isinstance(result, NeedToken):
        client.tokens.cache.store(ActionToken(kind.action, result.token))
        params[kind.token_field] = result.token
        logger.debug('%s needs a token, retrying once', kind.action)
        result = decode_result(kind, client.post_request(**params))
        if isinstance(result, NeedToken):
            raise _fail(kind, name, result)

    if isinstance(result, Success):
        return _succeed(client, kind, name)
    raise _fail(kind, name, result)
