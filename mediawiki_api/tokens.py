"""
Action tokens and the token-gated action executor.

Every write goes through ``TokenGate.perform``: fetch a token of the
right type, then post the action with that token. Tokens are fetched
fresh for every call.
"""
import logging
from .excs import MalformedResponseError

__all__ = [
    'TOKEN_TYPES',
    'ActionToken',
    'TokenCache',
    'TokenGate',
]

logger = logging.getLogger(__name__)

TOKEN_TYPES = ('login', 'createaccount', 'edit', 'delete', 'watch')

class ActionToken:
    """An anti-forgery token for one type of action."""
    def __init__(self, kind, value):
        if kind not in TOKEN_TYPES:
            raise ValueError('unknown token type: {!r}'.format(kind))
        self.type = kind
        self.value = value

    def __repr__(self):
        """Represent a token without showing its value."""
        return "<ActionToken {kind}>".format(kind=self.type)

    __str__ = __repr__

    def __eq__(self, other):
        """Check if two tokens are the same."""
        if not isinstance(other, ActionToken):
            return NotImplemented
        return (self.type, self.value) == (other.type, other.value)

    def __hash__(self):
        """ActionToken.__hash__() <==> hash(ActionToken)"""
        return hash((self.type, self.value))

class TokenCache:
    """The latest token seen for each type.

    This is a record of what was fetched, not a source of tokens:
    TokenGate never reads from it.
    """
    def __init__(self):
        self._tokens = {}

    def __repr__(self):
        """Represent the cache by the token types it holds."""
        return "<TokenCache {kinds}>".format(kinds=sorted(self._tokens))

    __str__ = __repr__

    def __contains__(self, kind):
        return kind in self._tokens

    def __len__(self):
        return len(self._tokens)

    def store(self, token):
        """Remember ``token`` as the latest of its type."""
        self._tokens[token.type] = token
        return token

    def latest(self, kind):
        """Return the latest ActionToken of ``kind``, or None."""
        return self._tokens.get(kind)

class TokenGate:
    """Fetch-token-then-act executor bound to a Client."""
    def __init__(self, client, cache=None):
        """Initialize the executor with its client."""
        self.client = client
        self.cache = cache if cache is not None else TokenCache()

    def __repr__(self):
        """Represent the executor."""
        return '<TokenGate>'

    __str__ = __repr__

    def fetch(self, kind):
        """Get a fresh token of type ``kind`` from action=tokens.

        Raises MalformedResponseError if the response has no
        ``tokens.<kind>token`` string. Transport failures propagate.
        """
        data = self.client.request(action='tokens', type=kind)
        key = kind + 'token'
        try:
            value = data['tokens'][key]
        except (KeyError, TypeError) as exc:
            raise MalformedResponseError(
                'response has no tokens.{}'.format(key), data) from exc
        if not isinstance(value, str):
            raise MalformedResponseError(
                'tokens.{} is not a string'.format(key), data)
        return self.cache.store(ActionToken(kind, value))

    def perform(self, action, kind, params):
        """Fetch a ``kind`` token, then POST ``action`` with ``params``.

        The decoded response is returned as is; whatever the action
        reports is left to the caller. If the token can't be fetched,
        the action is never sent.
        """
        token = self.fetch(kind)
        logger.debug('posting action=%s with a fresh %s token', action, kind)
        data = dict(params)
        data['action'] = action
        data['token'] = token.value
        return self.client.post_request(**data)
