"""Test action tokens and the token gate."""
from unittest import TestCase
import mediawiki_api as mw
from fakes import client, reply

class TestActionToken(TestCase):
    """Test ActionToken and TokenCache."""
    def test_unknown_type(self):
        """Assert unknown token types are refused."""
        with self.assertRaises(ValueError):
            mw.ActionToken('csrf', 'x')

    def test_repr_hides_value(self):
        """Assert the token value is not shown in its repr."""
        self.assertNotIn('secret', repr(mw.ActionToken('edit', 'secret')))

    def test_cache_latest(self):
        """Assert the cache keeps the latest token per type."""
        cache = mw.TokenCache()
        self.assertIsNone(cache.latest('edit'))
        cache.store(mw.ActionToken('edit', 'a'))
        cache.store(mw.ActionToken('delete', 'b'))
        cache.store(mw.ActionToken('edit', 'c'))
        self.assertEqual(cache.latest('edit').value, 'c')
        self.assertEqual(cache.latest('delete').value, 'b')
        self.assertIn('edit', cache)
        self.assertEqual(len(cache), 2)

class TestTokenGate(TestCase):
    """Test TokenGate."""
    def test_fetch(self):
        """Assert fetch returns and records the token."""
        wiki = client(reply({'tokens': {'deletetoken': 'd1'}}))
        token = wiki.tokens.fetch('delete')
        self.assertEqual(token, mw.ActionToken('delete', 'd1'))
        self.assertEqual(wiki.tokens.cache.latest('delete'), token)

    def test_fetch_wrong_type(self):
        """Assert a token of another type does not count."""
        wiki = client(reply({'tokens': {'edittoken': 'e1'}}))
        with self.assertRaises(mw.MalformedResponseError):
            wiki.tokens.fetch('watch')

    def test_fetch_not_a_string(self):
        """Assert a non-string token is malformed."""
        wiki = client(reply({'tokens': {'edittoken': None}}))
        with self.assertRaises(mw.MalformedResponseError):
            wiki.tokens.fetch('edit')

    def test_perform_order(self):
        """Assert the token GET happens strictly before the action POST."""
        wiki = client(reply({'tokens': {'edittoken': 'e1'}}),
                      reply({'edit': {'result': 'Success'}}))
        data = wiki.tokens.perform('edit', 'edit', {'title': 'T', 'text': 'x'})
        methods = [req.method for req in wiki.transport.requests]
        self.assertEqual(methods, ['GET', 'POST'])
        self.assertEqual(wiki.transport.posts[0].params['token'], 'e1')
        self.assertEqual(data, {'edit': {'result': 'Success'}})

    def test_perform_does_not_touch_params(self):
        """Assert the caller's params mapping is left unchanged."""
        wiki = client(reply({'tokens': {'edittoken': 'e1'}}), reply({}))
        params = {'title': 'T', 'text': 'x'}
        wiki.tokens.perform('edit', 'edit', params)
        self.assertEqual(params, {'title': 'T', 'text': 'x'})
