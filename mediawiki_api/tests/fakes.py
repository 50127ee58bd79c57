"""An in-memory transport for the test suite."""
import json
import mediawiki_api as mw

API_URL = 'http://localhost/api.php'
INDEX_URL = 'http://localhost/w/index.php'
SESSION_COOKIE = 'prefixSession=789; path=/; domain=localhost; HttpOnly'

def reply(body=None, text=None, set_cookies=(), status=200):
    """Build an ApiResponse from a JSON-able body or raw text."""
    if text is None:
        text = json.dumps(body if body is not None else {})
    return mw.ApiResponse(status, text, {}, set_cookies)

class FakeTransport:
    """Replays queued responses and records every request sent."""
    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def send(self, request):
        """Record ``request`` and answer with the next queued response."""
        self.requests.append(request)
        if not self.responses:
            raise AssertionError('unexpected request: {!r}'.format(request))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def posts(self):
        """Only the POST requests."""
        return [req for req in self.requests if req.method == 'POST']

def client(*responses):
    """A Client talking to a FakeTransport loaded with ``responses``."""
    return mw.Client(API_URL, INDEX_URL, 'Test suite',
                     transport=FakeTransport(*responses))
