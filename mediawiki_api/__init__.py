"""
A small MediaWiki API client for logging in and making token-gated edits.

Handles the login and account-creation handshakes (including the
NeedToken retry), keeps the session cookies, and fetches a fresh action
token before every write.

Requires the ``requests`` library.

http://www.mediawiki.org/

Installation
============

To install the latest development version::

    git clone <repository url> mediawiki-api
    cd mediawiki-api
    pip install -e .

Example Usage
=============

.. code-block:: python

    import mediawiki_api as mw

Log in:

.. code-block:: python

    wiki = mw.Client("https://wiki.example.org/w/api.php",
                     user_agent="MyCoolBot/0.0.0")

    wiki.log_in("Example", password)

Create a page, then delete it:

.. code-block:: python

    wiki.create_page("User:Example/sandbox", "Hello!")
    wiki.delete_page("User:Example/sandbox", "cleaning up")

Read raw wikitext:

.. code-block:: python

    text = wiki.get_wikitext("Main Page")

Watch and unwatch:

.. code-block:: python

    sandbox = wiki.page("User:Example/sandbox")
    sandbox.watch()
    sandbox.unwatch()

Handle a rejected login:

.. code-block:: python

    try:
        wiki.log_in("Example", "wrong")
    except mw.LoginError as exc:
        print("rejected:", exc.code)

MIT Licensed.
"""
import logging

__version__ = '1.0.0'

from .client import Client, USER_AGENT
from .page import Page
from .session import Session
from .tokens import ActionToken, TokenCache, TokenGate
from .transport import ApiRequest, ApiResponse, RequestsTransport
from .excs import (WikiError, AuthError, LoginError, CreateAccountError,
                   TransportError, MalformedResponseError, WikiWarning)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'USER_AGENT',
    'Client',
    'Page',
    'Session',
    'ActionToken',
    'TokenCache',
    'TokenGate',
    'ApiRequest',
    'ApiResponse',
    'RequestsTransport',
    'WikiError',
    'AuthError',
    'LoginError',
    'CreateAccountError',
    'TransportError',
    'MalformedResponseError',
    'WikiWarning',
]
