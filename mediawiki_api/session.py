"""
The Session: cookies and logged-in state for one Client.
"""

__all__ = [
    'Session',
]

class Session:
    """Cookies and the logged-in flag of one client.

    Cookies are a plain name -> value mapping; a later Set-Cookie for the
    same name replaces the earlier value. Nothing is ever removed.
    """
    def __init__(self):
        """Start empty and logged out."""
        self.cookies = {}
        self.logged_in = False

    def __repr__(self):
        """Represent a Session."""
        return "<Session cookies={names} logged_in={state}>".format(
            names=sorted(self.cookies), state=self.logged_in)

    __str__ = __repr__

    def set_cookie(self, header):
        """Store the leading name=value pair of one Set-Cookie header.

        Attributes (path, domain, HttpOnly...) are ignored.
        """
        pair = header.split(';', 1)[0].strip()
        name, sep, value = pair.partition('=')
        name = name.strip()
        if not sep or not name:
            return
        self.cookies[name] = value.strip()

    def update_from_response(self, response):
        """Merge every Set-Cookie header of ``response``."""
        for header in response.set_cookies:
            self.set_cookie(header)

    def cookie_header(self):
        """Return the Cookie header value, '' when there are no cookies."""
        return '; '.join('{}={}'.format(name, value)
                         for name, value in self.cookies.items())

    def mark_logged_in(self):
        """Record a successful login."""
        self.logged_in = True
