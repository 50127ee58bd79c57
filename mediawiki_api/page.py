"""
This submodule contains the Page object.
"""

__all__ = [
    'Page',
]

class Page:
    """The class for a page on a wiki.

    Must be initialized with a Client instance. Every method is a thin
    shortcut to the Client method of the same purpose.
    """
    def __init__(self, client, title=None, **data):
        """Initialize a page with its client and title.

        Extra keyword arguments are stored as attributes.
        """
        self.client = client
        self.title = title
        self.__dict__.update(data)

    def __repr__(self):
        """Represent a page instance."""
        return "<Page {name}>".format(name=self.title)

    def __eq__(self, other):
        """Check if two pages are the same."""
        if not isinstance(other, Page):
            return NotImplemented
        return self.title == other.title

    def __hash__(self):
        """Page.__hash__() <==> hash(Page)"""
        return hash(self.title)

    __str__ = __repr__

    def read(self):
        """Retrieve the page's wikitext."""
        self.content = self.client.get_wikitext(self.title)
        return self.content

    def edit(self, content, **evil):
        """Replace the page's content with ``content``."""
        return self.client.create_page(self.title, content, **evil)

    def delete(self, reason, **evil):
        """Delete this page. Note: this is NOT the same thing
        as `del page`! `del` only unsets names, not objects.
        """
        return self.client.delete_page(self.title, reason, **evil)

    def watch(self, **evil):
        """Add this page to the watchlist."""
        return self.client.watch_page(self.title, **evil)

    def unwatch(self, **evil):
        """Remove this page from the watchlist."""
        return self.client.unwatch_page(self.title, **evil)
