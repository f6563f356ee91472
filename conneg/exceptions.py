"""
    conneg.exceptions
    ~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from werkzeug import exceptions


class NotAcceptable(exceptions.NotAcceptable):
    """Raised when none of the content types a server can produce satisfy the
    client's `Accept` header.

    Subclasses werkzeug's `406 Not Acceptable` exception so it can be raised
    straight out of a view.

    `accept`
        The parsed `ContentTypeAccept` that nothing matched.

    `content_types`
        The content types that were offered.
    """
    def __init__(self, description=None, response=None, *,
                 accept=None, content_types=()):
        super(NotAcceptable, self).__init__(description, response)
        self.accept = accept
        self.content_types = list(content_types)


__all__ = ['NotAcceptable']
