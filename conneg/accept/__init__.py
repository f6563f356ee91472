"""
    conneg.accept
    ~~~~~~~~~~~~~

    Code for choosing a content type based on an `Accept` header

    http://www.w3.org/Protocols/rfc2616/rfc2616-sec14.html

    :copyright: (c) 2015 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
from conneg.accept.content_type import (
    MediaRange, ContentTypeAccept, DEFAULT_ACCEPT,
    parse_accept_header, parse_content_type_header,
    ranking_key, matches,
)


def _coerce_accept(accept):
    if accept is None or isinstance(accept, str):
        accept = parse_accept_header(accept)
    return accept


def select_content_type(accept, content_types):
    """Returns the member of `content_types` that best satisfies `accept`.

    :param accept:
        String in the same format as an http `Accept` header, or an already
        parsed `ContentTypeAccept`.  `None` means the header was not sent.

    :param content_types:
        The content types the server can produce, in order of the server's
        preference.  Omitted types or subtypes match anything.

    :raises NotAcceptable: If none of `content_types` are acceptable.
    """
    return _coerce_accept(accept).best_match(content_types)


def negotiate(accept, content_types):
    """Like `select_content_type` but returns an empty string if nothing is
    acceptable.
    """
    return _coerce_accept(accept).negotiate(content_types)


def accepts(accept, content_type):
    """Returns `True` if any media range in `accept` matches `content_type`.
    """
    return _coerce_accept(accept).accepts(content_type)


__all__ = [
    'MediaRange', 'ContentTypeAccept', 'DEFAULT_ACCEPT',
    'parse_accept_header', 'parse_content_type_header',
    'ranking_key', 'matches',
    'select_content_type', 'negotiate', 'accepts',
]
