"""
    conneg
    ~~~~~~

    :copyright: (c) 2014 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
from conneg.exceptions import NotAcceptable
from conneg.accept import (
    MediaRange, ContentTypeAccept,
    parse_accept_header, parse_content_type_header,
    select_content_type, negotiate, accepts,
)

__all__ = [
    'MediaRange', 'ContentTypeAccept',
    'parse_accept_header', 'parse_content_type_header',
    'select_content_type', 'negotiate', 'accepts',
    'NotAcceptable',
]
