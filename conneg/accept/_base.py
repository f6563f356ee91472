"""
    conneg.accept._base
    ~~~~~~~~~~~~~~~~~~~

    Tokenizer for `Accept` style headers.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import re
import math
import logging


log = logging.getLogger(__name__)


WILDCARD = '*'


_qvalue_re = re.compile(
    r'''
        ^
        [+-]?
        (?:
            [0-9]+ (?: \. [0-9]* )?
            |
            \. [0-9]+
        )
        $
    ''', re.VERBOSE
)


def parse_qvalue(value):
    """Converts the text of a `q` parameter to a float in the range `[0, 1]`.

    Values greater than one are clamped to one.

    :raises ValueError:
        If `value` is not a finite, non-negative decimal number.
    """
    if isinstance(value, str):
        value = value.strip()
        if _qvalue_re.match(value) is None:
            raise ValueError("invalid quality value: %r" % value)

    q = float(value)
    if not math.isfinite(q) or q < 0:
        raise ValueError("quality value out of range: %r" % value)

    # `or` folds -0.0 into 0.0
    return min(q, 1.0) or 0.0


def split_media_range(string):
    """Splits a media range into a `(type, subtype)` pair.

    Omitted halves are filled in with a wildcard, so `'text'` and `'text/'`
    both become `('text', '*')` and `'/xml'` becomes `('*', 'xml')`.  The
    empty string is returned as a pair of empty strings, which only match
    each other.
    """
    string = string.strip()
    if not string:
        return '', ''

    type, _, subtype = string.partition('/')
    return normalize_media_range(type, subtype)


def normalize_media_range(type, subtype):
    """Strips both halves of a media range, replacing blank ones with a
    wildcard.
    """
    return type.strip() or WILDCARD, subtype.strip() or WILDCARD


def _split_param(param):
    key, sep, value = param.partition('=')
    return key.strip(), value.strip(), bool(sep)


def split_accept_string(string):
    """Yields a `(media_range, q, params)` tuple for each clause in `string`.

    `q` is a float, or `None` if the clause did not specify one.  Clauses
    with a malformed or negative `q` are discarded.
    """
    for accept_range in string.split(','):
        accept, *str_params = accept_range.split(';')

        accept = accept.strip()
        if not accept:
            log.debug("skipping empty clause in %r", string)
            continue

        q = None
        params = {}
        try:
            for param in str_params:
                if not param.strip():
                    continue

                key, value, has_value = _split_param(param)
                if key == 'q':
                    if not has_value:
                        raise ValueError("missing quality value")
                    q = parse_qvalue(value)
                else:
                    params[key] = value
        except ValueError as e:
            log.debug("dropping %r: %s", accept_range.strip(), e)
            continue

        yield accept, q, params
