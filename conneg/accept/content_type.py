"""
    conneg.accept.content_type
    ~~~~~~~~~~~~~~~~~~~~~~~~~~

    Media ranges, ranked `Accept` headers and the rule for matching a media
    range against a content type offered by the server.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from werkzeug.datastructures import ImmutableDict, ImmutableList

from conneg.exceptions import NotAcceptable
from conneg.accept import _base
from conneg.accept._base import WILDCARD


DEFAULT_ACCEPT = '*/*'


class MediaRange(object):
    """A single clause of an `Accept` header.

    Instances are immutable.  `value` may be either a `type/subtype` string or
    a `(type, subtype)` pair.
    """

    def __init__(self, value, q=None, params=None):
        if isinstance(value, str):
            value = _base.split_media_range(value)
        else:
            value = _base.normalize_media_range(*value)
        self._type, self._subtype = value

        self._q = 1.0 if q is None else _base.parse_qvalue(q)

        if params is None:
            params = {}
        self._params = ImmutableDict(params)

    @property
    def type(self):
        return self._type

    @property
    def subtype(self):
        return self._subtype

    @property
    def value(self):
        return '%s/%s' % (self._type, self._subtype)

    @property
    def q(self):
        return self._q

    weight = q

    @property
    def params(self):
        """Extension parameters, not including `q`."""
        return self._params

    extensions = params

    @property
    def is_wildcard_type(self):
        return self._type == WILDCARD

    @property
    def is_wildcard_subtype(self):
        return self._subtype == WILDCARD

    @property
    def specificity(self):
        """`3` for a concrete type and subtype, `2` for `type/*`, `1` for
        `*/subtype` and `0` for `*/*`.
        """
        return (
            (0 if self.is_wildcard_type else 2) +
            (0 if self.is_wildcard_subtype else 1)
        )

    def _key(self):
        return (
            self._type.lower(), self._subtype.lower(),
            self._q, self._params,
        )

    def __eq__(self, other):
        if not isinstance(other, MediaRange):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return '{name}(value={value!r}, q={q!r}, params={params!r})'.format(
            name=self.__class__.__name__,
            value=self.value,
            q=self.q,
            params=dict(self.params),
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        header = self.value

        if self.q != 1:
            header += ';q=%s' % self.q

        for param in self.params.items():
            # TODO quote values containing separators
            header += ';%s=%s' % param

        return header


def ranking_key(media_range):
    """Sort key putting the most preferred media ranges first.

    Higher weights come first, then concrete types before wildcard types,
    then concrete subtypes before wildcard subtypes, then ranges with more
    parameters.  Sorting with this key must be stable so that ties keep the
    order in which the client listed them.
    """
    return (
        -media_range.q,
        media_range.is_wildcard_type,
        media_range.is_wildcard_subtype,
        -len(media_range.params),
    )


def _component_matches(a, b):
    if not a or not b:
        return a == b
    return a == WILDCARD or b == WILDCARD or a.lower() == b.lower()


def matches(media_range, content_type):
    """Returns `True` if the two media ranges overlap.

    A wildcard on either side matches any non-empty value on the other, so
    the test is symmetric.  An empty type or subtype only matches another
    empty one.  Weights and parameters are ignored.
    """
    return (
        _component_matches(media_range.type, content_type.type) and
        _component_matches(media_range.subtype, content_type.subtype)
    )


class ContentTypeAccept(ImmutableList):
    """The media ranges from an `Accept` header, most preferred first.

    `options` may contain `MediaRange` instances, strings, or
    `(value, q[, params])` tuples.  They are ranked once, on construction.
    """

    def __init__(self, options=()):
        ranges = []
        for option in options:
            if isinstance(option, str):
                option = (option,)
            if not isinstance(option, MediaRange):
                option = MediaRange(*option)
            ranges.append(option)

        super(ContentTypeAccept, self).__init__(
            sorted(ranges, key=ranking_key)
        )

    def find(self, content_type):
        """Returns the most preferred media range that matches
        `content_type`, or `None` if there isn't one.
        """
        if isinstance(content_type, str):
            content_type = parse_content_type_header(content_type)

        for media_range in self:
            if matches(media_range, content_type):
                return media_range
        return None

    def accepts(self, content_type):
        return self.find(content_type) is not None

    __contains__ = accepts

    def best_match(self, content_types):
        """Picks the content type to respond with.

        Media ranges are tried from most to least preferred.  For each, the
        first of `content_types` that matches it wins, so the order of
        `content_types` only breaks ties between equally preferred offers.
        The winner is returned exactly as it was passed in.

        :raises NotAcceptable:
            If no offer matches any media range.
        """
        content_types = list(content_types)

        content_type = self._select(content_types)
        if content_type is None:
            raise NotAcceptable(accept=self, content_types=content_types)
        return content_type

    def negotiate(self, content_types):
        """Like `best_match` but returns an empty string instead of raising
        if nothing is acceptable.
        """
        content_type = self._select(list(content_types))
        if content_type is None:
            return ''
        return content_type

    def _select(self, content_types):
        parsed = [
            parse_content_type_header(content_type)
            for content_type in content_types
        ]

        for media_range in self:
            for content_type, offer in zip(content_types, parsed):
                if matches(media_range, offer):
                    return content_type
        return None

    def __str__(self):
        return self.to_header()

    def to_header(self):
        """Return an equivalent string suitable for use as an `Accept` header.
        """
        return ','.join(option.to_header() for option in self)


def parse_accept_header(string):
    """Creates a new `ContentTypeAccept` object from an `Accept` header string.

    A missing or blank header accepts everything.
    """
    if string is None or not string.strip():
        string = DEFAULT_ACCEPT

    return ContentTypeAccept(
        MediaRange(accept, q, params)
        for accept, q, params in _base.split_accept_string(string)
    )


def parse_content_type_header(string):
    """Creates a new `MediaRange` object from a mime type string.

    Parameters are discarded, and omitted types or subtypes are treated as
    wildcards.
    """
    value, *_ = string.split(';')
    return MediaRange(value)
