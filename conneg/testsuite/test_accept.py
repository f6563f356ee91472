"""
    conneg.testsuite.test_accept
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    Tests for choosing a content type based on an `Accept` header.

    :copyright: (c) 2014 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
import unittest

from conneg.exceptions import NotAcceptable
from conneg.accept import (
    parse_accept_header, select_content_type, negotiate, accepts,
)


_BROWSER_HEADER = (
    'application/xml,application/xhtml+xml,'
    'text/html;q=0.9,text/plain;q=0.8,image/png,*/*;q=0.5'
)

_CHROME_HEADER = (
    'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8'
)

_MIXED_HEADER = (
    'text/html;q=0.9,text/plain,application/xhtml+xml,application/xml;q=0.9'
)


class NegotiateTestCase(unittest.TestCase):
    def test_no_content_types(self):
        self.assertEqual('', negotiate(_BROWSER_HEADER, []))

    def test_empty_header(self):
        self.assertEqual(
            'application/octet-stream',
            negotiate('', ['application/octet-stream', 'image/jpeg'])
        )
        self.assertEqual(
            'image/jpeg', negotiate(None, ['image/jpeg'])
        )

    def test_header_order(self):
        self.assertEqual(
            'application/xml',
            negotiate(_BROWSER_HEADER, [
                'text/plain',
                'text/html',
                'application/xhtml+xml',
                'application/xml',
            ])
        )

    def test_content_type_order(self):
        self.assertEqual(
            'text/plain', negotiate(_CHROME_HEADER, ['text/plain', 'image/png'])
        )

    def test_shorthand_returned_verbatim(self):
        self.assertEqual(
            'text/', negotiate(_CHROME_HEADER, ['text/', '/xml'])
        )

    def test_wildcard_content_types(self):
        self.assertEqual(
            '*/*', negotiate(_MIXED_HEADER, ['*/*', 'text/plain'])
        )
        self.assertEqual(
            'text/*', negotiate(_MIXED_HEADER, ['text/*', 'text/plain'])
        )
        self.assertEqual(
            '*/xhtml+xml',
            negotiate(_MIXED_HEADER, ['*/xhtml+xml', 'application/xhtml+xml'])
        )

    def test_weight_beats_content_type_order(self):
        self.assertEqual(
            'text/html',
            negotiate('text/plain;q=0.5,text/html', ['text/plain', 'text/html'])
        )

    def test_no_match(self):
        self.assertEqual(
            '', negotiate('text/html,application/json', ['image/png'])
        )

    def test_no_match_generator(self):
        accept = parse_accept_header('text/html')
        self.assertEqual('', accept.negotiate(iter(['image/png'])))
        self.assertEqual(
            'text/html',
            accept.negotiate(iter(['image/png', 'text/html']))
        )

    def test_empty_content_type(self):
        self.assertEqual('', negotiate('*/*', ['']))
        self.assertEqual('text/plain', negotiate('', ['', 'text/plain']))

    def test_malformed_header(self):
        self.assertEqual(
            'text/html',
            negotiate(
                'image/png;q=bad,text/html;q=0.1',
                ['image/png', 'text/html'],
            )
        )

    def test_parsed_header(self):
        accept = parse_accept_header(_CHROME_HEADER)
        self.assertEqual(
            'application/xml',
            negotiate(accept, ['application/json', 'application/xml'])
        )
        self.assertEqual(
            'application/xml', accept.negotiate(iter(['application/xml']))
        )


class SelectContentTypeTestCase(unittest.TestCase):
    def test_select(self):
        self.assertEqual(
            'application/json',
            select_content_type(
                'application/json', ['text/html', 'application/json']
            )
        )
        self.assertEqual(
            'application/xml',
            select_content_type(
                'application/xml;q=0.9,text/html;q=0.8',
                ['application/json', 'text/html', 'application/xml'],
            )
        )

    def test_not_acceptable(self):
        with self.assertRaises(NotAcceptable) as cm:
            select_content_type('image/png', ['text/html', 'text/plain'])

        self.assertEqual(406, cm.exception.code)
        self.assertEqual(['text/html', 'text/plain'], cm.exception.content_types)
        self.assertEqual(
            ['image/png'], [range_.value for range_ in cm.exception.accept]
        )

    def test_no_content_types(self):
        self.assertRaises(NotAcceptable, select_content_type, None, [])


class AcceptsTestCase(unittest.TestCase):
    def test_accepts(self):
        accept = parse_accept_header(_CHROME_HEADER)
        for content_type in [
                    'text/html',
                    'application/xhtml+xml',
                    'application/xml',
                    'text',
                    'image',
                    'text/*',
                    'image/*',
                    '*/html',
                    '*/xml',
                ]:
            with self.subTest(content_type=content_type):
                self.assertTrue(accepts(accept, content_type))

    def test_does_not_accept(self):
        accept = parse_accept_header(
            'text/html,application/xhtml+xml,application/xml;q=0.9'
        )
        for content_type in [
                    '',
                    'text/plain',
                    'application/octet-stream',
                ]:
            with self.subTest(content_type=content_type):
                self.assertFalse(accepts(accept, content_type))

    def test_accepts_header_string(self):
        self.assertTrue(accepts('text/*', 'text/csv'))
        self.assertTrue(accepts('', 'anything/really'))
        self.assertFalse(accepts('text/*', 'image/png'))

    def test_zero_weight_is_not_special(self):
        self.assertTrue(accepts('text/html;q=0', 'text/html'))

    def test_empty_content_type_never_accepted(self):
        self.assertFalse(accepts('', ''))
        self.assertFalse(accepts('text/html,*/*;q=0.8', ''))
        self.assertFalse(accepts(parse_accept_header('*/*'), ''))
