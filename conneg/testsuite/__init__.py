"""
    conneg.testsuite
    ~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2015 Ben Mather
    :license:
        BSD, see LICENSE for more details.

"""
import unittest

from conneg.testsuite import (
    test_exceptions, test_accept_base, test_accept_content_type, test_accept,
)


loader = unittest.TestLoader()
suite = unittest.TestSuite((
    loader.loadTestsFromModule(test_exceptions),
    loader.loadTestsFromModule(test_accept_base),
    loader.loadTestsFromModule(test_accept_content_type),
    loader.loadTestsFromModule(test_accept),
))
