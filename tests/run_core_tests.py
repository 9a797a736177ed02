#!/usr/bin/env python
"""
Run the tests that don't need the native zbar library.
Use this if pyzbar can't find libzbar on your system.
"""
import unittest
import sys
import os

# Add the parent directory to sys.path so we can import the package
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
sys.path.insert(0, parent_dir)
sys.path.insert(0, current_dir)

from test_otpauth_parser import (TestParseValid, TestPyotpProvisioningURIs, TestParseInvalid,
                                 TestValidationOrder, TestStrictIssuer)
from test_descriptor import TestOtpDescriptor, TestOtpauthInvalidURL
from test_uri_list import TestParseUriList
from test_file_io import TestFileIO
from test_config import TestSettings

CORE_TEST_CASES = [
    TestParseValid,
    TestPyotpProvisioningURIs,
    TestParseInvalid,
    TestValidationOrder,
    TestStrictIssuer,
    TestOtpDescriptor,
    TestOtpauthInvalidURL,
    TestParseUriList,
    TestFileIO,
    TestSettings,
]


def run_core_tests():
    """Run the core url-otpauth tests and print a summary."""
    loader = unittest.TestLoader()
    test_suite = unittest.TestSuite()
    for test_case in CORE_TEST_CASES:
        test_suite.addTest(loader.loadTestsFromTestCase(test_case))

    print("\n===== Running url-otpauth Core Tests =====\n")
    result = unittest.TextTestRunner(verbosity=2).run(test_suite)

    print("\n===== Test Summary =====")
    print(f"Tests run: {result.testsRun}")
    print(f"Errors: {len(result.errors)}")
    print(f"Failures: {len(result.failures)}")
    print(f"Skipped: {len(result.skipped)}")

    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(run_core_tests())
