import unittest
from unittest.mock import MagicMock

from url_otpauth import OtpType
from url_otpauth.utils.importers.uri_list import parse_uri_list

EXPORT = """
otpauth://totp/GitHub:octocat?secret=JBSWY3DPEHPK3PXP&issuer=GitHub
otpauth://hotp/alice?secret=HXDMVJECJJWSRB3HWIZR4IFUGFTMXBOZ&counter=3

# exported by Authenticator
otpauth://hotp/bob?secret=JBSWY3DPEHPK3PXP
otpauth://totp/A:B:C?secret=JBSWY3DPEHPK3PXP
"""


class TestParseUriList(unittest.TestCase):
    """Test cases for the one-URI-per-line importer"""

    def test_mixed_export(self):
        result = parse_uri_list(EXPORT)

        self.assertEqual(result["total_lines"], 6)
        self.assertEqual(len(result["valid_tokens"]), 2)
        self.assertEqual(result["skipped"], 2)
        self.assertEqual(result["failed_validation"], 2)
        self.assertEqual(result["status"], "warning")

        github, alice = result["valid_tokens"]
        self.assertEqual(github.issuer, "GitHub")
        self.assertIs(alice.type, OtpType.HOTP)
        self.assertEqual(alice.counter, 3)

        self.assertEqual([(e["line"], e["error"]) for e in result["errors"]],
                         [(5, "MISSING_COUNTER"), (6, "INVALID_LABEL")])

    def test_all_valid(self):
        result = parse_uri_list("otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP\n")

        self.assertEqual(result["status"], "success")
        self.assertEqual(result["message"], "Successfully parsed 1 tokens.")

    def test_all_invalid(self):
        result = parse_uri_list("otpauth://totp/alice\notpauth://motp/bob?secret=X")

        self.assertEqual(result["status"], "error")
        self.assertEqual(result["valid_tokens"], [])
        self.assertEqual([e["error"] for e in result["errors"]], ["MISSING_SECRET_KEY", "UNKNOWN_OTP"])

    def test_only_skipped_lines(self):
        result = parse_uri_list("hello\nworld")

        self.assertEqual(result["status"], "warning")
        self.assertEqual(result["skipped"], 2)
        self.assertIn("No valid otpauth URIs found", result["message"])

    def test_empty_input(self):
        result = parse_uri_list("   \n")

        self.assertEqual(result["status"], "warning")
        self.assertEqual(result["total_lines"], 0)

    def test_strict_issuer_passed_through(self):
        content = "otpauth://totp/Label:alice?secret=X&issuer=Other"

        self.assertEqual(parse_uri_list(content)["failed_validation"], 0)
        strict = parse_uri_list(content, strict_issuer=True)
        self.assertEqual(strict["errors"][0]["error"], "INVALID_ISSUER")

    def test_progress_callback(self):
        callback = MagicMock()
        parse_uri_list("otpauth://totp/a?secret=X\notpauth://totp/b?secret=X", progress_callback=callback)

        self.assertEqual(callback.call_count, 2)
        callback.assert_called_with(2, 2)

    def test_failing_progress_callback_does_not_abort(self):
        callback = MagicMock(side_effect=RuntimeError("ui gone"))
        result = parse_uri_list("otpauth://totp/a?secret=X", progress_callback=callback)

        self.assertEqual(len(result["valid_tokens"]), 1)


if __name__ == '__main__':
    unittest.main()
