"""
Tests for the KVParse exception hierarchy.
"""

import unittest

from KVParse.exceptions import (
    AccessError, AmbiguousKeywordError, ConfigIOError, ConfigSyntaxError,
    IllegalValueError, KVParseError, MissingKeywordError, ParseError,
)


class TestExceptions(unittest.TestCase):
    """Test cases for error codes, messages and base classes."""

    def test_hierarchy(self):
        self.assertTrue(issubclass(ConfigSyntaxError, ParseError))
        self.assertTrue(issubclass(ConfigIOError, ParseError))
        self.assertTrue(issubclass(ConfigIOError, OSError))
        for error_class in (MissingKeywordError, AmbiguousKeywordError, IllegalValueError):
            self.assertTrue(issubclass(error_class, AccessError))
            self.assertTrue(issubclass(error_class, KVParseError))

    def test_builtin_compatibility(self):
        with self.assertRaises(KeyError):
            raise MissingKeywordError("required keyword 'x' not specified", keyword="x")
        with self.assertRaises(ValueError):
            raise IllegalValueError("bad", keyword="x")

    def test_error_codes(self):
        self.assertEqual(ConfigSyntaxError().error_code, "KV-PARSE-1001")
        self.assertEqual(ConfigIOError().error_code, "KV-PARSE-1002")
        self.assertEqual(MissingKeywordError().error_code, "KV-ACCESS-2001")
        self.assertEqual(AmbiguousKeywordError().error_code, "KV-ACCESS-2002")
        self.assertEqual(IllegalValueError().error_code, "KV-ACCESS-2003")

    def test_syntax_error_message(self):
        error = ConfigSyntaxError(source="run.cfg", line_number=12, line="oops")
        self.assertEqual(str(error), "syntax error in run.cfg (12): oops")
        self.assertEqual(error.context, {"source": "run.cfg", "line_number": 12, "line": "oops"})

    def test_syntax_error_keyword_context(self):
        error = ConfigSyntaxError("unterminated quote in value of keyword 'title'", keyword="title")
        self.assertEqual(error.keyword, "title")
        self.assertEqual(error.to_dict()["context"], {"keyword": "title"})
        self.assertIsNone(ConfigSyntaxError(source="run.cfg", line_number=1, line="x").keyword)

    def test_missing_keyword_str_is_message(self):
        # KeyError would otherwise repr() its argument
        error = MissingKeywordError("required keyword 'x' not specified", keyword="x")
        self.assertEqual(str(error), "required keyword 'x' not specified")

    def test_io_error(self):
        cause = FileNotFoundError(2, "No such file or directory")
        error = ConfigIOError("failed to open configuration file: a.cfg", path="a.cfg", cause=cause)
        self.assertEqual(str(error), "failed to open configuration file: a.cfg")
        self.assertEqual(error.path, "a.cfg")
        self.assertIs(error.cause, cause)

    def test_to_dict(self):
        error = IllegalValueError("illegal value 'x' for integer keyword 'n'", keyword="n")
        self.assertEqual(error.to_dict(), {
            "error_code": "KV-ACCESS-2003",
            "message": "illegal value 'x' for integer keyword 'n'",
            "user_message": IllegalValueError.user_message,
            "context": {"keyword": "n"},
        })

    def test_default_message(self):
        self.assertEqual(str(AmbiguousKeywordError()), AmbiguousKeywordError.__doc__)


if __name__ == "__main__":
    unittest.main()
