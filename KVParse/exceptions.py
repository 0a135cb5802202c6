"""
Custom exceptions for the KVParse package.

This module defines a hierarchical exception system that provides:
1. Specific, technical error information for debugging and logging
2. User-friendly error messages for command-line output
3. Error codes for consistent error identification
4. Optional context information for additional debugging
"""

from typing import Optional, Dict, Any


class KVParseError(Exception):
    """Base exception for all KVParse errors."""

    error_code = "KV-GENERIC-ERROR"
    user_message = "An unexpected error occurred."

    def __init__(
        self,
        message: str = None,
        user_message: str = None,
        error_code: str = None,
        context: Dict[str, Any] = None,
        cause: Exception = None,
    ):
        # Technical message for logs
        self.message = message or self.__class__.__doc__ or "An error occurred."
        super().__init__(self.message)

        self.user_message = user_message or self.__class__.user_message
        self.error_code = error_code or self.__class__.error_code
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary for structured output."""
        error_dict = {
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
        }
        if self.context:
            error_dict["context"] = dict(self.context)
        if self.cause is not None:
            error_dict["cause"] = str(self.cause)
        return error_dict


# Parse Errors - 1000 range
class ParseError(KVParseError):
    """Base exception for errors raised while reading configuration input."""
    error_code = "KV-PARSE-1000"
    user_message = "The configuration could not be read."


class ConfigSyntaxError(ParseError):
    """Exception raised for a malformed line or value."""
    error_code = "KV-PARSE-1001"
    user_message = "The configuration contains a syntax error."

    def __init__(
        self,
        message: str = None,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        cause: Exception = None,
        keyword: Optional[str] = None,
    ):
        self.source = source
        self.line_number = line_number
        self.line = line
        self.keyword = keyword
        if message is None and source is not None:
            message = format_syntax_error(source, line_number, line)
        context = {}
        if source is not None:
            context = {"source": source, "line_number": line_number, "line": line}
        if keyword is not None:
            context["keyword"] = keyword
        super().__init__(message, context=context, cause=cause)


class ConfigIOError(ParseError, OSError):
    """Exception raised when a configuration source cannot be opened or read."""
    error_code = "KV-PARSE-1002"
    user_message = "The configuration file could not be opened."

    def __init__(self, message: str = None, path: Optional[str] = None, cause: Exception = None):
        self.path = path
        context = {"path": path} if path is not None else {}
        KVParseError.__init__(self, message, context=context, cause=cause)


# Access Errors - 2000 range
class AccessError(KVParseError):
    """Base exception for errors raised while retrieving a typed value."""
    error_code = "KV-ACCESS-2000"
    user_message = "A configuration value could not be retrieved."

    def __init__(self, message: str = None, keyword: Optional[str] = None, cause: Exception = None):
        self.keyword = keyword
        context = {"keyword": keyword} if keyword is not None else {}
        super().__init__(message, context=context, cause=cause)


class MissingKeywordError(AccessError, KeyError):
    """Exception raised when a required keyword is not specified."""
    error_code = "KV-ACCESS-2001"
    user_message = "A required configuration keyword is missing."


class AmbiguousKeywordError(AccessError):
    """Exception raised when a scalar is requested for a keyword with multiple values."""
    error_code = "KV-ACCESS-2002"
    user_message = "A configuration keyword has more than one value."


class IllegalValueError(AccessError, ValueError):
    """Exception raised for a value that is invalid for the requested type."""
    error_code = "KV-ACCESS-2003"
    user_message = "A configuration value has an invalid format."


def format_syntax_error(source: str, line_number: Optional[int], line: Optional[str]) -> str:
    """Build the ``syntax error in <source> (<n>): <line>`` message."""
    return f"syntax error in {source} ({line_number}): {line}"
