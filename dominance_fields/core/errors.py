"""
Error taxonomy for evaluation fields.

Every error carries a stable code for programmatic handling. None of them is
recoverable inside this package: they surface to the table loader or rule
engine that made the call.

Codes:
- NULL_ARGUMENT: a required evaluation, catalog, attribute or preference type is None
- INVALID_TYPE: value kinds disagree (attribute vs factory, pair members)
- INVALID_VALUE: a value outside its domain (enumeration index, NaN, bad catalog)
- FIELD_PARSE: a textual literal could not be parsed
- UNCOMPARABLE: strict comparison of two evaluations that have no definite order
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FieldError(Exception):
    """
    Base class for evaluation field errors.

    Attributes:
        code: Stable error code for programmatic handling
        message: Human-readable error description
    """

    code = "FIELD_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"{self.code}: {message}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "error": "field_error",
            "code": self.code,
            "message": self.message,
        }


class NullArgumentError(FieldError):
    """Raised when None is passed where an argument is required."""

    code = "NULL_ARGUMENT"


class InvalidTypeError(FieldError):
    """Raised when the kind of a value does not fit where it is used."""

    code = "INVALID_TYPE"


class InvalidValueError(FieldError):
    """Raised when a value lies outside the domain of its type."""

    code = "INVALID_VALUE"


class UncomparableError(FieldError):
    """Raised by strict comparison when two evaluations have no definite order."""

    code = "UNCOMPARABLE"


class FieldParseError(FieldError):
    """
    Raised when a textual evaluation cannot be parsed.

    Attributes:
        text: The offending literal
        attribute_name: Name of the attribute the literal was read for
    """

    code = "FIELD_PARSE"

    def __init__(
        self, message: str, text: Optional[str] = None, attribute_name: Optional[str] = None
    ):
        self.text = text
        self.attribute_name = attribute_name
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["text"] = self.text
        data["attribute"] = self.attribute_name
        return data
