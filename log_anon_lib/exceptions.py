"""
Custom exception hierarchy for the log‑anon library.

All public exceptions inherit from :class:`LogAnonError`, allowing callers
to catch a single base class for any configuration failure while still being
able to differentiate specific error conditions when needed.

Both concrete errors are raised while an anonymizer is being *configured*
(catalog lookup, rule registration).  Scanning text never raises.
"""

from typing import Optional


class LogAnonError(Exception):
    """Base exception for all log‑anon‑specific errors."""

    pass


class UnknownDataTypeError(LogAnonError):
    """Raised when a data type name is not present in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown data type: {name}")


class InvalidPatternError(LogAnonError):
    """Raised when a caller supplied regular expression does not compile."""

    def __init__(self, tag: str, pattern: str, reason: Optional[str] = None):
        self.tag = tag
        self.pattern = pattern
        msg = f"invalid pattern for {tag!r}: {pattern!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
