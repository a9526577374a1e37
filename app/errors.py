"""
Pipeline errors.

Every failure downstream of the upload carries a readable message and, where
there is one, the raw text that caused it so the user can inspect and resubmit.
"""
from __future__ import annotations


class ResumeError(Exception):
    """Base class for everything the résumé pipeline raises."""

    def __init__(self, message: str, raw: str | None = None):
        super().__init__(message)
        self.message = message
        self.raw = raw


class ExtractionError(ResumeError):
    """The PDF could not be turned into text."""


class InvocationError(ResumeError):
    """The model backend was unreachable or refused the request."""


class PayloadParseError(ResumeError):
    """A payload was extracted from the completion but is not valid JSON."""


class SchemaError(ResumeError):
    """Parsed JSON does not fit the Resume shape."""

    def __init__(self, path: str, reason: str, raw: str | None = None):
        super().__init__(f"{path or '<root>'}: {reason}", raw)
        self.path = path
        self.reason = reason
