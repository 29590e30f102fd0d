"""Exceptions raised by rhythm-key parsing, digesting and capture."""

from typing import Optional


class RhythmKeyError(Exception):
    """Base class for every rhythm-key failure."""


class ParseError(RhythmKeyError, ValueError):
    """A token could not be parsed into a rhythm-key."""

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


class EmptyInputError(ParseError):
    """The token is empty."""

    def __init__(self, message: str = "empty rhythm-key"):
        super().__init__(message)


class MalformedHeaderError(ParseError):
    """A field does not start with the ``t`` marker."""


class MissingTimingError(ParseError):
    """A ``t`` marker is not followed by any decimal digit."""


class TimingOverflowError(ParseError):
    """A field's timing does not fit a signed 64-bit integer."""


class TruncatedFieldError(ParseError):
    """A field's timing runs to the end of the token without a character."""


class InvalidBucketWidthError(RhythmKeyError, ValueError):
    """A digest was requested with a bucket width that is not a positive integer."""


class SourceFailureError(RhythmKeyError):
    """The capture source failed for a reason other than end of input."""


class CaptureSessionClosedError(RhythmKeyError, RuntimeError):
    """A capture session was used after it was finished or abandoned."""
