# SPDX-License-Identifier: MIT

from typing import Optional


class DayboundError(Exception):
    """Base exception for daybound operations."""


class InvalidDateError(DayboundError, ValueError):
    """Raised when a target date string does not parse."""


class MalformedEventError(DayboundError):
    """Raised when a source event has neither a dateTime nor a date."""

    def __init__(self, message: str, summary: Optional[str] = None) -> None:
        super().__init__(message)
        self.summary = summary


class EventSourceError(DayboundError):
    """Raised when an event source cannot be read."""


class DocumentIOError(DayboundError):
    """Raised when the target document cannot be read or written."""
