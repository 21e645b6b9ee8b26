# src/core/errors.py
"""
Exceptions raised by the library and playback core.
"""
from __future__ import annotations


class PyTunesError(Exception):
    """Base exception for all application-specific errors."""


class LoadError(PyTunesError):
    """Raised when a serialized library is unreadable or malformed."""


class TrackDecodeError(PyTunesError, ValueError):
    """Raised when a track record is missing required fields or has bad values."""


class TrackNotFoundError(PyTunesError, KeyError):
    """Raised when a command names a track id that is not in the library."""


class LibraryInvariantError(AssertionError):
    """
    track_order and tracks have gone out of sync.
    This is a bug in the core, never a runtime condition to recover from.
    """
