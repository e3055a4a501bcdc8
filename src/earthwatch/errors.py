"""Exceptions raised by the fetch and normalization layers."""

from __future__ import annotations


class EarthwatchError(Exception):
    """Base class for dashboard errors surfaced to the presentation layer."""


class FetchError(EarthwatchError):
    """The primary climate-data request failed in transport or returned an unparseable body."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DataError(EarthwatchError):
    """The primary payload is malformed or holds no usable temperature samples."""
