"""Exceptions raised while fetching and windowing pod logs."""

from __future__ import annotations


class PodLogsError(Exception):
    """Base class for podlogs errors."""


class LookupFailure(PodLogsError):
    """The pod or its logs could not be retrieved from the API server."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidPageSize(PodLogsError, ValueError):
    """Page size (count) must be a positive integer."""

    def __init__(self, count: int):
        super().__init__(f"count must be positive, got {count}")
        self.count = count
