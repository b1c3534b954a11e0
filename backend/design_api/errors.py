"""Error types rendered as ``{"success": false, "message": ...}`` responses."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import status

logger = logging.getLogger(__name__)

NOT_FOUND_VIEW = "Design not found! or you don't have permission to view it."
NOT_FOUND_DELETE = "Design not found! or you don't have permission to delete it."


class DesignError(Exception):
    """Base error carrying the HTTP status and the client-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidRequest(DesignError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request body"


class NotAuthenticated(DesignError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class DesignNotFound(DesignError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = NOT_FOUND_VIEW


class MissingConfiguration(DesignError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server missing AIML API key"


@contextmanager
def failure_message(message: str) -> Iterator[None]:
    """Turn unexpected exceptions into a 500 with a fixed message.

    ``DesignError`` passes through untouched; anything else is logged with its
    traceback and replaced so internals never reach the caller.
    """
    try:
        yield
    except DesignError:
        raise
    except Exception as exc:
        logger.exception("%s", message)
        raise DesignError(message) from exc
