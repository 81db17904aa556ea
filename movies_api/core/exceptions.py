"""Error taxonomy shared by the store services and the aggregator."""

from __future__ import annotations

from http import HTTPStatus
from typing import Iterable, List, Optional


class MoviesApiError(Exception):
    """Base error; carries the HTTP status it is rendered with."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = '',
                 status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFound(MoviesApiError):
    """Upstream (or local store) has no entity with the requested id."""

    status_code = HTTPStatus.NOT_FOUND


class ClientError(MoviesApiError):
    """Upstream answered with a 4xx other than 404. Never retried.

    Constructed with the upstream status; 400 is the fallback when the
    status is not known.
    """

    status_code = HTTPStatus.BAD_REQUEST


class ServerError(MoviesApiError):
    """Upstream answered with a 5xx, timed out or was unreachable.

    The response status is always 500; the upstream one is kept
    in ``upstream_status`` for logs.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = '',
                 upstream_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class ValidationError(MoviesApiError):
    """Local input violates one or more constraints."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations: List[str] = sorted(violations)
        super().__init__(', '.join(self.violations))
