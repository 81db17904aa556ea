"""Shared transport logic for outbound calls of the aggregator."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Mapping, Optional

import httpx

from movies_api.core.exceptions import ClientError, ServerError
from movies_api.core.retry import RetryPolicy
from movies_api.core.trace import REQUEST_ID_HEADER, get_trace_id

logger = logging.getLogger(__name__)


class UpstreamClient:
    """GET helper that maps transport failures and 5xx to ``ServerError``.

    Subclasses set ``service_name`` (used in the error message) and
    decide what a 404 means for them.
    """

    service_name = 'Upstream'

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str,
        retry: Optional[RetryPolicy] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.http = http
        self.base_url = base_url.rstrip('/')
        self.retry = retry or RetryPolicy()
        self.timeout = timeout

    def server_error(self, body: str,
                     status: Optional[int] = None) -> ServerError:
        return ServerError(
            f'Server exception in {self.service_name} : {body}',
            upstream_status=status,
        )

    async def _get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """Single attempt; raises ServerError for retryable failures."""
        kwargs: dict[str, Any] = {
            'params': params,
            'headers': {REQUEST_ID_HEADER: get_trace_id()},
        }
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout
        try:
            response = await self.http.get(url, **kwargs)
        except httpx.TimeoutException as error:
            logger.warning('upstream_timeout',
                           extra={'upstream': self.service_name, 'url': url})
            raise self.server_error(
                f'timed out ({error.__class__.__name__})',
                HTTPStatus.GATEWAY_TIMEOUT,
            ) from error
        except httpx.TransportError as error:
            logger.warning('upstream_unreachable',
                           extra={'upstream': self.service_name,
                                  'url': url, 'err': str(error)})
            raise self.server_error(
                f'unreachable ({error.__class__.__name__})',
                HTTPStatus.SERVICE_UNAVAILABLE,
            ) from error

        logger.info('upstream_call',
                    extra={'upstream': self.service_name, 'url': url,
                           'status': response.status_code})
        if response.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
            raise self.server_error(response.text, response.status_code)
        return response

    def client_error(self, response: httpx.Response) -> ClientError:
        return ClientError(response.text, status_code=response.status_code)
