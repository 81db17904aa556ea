"""Bounded retry for outbound calls."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, TypeVar

from movies_api.core.config import Settings
from movies_api.core.exceptions import ServerError

T = TypeVar('T')

logger = logging.getLogger(__name__)


def is_server_error(error: BaseException) -> bool:
    """Only 5xx / timeouts are worth another attempt."""
    return isinstance(error, ServerError)


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-delay retry.

    ``max_attempts`` counts every call, the first one included:
    ``max_attempts=4`` means one call plus three retries.
    """

    max_attempts: int = 4
    delay: float = 1.0
    retry_on: Callable[[BaseException], bool] = field(
        default=is_server_error)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError('max_attempts must be >= 1')
        if self.delay < 0:
            raise ValueError('delay must be >= 0')

    @classmethod
    def from_settings(cls, settings: Settings) -> 'RetryPolicy':
        return cls(
            max_attempts=settings.retry_max_attempts,
            delay=settings.retry_delay,
        )

    def should_retry(self, error: BaseException, attempt: int) -> bool:
        return attempt < self.max_attempts and self.retry_on(error)

    async def run(
        self,
        call: Callable[[], Awaitable[T]],
        *,
        name: str = 'upstream',
    ) -> T:
        """Await ``call()`` until it succeeds or the policy gives up."""
        attempt = 1
        while True:
            try:
                return await call()
            except Exception as error:
                if not self.should_retry(error, attempt):
                    raise
                logger.warning(
                    'upstream_retry',
                    extra={
                        'upstream': name,
                        'attempt': attempt,
                        'max_attempts': self.max_attempts,
                        'err': str(error),
                    },
                )
                await asyncio.sleep(self.delay)
                attempt += 1
