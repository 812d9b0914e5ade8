"""Retry policy for idempotent requests."""

import logging

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bitvavo_api.errors import BitvavoTransportError

logger = logging.getLogger(__name__)

MAX_RETRY_DELAY = 30.0


def transport_retrying(max_attempts: int, base_delay: float) -> AsyncRetrying:
    """Build a tenacity controller that retries transport failures only.

    Waits ``base_delay * 2**n`` seconds between attempts, capped at 30s.
    Errors reported by the exchange propagate on the first attempt; the
    last transport error propagates once attempts are exhausted.

    Example:
        retrying = transport_retrying(max_attempts=3, base_delay=1.0)
        server_time = await retrying(client_call, "time")
    """
    return AsyncRetrying(
        retry=retry_if_exception_type(BitvavoTransportError),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=base_delay, max=MAX_RETRY_DELAY),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
