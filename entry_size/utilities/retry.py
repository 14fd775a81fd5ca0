"""Retry handling for transient Content Management API failures."""

import logging

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_none,
)

logger = logging.getLogger(__name__)


class ServerError(Exception):
    """The API answered with a 5xx status."""

    pass


class RateLimitError(Exception):
    """The API answered 429 Too Many Requests."""

    pass


RETRYABLE_ERRORS = (httpx.TransportError, ServerError, RateLimitError)


def check_retryable_status(response: httpx.Response, url: str) -> None:
    """
    Raise for statuses worth retrying.

    The CMA rate limits per token and answers 429 when exceeded; 5xx
    responses are usually transient. Every other status is returned to the
    caller untouched, so 401/404 are reported without retrying.

    Raises:
        RateLimitError: For 429
        ServerError: For 5xx
    """
    status = response.status_code
    if status == 429:
        raise RateLimitError(f"Rate limited (429) for {url}")
    if 500 <= status < 600:
        raise ServerError(f"Server returned {status} for {url}")


def make_request_with_retry(
    client: httpx.Client,
    url: str,
    headers: dict[str, str] | None = None,
    max_attempts: int = 3,
    min_wait: int = 1,
    max_wait: int = 10,
) -> httpx.Response:
    """
    GET a URL, retrying transport errors, rate limiting and server errors.

    Args:
        client: httpx Client instance
        url: URL to request
        headers: Optional request headers
        max_attempts: Maximum number of attempts (default: 3)
        min_wait: Minimum backoff in seconds; 0 disables waiting (default: 1)
        max_wait: Maximum backoff in seconds (default: 10)

    Returns:
        The first response that is not retryable

    Raises:
        httpx.TransportError: After retries exhausted for network errors
        RateLimitError: After retries exhausted for 429 responses
        ServerError: After retries exhausted for 5xx responses
    """
    if min_wait == 0:
        wait_strategy = wait_none()
        before_sleep_callback = None
    else:
        wait_strategy = wait_exponential(multiplier=1, min=min_wait, max=max_wait)
        before_sleep_callback = before_sleep_log(logger, logging.WARNING)

    @retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_strategy,
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        before_sleep=before_sleep_callback,
        reraise=True,
    )
    def _get() -> httpx.Response:
        response = client.get(url, headers=headers)
        check_retryable_status(response, url)
        return response

    return _get()
