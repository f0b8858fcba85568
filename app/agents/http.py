# app/agents/http.py
import asyncio
import logging
from typing import Optional

import httpx

from .. import config

logger = logging.getLogger(__name__)

# rate limits are transient on the public OSM endpoints
RETRYABLE_STATUS = (403, 429)


def is_retryable(exc: Exception) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status in RETRYABLE_STATUS or status >= 500
    return isinstance(exc, (httpx.TimeoutException, httpx.NetworkError))


async def request_json(
    method: str,
    url: str,
    *,
    params: Optional[dict] = None,
    data: Optional[dict] = None,
    headers: Optional[dict] = None,
    timeout: float = 20.0,
    max_retries: Optional[int] = None,
):
    """
    Send one request and return the decoded JSON body.

    Transient failures (timeouts, connection errors, 403/429, 5xx) are retried
    with exponential backoff; anything else is raised straight away.
    """
    retries = config.MAX_RETRIES if max_retries is None else max_retries
    delay = config.RETRY_DELAY

    for attempt in range(retries + 1):
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                r = await client.request(method, url, params=params, data=data, headers=headers)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPError as e:
            if attempt < retries and is_retryable(e):
                logger.warning(
                    f"{method} {url} failed ({e.__class__.__name__}), "
                    f"retry {attempt + 1}/{retries} in {delay:.1f}s"
                )
                await asyncio.sleep(delay)
                delay *= 2
                continue
            raise
