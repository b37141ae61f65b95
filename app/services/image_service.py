"""
Image URL reachability check.

Best-effort gate applied before a watch is stored: a URL that cannot be
reached within the timeout is replaced by the placeholder image. Failures
are never raised to the caller and are not retried.
"""
import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

# Servers answering HEAD with these are asked again with a streamed GET
HEAD_NOT_SUPPORTED = (405, 501)


def is_image_url_reachable(url: Optional[str], timeout: float = DEFAULT_TIMEOUT) -> bool:
    """
    Probe ``url`` with a HEAD request, falling back to a streamed GET when
    the server does not support HEAD.

    ``timeout`` is the requests connect/read timeout: it bounds each
    connection attempt and each wait for bytes, not the whole call, and it
    applies again on every redirect hop. A slow-dripping server or a long
    redirect chain can therefore take longer than ``timeout`` in total.

    Returns:
        True only for an http(s) URL answering with a 2xx status.
    """
    if not url or not url.startswith(('http://', 'https://')):
        return False

    try:
        response = requests.head(url, allow_redirects=True, timeout=timeout)
        if response.status_code in HEAD_NOT_SUPPORTED:
            # Body is never read; stream=True keeps the GET to headers only
            with requests.get(url, stream=True, allow_redirects=True, timeout=timeout) as response:
                return 200 <= response.status_code < 300
        return 200 <= response.status_code < 300
    except requests.RequestException as e:
        logger.debug(f"[IMAGES] Image URL check failed for {url}: {e}")
        return False


def resolve_image_url(url: Optional[str], placeholder: str,
                      timeout: float = DEFAULT_TIMEOUT) -> str:
    """Return ``url`` when it is reachable, otherwise ``placeholder``."""
    url = (url or '').strip()
    if not url:
        return placeholder
    if is_image_url_reachable(url, timeout=timeout):
        return url
    logger.info(f"[IMAGES] Unreachable image URL replaced by placeholder: {url}")
    return placeholder
