"""Page fetcher for the HTML page and the descriptor document."""

from typing import Optional

import httpx

from opensearch2nix.errors import FetchError
from opensearch2nix.utils.config import settings
from opensearch2nix.utils.logger import get_logger

log = get_logger(__name__)


def fetch_page(url: str, timeout: Optional[float] = None) -> str:
    """GET a URL and return the body text, raising ``FetchError`` on failure."""
    try:
        with httpx.Client(
            timeout=timeout if timeout is not None else settings.request_timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        ) as client:
            resp = client.get(url)
            resp.raise_for_status()
            return resp.text
    except httpx.HTTPError as exc:
        log.debug("Failed to fetch %s: %s", url, exc)
        raise FetchError(f"failed to fetch {url}: {exc}") from exc
