import logging

import httpx

from jobpost_extractor import config
from jobpost_extractor.errors import (
    AuthRequiredError,
    NetworkError,
    NotFoundError,
    ScrapeError,
)

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
}


def classify_status(status_code: int) -> ScrapeError:
    """Map a failed HTTP status to the caller-visible error."""
    if status_code in (401, 403):
        return AuthRequiredError()
    if status_code == 404:
        return NotFoundError()
    return NetworkError()


class PageFetcher:
    """
    Fetches a job posting page as HTML text.

    Sends browser-like headers, honours a timeout and a redirect limit, and
    makes exactly one attempt per call. Failures surface as ScrapeError
    subclasses chained to the underlying httpx error.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        max_redirects: int | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._client = client
        self.timeout = timeout if timeout is not None else config.SCRAPER_TIMEOUT
        self.max_redirects = (
            max_redirects if max_redirects is not None else config.SCRAPER_MAX_REDIRECTS
        )
        self.user_agent = user_agent or config.SCRAPER_USER_AGENT

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent, **BROWSER_HEADERS},
            follow_redirects=True,
            max_redirects=self.max_redirects,
        )

    async def fetch(self, url: str) -> str:
        """Return the body of a 2xx response for url."""
        logger.info(f"Fetching {url}")
        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with self._build_client() as client:
                    response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = classify_status(e.response.status_code)
            logger.warning(f"HTTP {e.response.status_code} fetching {url}: {error}")
            raise error from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Request failed for {url}: {e!r}")
            raise NetworkError() from e

        logger.debug(f"Fetched {len(response.text)} characters from {url}")
        return response.text
