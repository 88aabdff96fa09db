import logging
from urllib.parse import urlparse

from jobpost_extractor.errors import InvalidURLError
from jobpost_extractor.fetcher import PageFetcher
from jobpost_extractor.models import ScrapedJob
from jobpost_extractor.pipeline import ExtractionPipeline

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str | None) -> str:
    """
    Check that url is a usable http(s) address and return it stripped.
    Raises InvalidURLError with a user-facing message otherwise.
    """
    if not url or not isinstance(url, str) or not url.strip():
        raise InvalidURLError("A URL is required")

    url = url.strip()
    if not url.isprintable():
        raise InvalidURLError("Invalid URL format")

    try:
        parsed = urlparse(url)
    except ValueError:
        raise InvalidURLError("Invalid URL format") from None

    if not parsed.scheme or not parsed.netloc:
        raise InvalidURLError("Invalid URL format")
    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidURLError("Only HTTP/HTTPS URLs are supported")
    return url


class JobPostingScraper:
    """
    Fetches a job posting URL and extracts a pre-fill record from it.

    Fetch failures propagate as ScrapeError subclasses; once HTML is in hand
    extraction cannot fail, though the record may be partial or empty.
    """

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        pipeline: ExtractionPipeline | None = None,
    ) -> None:
        self.fetcher = fetcher or PageFetcher()
        self.pipeline = pipeline or ExtractionPipeline()

    async def scrape(self, url: str) -> ScrapedJob:
        validated_url = validate_url(url)
        html = await self.fetcher.fetch(validated_url)
        job = self.pipeline.run(html, validated_url)
        if job.is_empty():
            logger.warning(f"No job details found on {validated_url}")
        return job
