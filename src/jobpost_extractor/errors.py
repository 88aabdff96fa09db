class ScrapeError(Exception):
    """
    Base class for errors surfaced to callers of a scrape.
    Each subclass carries a stable, user-facing default message.
    """

    default_message = "Scraping failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class AuthRequiredError(ScrapeError):
    """The site answered 401/403."""

    default_message = "This site requires authentication or blocks automated access."


class NotFoundError(ScrapeError):
    """The site answered 404."""

    default_message = "Job posting not found (404). The URL may be expired."


class NetworkError(ScrapeError):
    """Any other fetch failure: unexpected status, timeout, DNS, connection reset."""

    default_message = "Failed to fetch the URL. The site may block scraping."


class InvalidURLError(ScrapeError):
    """The URL was missing, unparseable, or not http(s)."""

    default_message = "Invalid URL format"


class MalformedStructuredDataError(ValueError):
    """
    A single JSON-LD block could not be parsed.
    Raised and recovered inside the structured-data scan; never reaches callers.
    """
