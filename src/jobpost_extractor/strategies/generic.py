from jobpost_extractor.document import HtmlDocument
from jobpost_extractor.models import ScrapedJob
from jobpost_extractor.normalizer import normalize_html_text
from jobpost_extractor.strategies.base import BaseStrategy

MIN_DESCRIPTION_LENGTH = 200  # characters of plain text

LOCATION_SELECTORS = (
    '[class*="location"]',
    '[data-testid*="location"]',
    '[aria-label*="location"]',
)

COMPANY_SELECTORS = (
    '[class*="company-name"]',
    '[class*="employer"]',
    '[class*="org-name"]',
)
LOGO_SELECTOR = 'img[class*="logo"]'

DESCRIPTION_SELECTORS = (
    '[class*="job-description"]',
    '[class*="jobDescription"]',
    '[class*="description"]',
    '[class*="job-details"]',
    '[class*="posting-content"]',
    "article",
    "main",
)


class GenericHeuristicStrategy(BaseStrategy):
    """
    Last-resort extraction for unknown sites.

    Uses common class/attribute naming conventions for location and company,
    the first <h1> for the title, and the first large content block for the
    description.
    """

    name = "generic"

    def extract(self, document: HtmlDocument, url: str = "") -> ScrapedJob:
        return ScrapedJob(
            job_title=document.first_text("h1"),
            company=self._company(document),
            location=self._first_text(document, LOCATION_SELECTORS),
            job_description=self._description(document),
        )

    @staticmethod
    def _first_text(document: HtmlDocument, selectors: tuple[str, ...]) -> str:
        for selector in selectors:
            text = document.first_text(selector)
            if text:
                return text
        return ""

    def _company(self, document: HtmlDocument) -> str:
        return self._first_text(document, COMPANY_SELECTORS) or document.first_attr(
            LOGO_SELECTOR, "alt"
        )

    @staticmethod
    def _description(document: HtmlDocument) -> str:
        """Normalized markup of the first candidate block longer than MIN_DESCRIPTION_LENGTH."""
        for selector in DESCRIPTION_SELECTORS:
            node = document.select_first(selector)
            if node is not None and len(document.text(node)) > MIN_DESCRIPTION_LENGTH:
                return normalize_html_text(document.html(node))
        return ""
