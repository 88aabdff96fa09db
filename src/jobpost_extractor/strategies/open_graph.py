from jobpost_extractor.document import HtmlDocument
from jobpost_extractor.models import ScrapedJob
from jobpost_extractor.strategies.base import BaseStrategy

TITLE_META = ('meta[property="og:title"]', 'meta[name="twitter:title"]')
DESCRIPTION_META = (
    'meta[property="og:description"]',
    'meta[name="description"]',
    'meta[name="twitter:description"]',
)


class OpenGraphStrategy(BaseStrategy):
    """
    Reads social-card <meta> tags, falling back to <title> for the job title.
    Never fills company or location.
    """

    name = "open_graph"

    def extract(self, document: HtmlDocument, url: str = "") -> ScrapedJob:
        title = self._first_content(document, TITLE_META) or document.first_text("title")
        description = self._first_content(document, DESCRIPTION_META)
        return ScrapedJob(job_title=title, job_description=description)

    @staticmethod
    def _first_content(document: HtmlDocument, selectors: tuple[str, ...]) -> str:
        for selector in selectors:
            content = document.first_attr(selector, "content")
            if content:
                return content
        return ""
