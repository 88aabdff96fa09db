import logging
from enum import StrEnum

from jobpost_extractor.document import HtmlDocument
from jobpost_extractor.models import ScrapedJob, merge_prefer_right
from jobpost_extractor.strategies.base import BaseStrategy
from jobpost_extractor.strategies.generic import GenericHeuristicStrategy
from jobpost_extractor.strategies.open_graph import OpenGraphStrategy
from jobpost_extractor.strategies.site_profile import SiteProfileStrategy
from jobpost_extractor.strategies.structured_data import StructuredDataStrategy

logger = logging.getLogger(__name__)


class ExtractionStage(StrEnum):
    """Pipeline state that produced the returned record."""

    STRUCTURED_DATA = "structured_data"
    SITE_PROFILE = "site_profile"
    GENERIC_FALLBACK = "generic_fallback"


class ExtractionPipeline:
    """
    Runs the extraction strategies in strict priority order.

    1. JSON-LD structured data, returned as-is when it names a title or company.
    2. Site profile for a recognised ATS, with OpenGraph filling its gaps.
    3. Generic heuristics, with OpenGraph filling their gaps. Always succeeds.

    Each stage runs at most once and there is no backtracking. The pipeline
    holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        structured: BaseStrategy | None = None,
        site_profile: BaseStrategy | None = None,
        open_graph: BaseStrategy | None = None,
        generic: BaseStrategy | None = None,
    ) -> None:
        self.structured = structured or StructuredDataStrategy()
        self.site_profile = site_profile or SiteProfileStrategy()
        self.open_graph = open_graph or OpenGraphStrategy()
        self.generic = generic or GenericHeuristicStrategy()

    def run(self, html: str, url: str) -> ScrapedJob:
        """Extract the best available job record from raw HTML."""
        job, _ = self.run_with_stage(html, url)
        return job

    def run_with_stage(self, html: str, url: str) -> tuple[ScrapedJob, ExtractionStage]:
        """Like run(), but also report which stage produced the record."""
        document = HtmlDocument(html)

        structured = self.structured.extract(document, url)
        if structured is not None and structured.has_identity():
            return self._done(structured, ExtractionStage.STRUCTURED_DATA, url)

        site = self.site_profile.extract(document, url)
        if site is not None and site.has_identity():
            open_graph = self.open_graph.extract(document, url) or ScrapedJob()
            return self._done(
                merge_prefer_right(open_graph, site), ExtractionStage.SITE_PROFILE, url
            )

        open_graph = self.open_graph.extract(document, url) or ScrapedJob()
        generic = self.generic.extract(document, url) or ScrapedJob()
        return self._done(
            merge_prefer_right(open_graph, generic), ExtractionStage.GENERIC_FALLBACK, url
        )

    @staticmethod
    def _done(
        job: ScrapedJob, stage: ExtractionStage, url: str
    ) -> tuple[ScrapedJob, ExtractionStage]:
        logger.info(f"Extracted '{job.job_title}' at '{job.company}' via {stage} for {url}")
        return job, stage


_default_pipeline = ExtractionPipeline()


def extract_job_posting(html: str, url: str) -> ScrapedJob:
    """Pipeline entry point. Never raises for missing fields; may return an empty record."""
    return _default_pipeline.run(html, url)
