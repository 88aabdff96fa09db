import json
import logging
from typing import Any

from jobpost_extractor.document import HtmlDocument
from jobpost_extractor.errors import MalformedStructuredDataError
from jobpost_extractor.models import ScrapedJob
from jobpost_extractor.normalizer import normalize_html_text
from jobpost_extractor.strategies.base import BaseStrategy

logger = logging.getLogger(__name__)

JSON_LD_TYPE = "application/ld+json"
JOB_POSTING_TYPE = "JobPosting"
ADDRESS_PARTS = ("addressLocality", "addressRegion", "addressCountry")


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_json_ld_location(value: Any) -> str:
    """
    Flatten a JobPosting jobLocation into a display string.

    Accepts a plain string, a Place object, or a list of either (only the
    first entry is used). Addresses render as "Locality, Region, Country"
    with missing parts skipped.
    """
    if not value:
        return ""

    location = value[0] if isinstance(value, list) else value
    if isinstance(location, str):
        return location
    if not isinstance(location, dict):
        return ""

    address = location.get("address")
    if isinstance(address, dict):
        parts = []
        for key in ADDRESS_PARTS:
            part = address.get(key)
            # addressCountry is sometimes a Country object rather than a code
            if isinstance(part, dict):
                part = part.get("name")
            if part and isinstance(part, str):
                parts.append(part)
        return ", ".join(parts)

    return _as_text(location.get("name"))


def _parse_block(raw: str) -> Any:
    # Pathologically deep nesting overflows the decoder instead of failing to parse
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise MalformedStructuredDataError(f"Invalid JSON-LD block: {e}") from e


def _job_from_schema(schema: dict[str, Any]) -> ScrapedJob:
    organization = schema.get("hiringOrganization")
    company = ""
    if isinstance(organization, dict):
        company = _as_text(organization.get("name")) or _as_text(organization.get("@name"))

    return ScrapedJob(
        job_title=_as_text(schema.get("title")) or _as_text(schema.get("name")),
        company=company,
        location=parse_json_ld_location(schema.get("jobLocation")),
        job_description=normalize_html_text(_as_text(schema.get("description"))),
    )


class StructuredDataStrategy(BaseStrategy):
    """
    Reads schema.org JobPosting objects embedded as JSON-LD.
    The first JobPosting found across all script blocks wins; nothing is merged.
    """

    name = "structured_data"

    def extract(self, document: HtmlDocument, url: str = "") -> ScrapedJob | None:
        for index, script in enumerate(document.all_scripts(JSON_LD_TYPE)):
            raw = document.script_text(script)
            if not raw.strip():
                continue

            try:
                data = _parse_block(raw)
            except MalformedStructuredDataError as e:
                logger.debug(f"Skipping JSON-LD block #{index}: {e}")
                continue

            schemas = data if isinstance(data, list) else [data]
            for schema in schemas:
                if isinstance(schema, dict) and schema.get("@type") == JOB_POSTING_TYPE:
                    return _job_from_schema(schema)

        return None
