import logging

from jobpost_extractor.document import HtmlDocument
from jobpost_extractor.models import ScrapedJob, SelectorRule, SiteProfile
from jobpost_extractor.normalizer import normalize_html_text
from jobpost_extractor.strategies.base import BaseStrategy

logger = logging.getLogger(__name__)

# Checked in order; the first profile whose key appears in the URL is the only one used.
# myworkdayjobs.com does not contain "workday.com", so the two Workday rows never overlap.
SITE_PROFILES: tuple[SiteProfile, ...] = (
    SiteProfile(
        name="greenhouse",
        match="greenhouse.io",
        job_title=["h1.app-title", 'h1[class*="title"]', "h1"],
        company=[".company-name"],
        location=[".location"],
        job_description=["#content", "section.content"],
    ),
    SiteProfile(
        name="lever",
        match="lever.co",
        job_title=["h2"],
        company=[SelectorRule(css="img.main-header-logo", attr="alt")],
        location=[".sort-by-time.posting-category"],
        job_description=[".posting-content section"],
    ),
    SiteProfile(
        name="workday",
        match="workday.com",
        job_title=['h2[data-automation-id="jobPostingHeader"]'],
        company=['a[data-automation-id="companyName"]'],
        location=['[data-automation-id="locations"]'],
        job_description=['[data-automation-id="jobPostingDescription"]'],
    ),
    SiteProfile(
        name="myworkdayjobs",
        match="myworkdayjobs.com",
        job_title=['[data-automation-id="jobPostingHeader"]'],
        location=['[data-automation-id="locations"]'],
    ),
    SiteProfile(
        name="ashby",
        match="ashbyhq.com",
        job_title=["h1"],
        company=['[class*="company"]'],
        location=['[class*="location"]'],
        job_description=['[class*="description"]'],
    ),
)


def match_site_profile(
    url: str, profiles: tuple[SiteProfile, ...] = SITE_PROFILES
) -> SiteProfile | None:
    """Return the first profile whose match key is a substring of the URL."""
    for profile in profiles:
        if profile.matches(url):
            return profile
    return None


def _first_value(document: HtmlDocument, rules: tuple[SelectorRule, ...]) -> str:
    for rule in rules:
        node = document.select_first(rule.css)
        if rule.attr:
            value = (document.attr(node, rule.attr) or "").strip()
        else:
            value = document.text(node)
        if value:
            return value
    return ""


def _first_description(document: HtmlDocument, rules: tuple[SelectorRule, ...]) -> str:
    for rule in rules:
        node = document.select_first(rule.css)
        if rule.attr:
            value = normalize_html_text(document.attr(node, rule.attr))
        else:
            value = normalize_html_text(document.html(node))
        if value:
            return value
    return ""


class SiteProfileStrategy(BaseStrategy):
    """
    Extracts using per-platform selector tables for known ATS hosts.
    Unknown hosts yield an empty record.
    """

    name = "site_profile"

    def __init__(self, profiles: tuple[SiteProfile, ...] = SITE_PROFILES) -> None:
        self.profiles = profiles

    def extract(self, document: HtmlDocument, url: str) -> ScrapedJob:
        profile = match_site_profile(url, self.profiles)
        if profile is None:
            return ScrapedJob()

        logger.debug(f"Using site profile '{profile.name}' for {url}")
        return ScrapedJob(
            job_title=_first_value(document, profile.job_title),
            company=_first_value(document, profile.company),
            location=_first_value(document, profile.location),
            job_description=_first_description(document, profile.job_description),
        )
