from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScrapedJob(BaseModel):
    """
    Best-effort job posting record produced by one extraction call.
    Every field is optional; absence is an empty string, never None.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    job_title: str = Field(default="", alias="jobTitle")
    company: str = ""
    location: str = ""
    job_description: str = Field(default="", alias="jobDescription")

    def has_identity(self) -> bool:
        """True when the record names the position or the employer."""
        return bool(self.job_title or self.company)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in type(self).model_fields)

    def to_payload(self) -> dict[str, str]:
        """Serialize with the camelCase keys callers pre-fill forms with."""
        return self.model_dump(by_alias=True)


def merge_prefer_right(base: ScrapedJob, override: ScrapedJob) -> ScrapedJob:
    """
    Combine two partial records field by field.
    Override's non-empty values win; base fills whatever override left empty.
    """
    merged = {
        name: getattr(override, name) or getattr(base, name)
        for name in ScrapedJob.model_fields
    }
    return ScrapedJob(**merged)


class SelectorRule(BaseModel):
    """A CSS selector, optionally reading an attribute instead of the element text."""

    model_config = ConfigDict(frozen=True)

    css: str
    attr: str | None = None


class SiteProfile(BaseModel):
    """
    Static selector table for one careers platform, matched by URL substring.
    Selector lists are tried in order; the first non-empty result wins.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    match: str
    job_title: tuple[SelectorRule, ...] = ()
    company: tuple[SelectorRule, ...] = ()
    location: tuple[SelectorRule, ...] = ()
    job_description: tuple[SelectorRule, ...] = ()

    @field_validator("job_title", "company", "location", "job_description", mode="before")
    @classmethod
    def _coerce_rules(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(SelectorRule(css=rule) if isinstance(rule, str) else rule for rule in value)
        return value

    def matches(self, url: str) -> bool:
        return self.match in url.lower()
