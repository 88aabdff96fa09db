import json

import pytest

LONG_TEXT = (
    "We are looking for a backend engineer to design, build and operate the services "
    "behind our hiring platform. You will own APIs end to end, work closely with product "
    "and data teams, and help us scale to millions of candidates across many countries."
)


def json_ld_script(data) -> str:
    """Wrap a Python value as a JSON-LD <script> block."""
    return f'<script type="application/ld+json">{json.dumps(data)}</script>'


def page(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


@pytest.fixture
def job_posting_schema():
    """A typical schema.org JobPosting as found on career sites."""
    return {
        "@context": "https://schema.org",
        "@type": "JobPosting",
        "title": "Senior Backend Engineer",
        "hiringOrganization": {"@type": "Organization", "name": "Acme Corp"},
        "jobLocation": {
            "@type": "Place",
            "address": {
                "addressLocality": "San Francisco",
                "addressRegion": "CA",
                "addressCountry": "US",
            },
        },
        "description": "<p>Build things.</p><ul><li>Python</li><li>SQL</li></ul>",
    }


@pytest.fixture
def json_ld_page(job_posting_schema):
    return page(
        head='<meta property="og:title" content="OG Title">' + json_ld_script(job_posting_schema),
        body="<h1>Heading Title</h1>",
    )


@pytest.fixture
def greenhouse_page():
    return page(
        head=(
            '<meta property="og:title" content="Job Application for Platform Engineer">'
            '<meta property="og:description" content="Join the platform team.">'
        ),
        body=(
            '<h1 class="app-title">Platform Engineer</h1>'
            '<span class="company-name">Initech</span>'
            '<div class="location">Austin, TX</div>'
        ),
    )
