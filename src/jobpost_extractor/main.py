import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from jobpost_extractor.errors import ScrapeError
from jobpost_extractor.models import ScrapedJob
from jobpost_extractor.pipeline import extract_job_posting
from jobpost_extractor.scraper import JobPostingScraper, validate_url

# Set up logging once, in the application entry point only
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="jobpost-extract",
        description="Extract title, company, location and description from a job posting URL.",
    )
    parser.add_argument("url", help="URL of the job posting.")
    parser.add_argument(
        "--html-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Read the page from a saved HTML file instead of fetching the URL.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation for the printed record (default: 2).",
    )
    return parser.parse_args(argv)


def run(url: str, html_file: Path | None = None) -> ScrapedJob:
    """Extract a record from a saved page, or fetch and extract it."""
    if html_file is not None:
        url = validate_url(url)
        html = html_file.read_text(encoding="utf-8", errors="replace")
        return extract_job_posting(html, url)
    return asyncio.run(JobPostingScraper().scrape(url))


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point for the package."""
    args = parse_args(argv)

    try:
        job = run(args.url, args.html_file)
    except ScrapeError as e:
        logger.error(str(e))
        sys.exit(1)
    except OSError as e:
        logger.error(f"Could not read {args.html_file}: {e}")
        sys.exit(1)

    print(json.dumps(job.to_payload(), indent=args.indent, ensure_ascii=False))


if __name__ == "__main__":
    cli()
