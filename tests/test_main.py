import json
from unittest.mock import AsyncMock, patch

import pytest

from jobpost_extractor.errors import NetworkError, NotFoundError
from jobpost_extractor.main import cli, parse_args, run
from jobpost_extractor.models import ScrapedJob

from conftest import json_ld_script, page


@pytest.fixture
def saved_page(tmp_path, job_posting_schema):
    path = tmp_path / "posting.html"
    path.write_text(page(head=json_ld_script(job_posting_schema)), encoding="utf-8")
    return path


def test_parse_args_defaults():
    args = parse_args(["https://example.com/job/1"])
    assert args.url == "https://example.com/job/1"
    assert args.html_file is None
    assert args.indent == 2


def test_cli_extracts_from_saved_page(saved_page, capsys):
    cli(["https://careers.example.com/jobs/1", "--html-file", str(saved_page)])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "jobTitle": "Senior Backend Engineer",
        "company": "Acme Corp",
        "location": "San Francisco, CA, US",
        "jobDescription": "Build things.\n\n• Python\n• SQL",
    }


def test_cli_fetches_when_no_file_given(capsys):
    with patch("jobpost_extractor.main.JobPostingScraper") as mock_scraper_class:
        mock_scraper = mock_scraper_class.return_value
        mock_scraper.scrape = AsyncMock(return_value=ScrapedJob(job_title="Welder"))

        cli(["https://example.com/job/9", "--indent", "0"])

    mock_scraper.scrape.assert_awaited_once_with("https://example.com/job/9")
    assert json.loads(capsys.readouterr().out)["jobTitle"] == "Welder"


@pytest.mark.parametrize("error", [NotFoundError(), NetworkError()])
def test_cli_exits_on_scrape_error(error, capsys):
    with patch("jobpost_extractor.main.JobPostingScraper") as mock_scraper_class:
        mock_scraper_class.return_value.scrape = AsyncMock(side_effect=error)

        with pytest.raises(SystemExit) as exc_info:
            cli(["https://example.com/job/9"])

    assert exc_info.value.code == 1
    assert capsys.readouterr().out == ""


def test_cli_exits_on_invalid_url(saved_page):
    with pytest.raises(SystemExit) as exc_info:
        cli(["not-a-url", "--html-file", str(saved_page)])
    assert exc_info.value.code == 1


def test_cli_exits_on_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        cli(["https://example.com/job/1", "--html-file", str(tmp_path / "missing.html")])
    assert exc_info.value.code == 1


def test_run_with_saved_page(saved_page):
    job = run("https://careers.example.com/jobs/1", saved_page)
    assert job.company == "Acme Corp"
