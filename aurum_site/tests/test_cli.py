"""Tests for the command-line entry point and the post-build audit."""

import json
import logging

import pytest

from aurum_site.audit import audit_page, audit_site
from aurum_site.cli import main, parse_args
from aurum_site.emitter import build_site
from aurum_site.logging_config import LOGGER_NAME, log_build_event, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestAudit:
    """Tests for checking generated pages."""

    def test_built_site_passes(self, site_root):
        report = build_site(site_root)

        assert audit_site(report.output_dir) == {}

    def test_reports_missing_metadata(self):
        issues = audit_page("<html><head></head><body></body></html>")

        assert "missing <title>" in issues
        assert "missing canonical link" in issues
        assert "missing hreflang alternate 'x-default'" in issues

    def test_product_page_needs_structured_data(self, site_root):
        report = build_site(site_root)
        page = report.output_dir / "en" / "solace-automatic" / "index.html"
        html = page.read_text(encoding="utf-8")
        page.write_text(html.replace('type="application/ld+json"', 'type="text/plain"'),
                        encoding="utf-8")

        problems = audit_site(report.output_dir)

        assert problems == {"en/solace-automatic/index.html": ["missing structured data block"]}


class TestCli:
    """Tests for the build command."""

    def test_defaults_need_no_arguments(self):
        args = parse_args([])

        assert str(args.root) == "."
        assert args.out is None
        assert not args.audit

    def test_successful_build_exits_zero(self, site_root):
        assert main(["--root", str(site_root), "--audit"]) == 0
        assert (site_root / "dist" / "en" / "solace-automatic" / "index.html").exists()

    def test_content_error_exits_nonzero(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
            status = main(["--root", str(tmp_path)])

        assert status == 1
        assert "Content directory not found" in caplog.text

    def test_log_dir_writes_jsonl_events(self, site_root, tmp_path):
        log_dir = tmp_path / "logs"

        assert main(["--root", str(site_root), "--log-dir", str(log_dir)]) == 0

        log_files = list(log_dir.glob("build_*.jsonl"))
        assert len(log_files) == 1
        events = [
            json.loads(line).get("event_type")
            for line in log_files[0].read_text(encoding="utf-8").splitlines()
        ]
        assert "content_loaded" in events
        assert "page_written" in events
        assert "redirects_written" in events
        assert "build_complete" in events
        assert not (site_root / "dist" / "logs").exists()


class TestLogging:
    """Tests for structured build events."""

    def test_event_carries_extra_data(self, tmp_path):
        setup_logging(log_to_console=False, log_dir=tmp_path)

        log_build_event("page_written", {"path": "en/index.html", "bytes": 10})

        entry = json.loads(next(tmp_path.glob("build_*.jsonl")).read_text(encoding="utf-8"))
        assert entry["event_type"] == "page_written"
        assert entry["path"] == "en/index.html"
        assert entry["message"] == "page_written"
