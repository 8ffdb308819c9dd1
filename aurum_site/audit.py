"""Post-build checks on the generated pages.

Parses each emitted ``index.html`` and reports missing document metadata or
structured data. Nothing here modifies the output tree.
"""

import json
from pathlib import Path
from typing import Dict, List

from bs4 import BeautifulSoup

from aurum_site.config import STATIC_DIRS
from aurum_site.logging_config import get_logger, log_build_event

__all__ = ["REQUIRED_HREFLANGS", "audit_page", "audit_site"]

logger = get_logger("audit")

REQUIRED_HREFLANGS = ("en", "zh-CN", "x-default")


def _check_alternates(soup: BeautifulSoup) -> List[str]:
    issues = []
    found = {
        link.get("hreflang")
        for link in soup.find_all("link", rel="alternate")
        if link.get("href")
    }
    for code in REQUIRED_HREFLANGS:
        if code not in found:
            issues.append(f"missing hreflang alternate '{code}'")
    return issues


def _check_structured_data(soup: BeautifulSoup) -> List[str]:
    script = soup.find("script", type="application/ld+json")
    if script is None or not script.string:
        return ["missing structured data block"]
    try:
        data = json.loads(script.string)
    except json.JSONDecodeError as e:
        return [f"structured data is not valid JSON: {e}"]
    if not isinstance(data, dict) or data.get("@type") != "Product":
        return ["structured data is not a Product record"]
    if not data.get("name"):
        return ["structured data has no product name"]
    return []


def audit_page(html: str, expect_product: bool = False) -> List[str]:
    """Return a list of problems found in one rendered page (empty if none)."""
    soup = BeautifulSoup(html, "html.parser")
    issues: List[str] = []

    title = soup.find("title")
    if title is None or not title.get_text(strip=True):
        issues.append("missing <title>")

    canonical = soup.find("link", rel="canonical")
    if canonical is None or not canonical.get("href"):
        issues.append("missing canonical link")

    issues.extend(_check_alternates(soup))

    if expect_product:
        issues.extend(_check_structured_data(soup))

    return issues


def audit_site(out_dir: Path) -> Dict[str, List[str]]:
    """Audit every page in a built site.

    Product pages live two levels deep (``<lang>/<slug>/index.html``) and must
    carry structured data.

    Returns:
        Mapping of output-relative path to its problems, for pages with problems
    """
    out_dir = Path(out_dir)
    results: Dict[str, List[str]] = {}

    for page in sorted(out_dir.rglob("index.html")):
        relative = page.relative_to(out_dir)
        # Static trees are copied verbatim and not ours to check
        if len(relative.parts) > 3 or relative.parts[0] in STATIC_DIRS:
            continue
        expect_product = len(relative.parts) == 3
        issues = audit_page(page.read_text(encoding="utf-8"), expect_product=expect_product)
        if issues:
            key = relative.as_posix()
            results[key] = issues
            for issue in issues:
                logger.warning(f"{key}: {issue}")
            log_build_event("audit_issue", {"path": key, "issues": issues})

    return results
