"""Site emitter.

Rendering is pure (:func:`render_site` returns ``{relative_path: html}``);
:func:`emit_site` wipes the output directory and writes everything to disk.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from aurum_site.config import (
    CONTENT_DIRNAME,
    DEFAULT_LANGUAGE,
    LANGUAGES,
    OUTPUT_DIRNAME,
    REDIRECTS_FILENAME,
    STATIC_DIRS,
)
from aurum_site.content import load_content
from aurum_site.errors import EmitError
from aurum_site.i18n import Localizer
from aurum_site.logging_config import get_logger, log_build_event
from aurum_site.models import Product, SiteSettings
from aurum_site.ordering import sort_by_recency
from aurum_site.pages import (
    render_home,
    render_language_selector,
    render_product_page,
)

__all__ = [
    "BuildReport",
    "render_redirects",
    "render_site",
    "reset_output_dir",
    "write_file",
    "copy_static_dir",
    "emit_site",
    "build_site",
]

logger = get_logger("emitter")


@dataclass
class BuildReport:
    """Summary of one build."""

    output_dir: Path
    pages: List[str] = field(default_factory=list)
    product_count: int = 0
    redirect_count: int = 0
    copied_dirs: List[str] = field(default_factory=list)


def render_redirects(products: Sequence[Product], default_lang: str = DEFAULT_LANGUAGE) -> str:
    """Redirect rules, one ``<source> <target> 301`` line per product per rule type.

    Rules are grouped by type: bare slugs first, then the two legacy
    ``-zh`` forms.
    """
    lines = [f"/{p.slug}/ /{default_lang}/{p.slug}/ 301" for p in products]
    lines += [f"/zh/{p.slug}-zh/ /zh/{p.slug}/ 301" for p in products]
    lines += [f"/{p.slug}-zh/ /zh/{p.slug}/ 301" for p in products]
    return "\n".join(lines)


def render_site(
    settings: Mapping[str, SiteSettings],
    products: Sequence[Product],
    strings: Optional[Localizer] = None,
    languages: Iterable[str] = LANGUAGES,
) -> Dict[str, str]:
    """Render every page of the site.

    Args:
        settings: SiteSettings keyed by language
        products: Canonical product sequence
        strings: String table (default: built-in table)
        languages: Languages to render

    Returns:
        Mapping of output-relative path to file contents, in write order
    """
    strings = strings or Localizer()
    files: Dict[str, str] = {"index.html": render_language_selector(strings)}

    for lang in languages:
        files[f"{lang}/index.html"] = render_home(lang, settings[lang], products, strings)

    for product in products:
        for lang in languages:
            files[f"{lang}/{product.slug}/index.html"] = render_product_page(
                product, lang, products, strings
            )

    files[REDIRECTS_FILENAME] = render_redirects(products)
    return files


def reset_output_dir(out_dir: Path) -> None:
    """Remove ``out_dir`` if it exists and create it empty."""
    try:
        if out_dir.exists():
            shutil.rmtree(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise EmitError(f"Cannot reset output directory {out_dir}: {e}") from e


def write_file(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise EmitError(f"Cannot write {path}: {e}") from e


def copy_static_dir(src: Path, dest: Path) -> bool:
    """Copy a directory tree byte-for-byte. Returns False if ``src`` does not exist."""
    if not src.is_dir():
        return False
    try:
        shutil.copytree(src, dest, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        raise EmitError(f"Cannot copy {src} to {dest}: {e}") from e
    return True


def emit_site(
    files: Mapping[str, str],
    out_dir: Path,
    static_root: Optional[Path] = None,
    static_dirs: Iterable[str] = STATIC_DIRS,
) -> BuildReport:
    """Write rendered files into a freshly wiped ``out_dir`` and copy static trees."""
    out_dir = Path(out_dir)
    reset_output_dir(out_dir)
    report = BuildReport(output_dir=out_dir)

    for relative_path, content in files.items():
        write_file(out_dir / relative_path, content)
        if relative_path.endswith(".html"):
            report.pages.append(relative_path)
        if relative_path == REDIRECTS_FILENAME:
            log_build_event("redirects_written", {
                "path": relative_path,
                "rules": len(content.splitlines()),
            })
        else:
            log_build_event("page_written", {"path": relative_path, "bytes": len(content)})

    if static_root is not None:
        for name in static_dirs:
            if copy_static_dir(Path(static_root) / name, out_dir / name):
                report.copied_dirs.append(name)
                log_build_event("static_copied", {"directory": name})
            else:
                logger.debug(f"No {name}/ directory to copy, skipping")

    return report


def build_site(
    root: Path,
    out_dir: Optional[Path] = None,
    strings: Optional[Localizer] = None,
) -> BuildReport:
    """Run the full build for a project rooted at ``root``.

    Loads content, orders products, renders all pages and writes them to
    ``out_dir`` (default: ``<root>/dist``). Errors propagate as
    :class:`~aurum_site.errors.BuildError`.
    """
    root = Path(root)
    out_dir = Path(out_dir) if out_dir is not None else root / OUTPUT_DIRNAME
    resolved_out = out_dir.resolve()
    if resolved_out == root.resolve() or resolved_out in root.resolve().parents:
        raise EmitError(f"Output directory {out_dir} would remove the project root {root}")

    log_build_event("build_start", {
        "message": f"Building site from {root}",
        "root": str(root),
        "output_dir": str(out_dir),
    }, level=logging.INFO)

    settings, products = load_content(root / CONTENT_DIRNAME)
    ordered = sort_by_recency(products)
    files = render_site(settings, ordered, strings)
    report = emit_site(files, out_dir, static_root=root)

    report.product_count = len(ordered)
    report.redirect_count = len(files[REDIRECTS_FILENAME].splitlines())
    log_build_event("build_complete", {
        "message": (
            f"Wrote {len(report.pages)} pages for {report.product_count} products "
            f"to {out_dir}"
        ),
        "pages": len(report.pages),
        "products": report.product_count,
        "redirects": report.redirect_count,
        "copied_dirs": report.copied_dirs,
    }, level=logging.INFO)
    return report
