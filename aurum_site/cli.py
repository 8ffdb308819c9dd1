"""Command-line interface for the site build."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

__all__ = ["main", "parse_args"]

from aurum_site.audit import audit_site
from aurum_site.config import OUTPUT_DIRNAME
from aurum_site.emitter import build_site
from aurum_site.errors import BuildError
from aurum_site.logging_config import get_logger, setup_logging

logger = get_logger("cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build the bilingual Aurum Atelier static site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build content/ into dist/ from the current directory
  python -m aurum_site

  # Build another checkout and check the generated pages
  python -m aurum_site --root ../site --audit

  # Keep a structured build log
  python -m aurum_site --log-dir logs
        """,
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Project root holding content/, assets/, admin/ and functions/ (default: .)",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help=f"Output directory, wiped on every build (default: <root>/{OUTPUT_DIRNAME})",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Write JSONL build logs to this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )
    parser.add_argument(
        "--audit",
        action="store_true",
        help="Check the generated pages for metadata problems; exit 1 if any are found",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI. Returns the process exit status."""
    args = parse_args(argv)
    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_dir=args.log_dir,
    )

    try:
        report = build_site(args.root, args.out)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        return 1

    if args.audit:
        problems = audit_site(report.output_dir)
        if problems:
            logger.error(f"Audit found problems in {len(problems)} pages")
            return 1
        logger.info(f"Audit passed for {len(report.pages)} pages")

    return 0


if __name__ == "__main__":
    sys.exit(main())
