"""Content store reader.

Loads the site settings and every product file from the content directory.
Any problem here is fatal: a build that silently skipped a product would
publish a catalog with pages missing.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from aurum_site.config import (
    LANGUAGES,
    PRODUCTS_DIRNAME,
    SITE_SETTINGS_FILENAME,
)
from aurum_site.errors import ContentError
from aurum_site.logging_config import get_logger, log_build_event
from aurum_site.models import (
    LocalizedProductText,
    Product,
    ProductImages,
    SiteSettings,
    SpecEntry,
)

__all__ = [
    "read_json",
    "parse_site_settings",
    "parse_product",
    "load_site_settings",
    "list_product_files",
    "load_products",
    "load_content",
]

logger = get_logger("content")

BOM = "\ufeff"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def read_json(path: Path) -> Dict[str, Any]:
    """Read a UTF-8 JSON object from ``path``, ignoring a leading byte-order mark."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"Cannot read {path}: {e}") from e

    if raw.startswith(BOM):
        raw = raw[len(BOM):]

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ContentError(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ContentError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data


def parse_site_settings(data: Mapping[str, Any]) -> SiteSettings:
    return SiteSettings(
        hero_pill=data.get("hero_pill"),
        hero_title=data.get("hero_title"),
        hero_subtitle=data.get("hero_subtitle"),
        cta_primary=data.get("cta_primary"),
        cta_secondary=data.get("cta_secondary"),
        meta_title=data.get("meta_title"),
        meta_description=data.get("meta_description"),
    )


def _as_tuple(value: Any) -> Tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def _spec_entries(rows: Any) -> Tuple[SpecEntry, ...]:
    entries = []
    for row in _as_tuple(rows):
        if isinstance(row, Mapping):
            entries.append(SpecEntry(label=row.get("label"), value=row.get("value")))
        else:
            entries.append(SpecEntry(value=row))
    return tuple(entries)


def parse_product(
    data: Mapping[str, Any],
    languages: Iterable[str] = LANGUAGES,
    source_modified_time: float = 0.0,
) -> Product:
    """Build a Product from a decoded content file.

    Per-language fields use the ``<field>_<lang>`` naming of the content files.
    """
    slug = data.get("slug")
    if not isinstance(slug, str) or not slug.strip():
        raise ContentError("Product is missing a 'slug'")

    images = data.get("images") or {}
    if not isinstance(images, Mapping):
        images = {"main": images}

    text: Dict[str, LocalizedProductText] = {}
    for lang in languages:
        text[lang] = LocalizedProductText(
            name=data.get(f"name_{lang}"),
            subtitle=data.get(f"subtitle_{lang}"),
            description=data.get(f"desc_{lang}"),
            tags=_as_tuple(data.get(f"tags_{lang}")),
            highlight_specs=_spec_entries(data.get(f"specs_{lang}")),
            spec_table=_spec_entries(data.get(f"spec_table_{lang}")),
        )

    return Product(
        slug=slug,
        price=data.get("price"),
        compare_price=data.get("compare_price"),
        images=ProductImages(
            main=images.get("main"),
            gallery=_as_tuple(images.get("gallery")),
        ),
        text=text,
        source_modified_time=source_modified_time,
    )


def load_site_settings(
    content_dir: Path,
    languages: Iterable[str] = LANGUAGES,
) -> Dict[str, SiteSettings]:
    """Load one SiteSettings per language.

    ``site.json`` holds an object per language code. A language missing from it
    is read from ``site.<lang>.json`` instead.
    """
    content_dir = Path(content_dir)
    combined_path = content_dir / SITE_SETTINGS_FILENAME
    combined = read_json(combined_path) if combined_path.is_file() else {}

    settings: Dict[str, SiteSettings] = {}
    for lang in languages:
        section = combined.get(lang)
        if section is None:
            stem, suffix = os.path.splitext(SITE_SETTINGS_FILENAME)
            per_lang_path = content_dir / f"{stem}.{lang}{suffix}"
            if not per_lang_path.is_file():
                raise ContentError(
                    f"No site settings for '{lang}' in {combined_path} or {per_lang_path}"
                )
            section = read_json(per_lang_path)
        if not isinstance(section, Mapping):
            raise ContentError(f"Site settings for '{lang}' must be a JSON object")
        settings[lang] = parse_site_settings(section)
    return settings


def list_product_files(products_dir: Path) -> List[Path]:
    """Return product content files in discovery order (sorted by file name)."""
    products_dir = Path(products_dir)
    if not products_dir.is_dir():
        raise ContentError(f"Products directory not found: {products_dir}")
    try:
        names = sorted(os.listdir(products_dir))
    except OSError as e:
        raise ContentError(f"Cannot list {products_dir}: {e}") from e
    return [products_dir / name for name in names if name.endswith(".json")]


def load_products(
    products_dir: Path,
    languages: Iterable[str] = LANGUAGES,
) -> List[Product]:
    """Load every product file, paired with its modification time.

    The result is in discovery order; see :mod:`aurum_site.ordering` for the
    canonical sequence.
    """
    languages = tuple(languages)
    products: List[Product] = []
    seen: Dict[str, Path] = {}

    for path in list_product_files(products_dir):
        data = read_json(path)
        try:
            mtime = path.stat().st_mtime
        except OSError as e:
            raise ContentError(f"Cannot stat {path}: {e}") from e

        try:
            product = parse_product(data, languages, source_modified_time=mtime)
        except ContentError as e:
            raise ContentError(f"{path}: {e}") from e

        if product.slug in seen:
            raise ContentError(
                f"Duplicate slug '{product.slug}' in {path} and {seen[product.slug]}"
            )
        seen[product.slug] = path
        products.append(product)
        logger.debug(f"Loaded product {product.slug} from {path.name}")

    return products


def load_content(
    content_dir: Path,
    languages: Iterable[str] = LANGUAGES,
) -> Tuple[Dict[str, SiteSettings], List[Product]]:
    """Load settings and products from a content root."""
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        raise ContentError(f"Content directory not found: {content_dir}")

    languages = tuple(languages)
    settings = load_site_settings(content_dir, languages)
    products = load_products(content_dir / PRODUCTS_DIRNAME, languages)

    log_build_event("content_loaded", {
        "message": f"Loaded {len(products)} products from {content_dir}",
        "content_dir": str(content_dir),
        "product_count": len(products),
        "languages": list(languages),
    }, level=logging.INFO)
    return settings, products
