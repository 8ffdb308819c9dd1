"""Shared test fixtures for the site build."""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

from aurum_site.content import parse_product
from aurum_site.i18n import Localizer
from aurum_site.models import Product, SiteSettings

SITE_SETTINGS = {
    "en": {
        "hero_pill": "New season",
        "hero_title": "Modern luxury watches",
        "hero_subtitle": "Finished by hand.",
        "cta_primary": "Explore",
        "cta_secondary": "Concierge",
        "meta_title": "Aurum Atelier | Watches",
        "meta_description": "Modern luxury watches.",
    },
    "zh": {
        "hero_pill": "新季",
        "hero_title": "现代奢华腕表",
        "hero_subtitle": "手工打磨。",
        "cta_primary": "浏览",
        "cta_secondary": "咨询",
        "meta_title": "Aurum Atelier | 腕表",
        "meta_description": "现代奢华腕表。",
    },
}


def product_data(slug: str, **overrides: Any) -> Dict[str, Any]:
    """Content-file dict for a product, with bilingual copy derived from the slug."""
    title = slug.replace("-", " ").title()
    data: Dict[str, Any] = {
        "slug": slug,
        "price": 128,
        "images": {"main": f"/assets/uploads/{slug}.jpg", "gallery": []},
        "name_en": title,
        "name_zh": f"{title} 腕表",
        "subtitle_en": f"{title} subtitle",
        "subtitle_zh": f"{title} 副标题",
        "desc_en": f"{title} description",
        "desc_zh": f"{title} 描述",
        "tags_en": ["Automatic", "Sapphire"],
        "tags_zh": ["自动机械", "蓝宝石"],
        "specs_en": [{"label": "Movement", "value": "Automatic"}],
        "specs_zh": [{"label": "机芯", "value": "自动机械"}],
        "spec_table_en": [{"label": "Case", "value": "40mm"}],
        "spec_table_zh": [{"label": "表径", "value": "40mm"}],
    }
    data.update(overrides)
    return data


def make_product(slug: str, mtime: float = 0.0, **overrides: Any) -> Product:
    return parse_product(product_data(slug, **overrides), source_modified_time=mtime)


def write_site(
    root: Path,
    products: List[Tuple[Dict[str, Any], float]],
    settings: Optional[Dict[str, Any]] = None,
) -> Path:
    """Write a content store under ``root`` and set product modification times."""
    content = root / "content"
    products_dir = content / "products"
    products_dir.mkdir(parents=True, exist_ok=True)
    (content / "site.json").write_text(
        json.dumps(settings if settings is not None else SITE_SETTINGS, ensure_ascii=False),
        encoding="utf-8",
    )
    for data, mtime in products:
        path = products_dir / f"{data['slug']}.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        os.utime(path, (mtime, mtime))
    return root


@pytest.fixture
def strings():
    return Localizer()


@pytest.fixture
def settings():
    return {lang: SiteSettings(**values) for lang, values in SITE_SETTINGS.items()}


@pytest.fixture
def catalog():
    """Three products in canonical (newest first) order."""
    return [
        make_product("solstice-chrono", mtime=3000),
        make_product("solace-automatic", mtime=2000),
        make_product("meridian-gmt", mtime=1000),
    ]


@pytest.fixture
def site_root(tmp_path):
    """Project root with two products; solace-automatic is the newer file."""
    return write_site(
        tmp_path,
        [
            (product_data("solace-automatic", price=268), 2_000_000),
            (product_data("solstice-chrono", price="328.5"), 1_000_000),
        ],
    )
