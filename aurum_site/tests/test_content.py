"""Tests for loading the content store."""

import json

import pytest

from aurum_site.content import (
    list_product_files,
    load_content,
    load_site_settings,
    parse_product,
    read_json,
)
from aurum_site.errors import ContentError
from aurum_site.models import SpecEntry

from conftest import SITE_SETTINGS, product_data, write_site


class TestReadJson:
    """Tests for reading individual content files."""

    def test_reads_plain_json(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text('{"slug": "a"}', encoding="utf-8")

        assert read_json(path) == {"slug": "a"}

    def test_strips_byte_order_mark(self, tmp_path):
        """A BOM-prefixed file parses like one without it."""
        path = tmp_path / "bom.json"
        path.write_text('\ufeff{"slug": "bom"}', encoding="utf-8")

        assert read_json(path) == {"slug": "bom"}

    def test_malformed_json_is_fatal(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"slug": ', encoding="utf-8")

        with pytest.raises(ContentError, match="Malformed JSON"):
            read_json(path)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_number_literals_are_malformed(self, tmp_path, literal):
        path = tmp_path / "nan.json"
        path.write_text(f'{{"slug": "x", "price": {literal}}}', encoding="utf-8")

        with pytest.raises(ContentError, match="Malformed JSON"):
            read_json(path)

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(ContentError, match="Cannot read"):
            read_json(tmp_path / "nope.json")

    def test_non_object_is_rejected(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ContentError, match="JSON object"):
            read_json(path)


class TestParseProduct:
    """Tests for turning content dicts into Product records."""

    def test_localized_fields_are_split_by_language(self):
        product = parse_product(product_data("solace-automatic"))

        assert product.localized("en").name == "Solace Automatic"
        assert product.localized("zh").name == "Solace Automatic 腕表"
        assert product.localized("en").highlight_specs == (SpecEntry("Movement", "Automatic"),)
        assert product.localized("zh").spec_table == (SpecEntry("表径", "40mm"),)

    def test_missing_language_is_not_filled_from_other_language(self):
        data = product_data("solace-automatic")
        del data["name_zh"]
        del data["tags_zh"]

        product = parse_product(data)

        assert product.localized("zh").name is None
        assert product.localized("zh").tags == ()
        assert product.localized("en").name == "Solace Automatic"

    def test_missing_slug_is_rejected(self):
        data = product_data("x")
        del data["slug"]

        with pytest.raises(ContentError, match="slug"):
            parse_product(data)

    def test_price_is_kept_verbatim(self):
        product = parse_product(product_data("x", price="TBD", compare_price="398.00"))

        assert product.price == "TBD"
        assert product.compare_price == "398.00"

    def test_gallery_defaults_to_empty(self):
        product = parse_product(product_data("x", images={"main": "/a.jpg"}))

        assert product.images.main == "/a.jpg"
        assert product.images.gallery == ()

    def test_modification_time_is_provenance_only(self):
        """Two loads of the same file compare equal even if touched in between."""
        first = parse_product(product_data("x"), source_modified_time=1.0)
        second = parse_product(product_data("x"), source_modified_time=2.0)

        assert first == second
        assert "source_modified_time" not in repr(first)


class TestSiteSettings:
    """Tests for loading per-language site settings."""

    def test_combined_settings_file(self, site_root):
        settings = load_site_settings(site_root / "content")

        assert settings["en"].hero_title == "Modern luxury watches"
        assert settings["zh"].meta_title == "Aurum Atelier | 腕表"

    def test_per_language_file_fallback(self, tmp_path):
        content = tmp_path / "content"
        content.mkdir()
        (content / "site.json").write_text(
            json.dumps({"en": SITE_SETTINGS["en"]}), encoding="utf-8"
        )
        (content / "site.zh.json").write_text(
            json.dumps(SITE_SETTINGS["zh"], ensure_ascii=False), encoding="utf-8"
        )

        settings = load_site_settings(content)

        assert settings["zh"].hero_title == "现代奢华腕表"

    def test_missing_language_is_fatal(self, tmp_path):
        content = tmp_path / "content"
        content.mkdir()
        (content / "site.json").write_text(
            json.dumps({"en": SITE_SETTINGS["en"]}), encoding="utf-8"
        )

        with pytest.raises(ContentError, match="'zh'"):
            load_site_settings(content)


class TestLoadContent:
    """Tests for loading a whole content root."""

    def test_loads_products_with_modification_times(self, site_root):
        settings, products = load_content(site_root / "content")

        assert set(settings) == {"en", "zh"}
        by_slug = {p.slug: p for p in products}
        assert by_slug["solace-automatic"].source_modified_time == 2_000_000
        assert by_slug["solstice-chrono"].source_modified_time == 1_000_000

    def test_discovery_order_is_file_name_order(self, tmp_path):
        write_site(tmp_path, [
            (product_data("zeta"), 1),
            (product_data("alpha"), 1),
            (product_data("mid"), 1),
        ])

        files = list_product_files(tmp_path / "content" / "products")

        assert [f.stem for f in files] == ["alpha", "mid", "zeta"]

    def test_non_json_files_are_ignored(self, site_root):
        (site_root / "content" / "products" / "notes.txt").write_text("draft", encoding="utf-8")

        _, products = load_content(site_root / "content")

        assert len(products) == 2

    def test_missing_content_root_is_fatal(self, tmp_path):
        with pytest.raises(ContentError, match="Content directory not found"):
            load_content(tmp_path / "content")

    def test_missing_products_dir_is_fatal(self, tmp_path):
        content = tmp_path / "content"
        content.mkdir()
        (content / "site.json").write_text(json.dumps(SITE_SETTINGS), encoding="utf-8")

        with pytest.raises(ContentError, match="Products directory not found"):
            load_content(content)

    def test_malformed_product_aborts_load(self, site_root):
        (site_root / "content" / "products" / "broken.json").write_text("{", encoding="utf-8")

        with pytest.raises(ContentError, match="broken.json"):
            load_content(site_root / "content")

    def test_duplicate_slugs_are_rejected(self, site_root):
        duplicate = product_data("solace-automatic")
        (site_root / "content" / "products" / "copy.json").write_text(
            json.dumps(duplicate), encoding="utf-8"
        )

        with pytest.raises(ContentError, match="Duplicate slug"):
            load_content(site_root / "content")
