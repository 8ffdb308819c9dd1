"""Data models for site content."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

__all__ = [
    "SiteSettings",
    "SpecEntry",
    "ProductImages",
    "LocalizedProductText",
    "Product",
]


@dataclass(frozen=True)
class SiteSettings:
    """Home page copy and metadata for one language."""

    hero_pill: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    cta_primary: Optional[str] = None
    cta_secondary: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


@dataclass(frozen=True)
class SpecEntry:
    """A label/value pair shown in the spec grid or spec table."""

    label: Any = None
    value: Any = None


@dataclass(frozen=True)
class ProductImages:
    main: Optional[str] = None
    gallery: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LocalizedProductText:
    """Product copy for a single language.

    Languages are independent: a field missing here is left empty, never
    filled in from another language.
    """

    name: Optional[str] = None
    subtitle: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()
    highlight_specs: Tuple[SpecEntry, ...] = ()
    spec_table: Tuple[SpecEntry, ...] = ()


@dataclass(frozen=True)
class Product:
    """A product loaded from one content file.

    ``price`` and ``compare_price`` keep whatever the content file holds
    (numbers or strings); formatting decides how to print them.
    ``source_modified_time`` is build provenance used for ordering only.
    """

    # Required fields
    slug: str

    # Core optional fields
    price: Any = None
    compare_price: Any = None
    images: ProductImages = field(default_factory=ProductImages)

    # Copy keyed by language code
    text: Dict[str, LocalizedProductText] = field(default_factory=dict)

    # Provenance (never rendered)
    source_modified_time: float = field(default=0.0, compare=False, repr=False)

    def localized(self, lang: str) -> LocalizedProductText:
        """Return the copy for ``lang``, or empty copy if the language is absent."""
        return self.text.get(lang) or LocalizedProductText()
