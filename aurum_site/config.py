"""Configuration and constants for the site build."""

from typing import Tuple

__all__ = [
    "SITE_URL",
    "BRAND_NAME",
    "BRAND_MARK",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "CONTENT_DIRNAME",
    "PRODUCTS_DIRNAME",
    "SITE_SETTINGS_FILENAME",
    "OUTPUT_DIRNAME",
    "REDIRECTS_FILENAME",
    "STATIC_DIRS",
    "FALLBACK_COMPARE_PRICE",
    "RELATED_COUNT",
    "CARD_TAG_LIMIT",
    "COUNTDOWN_SECONDS",
    "STYLESHEET_URL",
    "FONTS_URL",
    "HERO_IMAGE",
]

# Public origin used for canonical and hreflang URLs
SITE_URL = "https://aurum-atelier-decap.pages.dev"

BRAND_NAME = "Aurum Atelier"
BRAND_MARK = "AA"

# Supported languages, in render order
LANGUAGES: Tuple[str, ...] = ("en", "zh")
DEFAULT_LANGUAGE = "en"

# Content store layout (relative to the project root)
CONTENT_DIRNAME = "content"
PRODUCTS_DIRNAME = "products"
SITE_SETTINGS_FILENAME = "site.json"

# Output layout
OUTPUT_DIRNAME = "dist"
REDIRECTS_FILENAME = "_redirects"

# Directory trees copied verbatim into the output, when present
STATIC_DIRS: Tuple[str, ...] = ("assets", "admin", "functions")

# Product page settings
FALLBACK_COMPARE_PRICE = 398
RELATED_COUNT = 3

# Home page product cards show at most this many tags
CARD_TAG_LIMIT = 4

# Language chooser redirect delay
COUNTDOWN_SECONDS = 3

STYLESHEET_URL = "/assets/style.css"
FONTS_URL = (
    "https://fonts.googleapis.com/css2?family=Playfair+Display:wght@500;600;700"
    "&family=Source+Sans+3:wght@300;400;500;600;700&display=swap"
)
HERO_IMAGE = "/assets/uploads/solace-automatic.jpg"
