"""HTML building utilities shared by the page renderers."""

import html
import json
import math
import re
from decimal import Decimal
from typing import Any, Dict, Optional

from aurum_site.config import BRAND_NAME, FONTS_URL, SITE_URL, STYLESHEET_URL
from aurum_site.i18n import Localizer

__all__ = [
    "escape_html",
    "format_number",
    "format_price",
    "site_url",
    "hreflang_urls",
    "render_head",
    "render_json_ld",
]


def escape_html(value: Any) -> str:
    """Escape content for HTML text and attribute positions.

    ``None`` renders as an empty string.
    """
    if value is None:
        return ""
    return html.escape(str(value), quote=True).replace("&#x27;", "&#39;")


_DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_RADIX_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+", re.ASCII)


def _parse_number(value: Any) -> Optional[float]:
    """Read a price the way JavaScript's ``Number()`` would; ``None`` if not finite."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        text = str(value).strip()
        try:
            if not text:
                number = 0.0
            elif _RADIX_LITERAL.fullmatch(text):
                number = float(int(text, 0))
            elif _DECIMAL_LITERAL.fullmatch(text):
                number = float(text)
            else:
                return None
        except OverflowError:
            return None
    return number if math.isfinite(number) else None


def _number_text(number: float) -> str:
    """Lay out the shortest round-trip digits of ``number`` as JavaScript prints them."""
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    # point sits after the first ``point`` digits
    point = exponent + len(digits)
    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = f"0.{'0' * -point}{digits}"
    else:
        power = point - 1
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
    return sign + text


def format_number(value: Any) -> str:
    """Print a price value the way it appears on the site.

    Follows JavaScript number printing: integral values drop the decimal
    point, no grouping or fixed decimals, exponent form below 1e-6 and from
    1e21. Hex, octal and binary literals are read as numbers, blank text as
    0 and booleans as 1 or 0. Anything that is not a finite number is
    returned verbatim; ``None`` prints as an empty string.
    """
    if isinstance(value, int) and not isinstance(value, bool) and abs(value) < 10 ** 21:
        return str(value)
    number = _parse_number(value)
    if number is None:
        return "" if value is None else str(value)
    return _number_text(number)


def format_price(value: Any) -> str:
    """Format a price as ``$`` followed by the number, or the raw value if not numeric."""
    return f"${format_number(value)}"


def site_url(path: str = "/") -> str:
    return f"{SITE_URL}{path}"


def hreflang_urls(en_path: str, zh_path: str, default_path: str = "/") -> Dict[str, str]:
    return {
        "en": site_url(en_path),
        "zh": site_url(zh_path),
        "default": site_url(default_path),
    }


def render_head(
    *,
    title: Any,
    description: Any,
    canonical: str,
    hreflang: Dict[str, str],
    lang: str,
    strings: Localizer,
    robots: str = "index,follow",
) -> str:
    """Render the shared ``<head>`` contents: metadata, alternates, social tags."""
    other_lang = next((code for code in strings.languages if code != lang), lang)
    title = escape_html(title)
    description = escape_html(description)
    canonical = escape_html(canonical)
    alternates = {key: escape_html(url) for key, url in hreflang.items()}
    locale = strings.meta(lang, "og_locale")
    alternate_locale = strings.meta(other_lang, "og_locale")
    return f"""
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{title}</title>
  <meta name="description" content="{description}" />
  <meta name="robots" content="{robots}" />
  <link rel="canonical" href="{canonical}" />
  <link rel="alternate" hreflang="en" href="{alternates['en']}" />
  <link rel="alternate" hreflang="zh-CN" href="{alternates['zh']}" />
  <link rel="alternate" hreflang="x-default" href="{alternates['default']}" />
  <meta property="og:type" content="website" />
  <meta property="og:title" content="{title}" />
  <meta property="og:description" content="{description}" />
  <meta property="og:url" content="{canonical}" />
  <meta property="og:site_name" content="{BRAND_NAME}" />
  <meta property="og:locale" content="{locale}" />
  <meta property="og:locale:alternate" content="{alternate_locale}" />
  <meta name="twitter:card" content="summary_large_image" />
  <meta name="twitter:title" content="{title}" />
  <meta name="twitter:description" content="{description}" />
  <link rel="stylesheet" href="{STYLESHEET_URL}" />
  <link rel="stylesheet" href="{FONTS_URL}" />
"""


def render_json_ld(data: Dict[str, Any]) -> str:
    """Serialize structured data for a ``<script type="application/ld+json">`` block."""
    text = json.dumps(data, ensure_ascii=False, indent=2)
    # Keep content from closing the script element early
    return text.replace("</", "<\\/")
