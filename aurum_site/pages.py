"""Page renderers.

Each ``render_*`` function is pure: it takes content plus a :class:`Localizer`
and returns a complete HTML document as a string. Content-derived values go
through :func:`escape_html`; template copy from the string table does not.
"""

import re
from typing import Any, Dict, List, Optional, Sequence

from aurum_site.config import (
    BRAND_MARK,
    BRAND_NAME,
    CARD_TAG_LIMIT,
    COUNTDOWN_SECONDS,
    FALLBACK_COMPARE_PRICE,
    FONTS_URL,
    HERO_IMAGE,
    RELATED_COUNT,
    STYLESHEET_URL,
)
from aurum_site.html_utils import (
    escape_html,
    format_number,
    format_price,
    hreflang_urls,
    render_head,
    render_json_ld,
    site_url,
)
from aurum_site.i18n import Localizer
from aurum_site.models import Product, SiteSettings, SpecEntry
from aurum_site.ordering import related_products

__all__ = [
    "home_path",
    "product_path",
    "render_header",
    "render_hero",
    "render_product_card",
    "render_home",
    "render_product_page",
    "render_language_selector",
    "product_structured_data",
]


def home_path(lang: str) -> str:
    return f"/{lang}/"


def product_path(lang: str, slug: str) -> str:
    return f"/{lang}/{slug}/"


def _document(lang: str, head: str, body_class: str, body: str, strings: Localizer) -> str:
    return f"""<!doctype html>
<html lang="{strings.meta(lang, 'html_lang')}">
<head>{head}</head>
<body class="{body_class}">
{body}
</body>
</html>"""


# =============================================================================
# Shared blocks
# =============================================================================

def render_header(lang: str, strings: Localizer) -> str:
    """Header with brand mark, section navigation and the language switcher."""
    t = strings.bind(lang)
    home = home_path(lang)

    nav_items = "\n".join(
        f'          <li><a href="{home}#{section}">{t("nav." + section)}</a></li>'
        for section in ("collections", "craft", "reviews", "service")
    )

    switch_links = []
    for code in strings.languages:
        is_current = code == lang
        switch_links.append(
            f'        <a class="{"active" if is_current else ""}" href="{home_path(code)}" '
            f'lang="{strings.meta(code, "hreflang")}" '
            f'aria-current="{"page" if is_current else "false"}">{strings.meta(code, "label")}</a>'
        )

    return f"""
  <header>
    <div class="container nav">
      <div class="brand" aria-label="{BRAND_NAME}">
        <div class="brand-badge">{BRAND_MARK}</div>
        <span>{BRAND_NAME}</span>
      </div>
      <nav aria-label="Primary">
        <ul>
{nav_items}
        </ul>
      </nav>
      <div class="lang-switch" role="navigation" aria-label="Language">
{chr(10).join(switch_links)}
      </div>
    </div>
  </header>
"""


def _brand_block() -> str:
    return f"""<div class="brand">
        <div class="brand-badge">{BRAND_MARK}</div>
        <span>{BRAND_NAME}</span>
      </div>"""


def _feature(title: str, copy: str, css_class: str = "feature") -> str:
    return f"""
          <div class="{css_class}">
            <h3>{title}</h3>
            <p>{copy}</p>
          </div>"""


def _testimonial(quote: str, author: str, city: str) -> str:
    return f"""
      <div class="testimonial">
        <p>{quote}</p>
        <strong>{author} / {city}</strong>
      </div>"""


def _faq(items: Sequence[Sequence[str]]) -> str:
    blocks = []
    for index, (question, answer) in enumerate(items):
        opener = "<details open>" if index == 0 else "<details>"
        blocks.append(f"""
          {opener}
            <summary>{question}</summary>
            <p>{answer}</p>
          </details>""")
    return "".join(blocks)


def _email_form(placeholder: str, button: str) -> str:
    return f"""<form>
        <input type="email" name="email" autocomplete="email" placeholder="{placeholder}" required />
        <button class="btn primary" type="submit">{button}</button>
      </form>"""


# =============================================================================
# Home page
# =============================================================================

def render_hero(lang: str, settings: SiteSettings, strings: Localizer) -> str:
    t = strings.bind(lang)
    return f"""
  <section class="hero container">
    <div>
      <p class="pill">{escape_html(settings.hero_pill)}</p>
      <h1>{escape_html(settings.hero_title)}</h1>
      <p>{escape_html(settings.hero_subtitle)}</p>
      <div class="cta-row">
        <a class="btn primary" href="#collections">{escape_html(settings.cta_primary)}</a>
        <a class="btn secondary" href="#service">{escape_html(settings.cta_secondary)}</a>
      </div>
    </div>
    <div class="hero-card">
      <img src="{HERO_IMAGE}" alt="{t("hero.image_alt")}" loading="lazy" />
      <div class="stat-grid">
        <div class="stat">
          <strong>12+ {t("hero.years")}</strong>
          <span>{t("hero.heritage")}</span>
        </div>
        <div class="stat">
          <strong>2 {t("hero.years")}</strong>
          <span>{t("hero.warranty")}</span>
        </div>
        <div class="stat">
          <strong>48h</strong>
          <span>{t("hero.dispatch")}</span>
        </div>
      </div>
    </div>
  </section>
"""


def render_product_card(product: Product, lang: str, strings: Localizer) -> str:
    """Product grid card: image, name, description, tags, price and link."""
    text = product.localized(lang)
    name = escape_html(text.name)
    url = escape_html(product_path(lang, product.slug))

    visible_tags = text.tags[:CARD_TAG_LIMIT]
    extra_count = len(text.tags) - len(visible_tags)
    tag_pills = "".join(f'<span class="pill">{escape_html(tag)}</span>' for tag in visible_tags)
    overflow = f'<span class="pill">+{extra_count}</span>' if extra_count > 0 else ""

    return f"""
  <article class="product">
    <a href="{url}">
      <img src="{escape_html(product.images.main)}" alt="{name}" loading="lazy" />
    </a>
    <h3>{name}</h3>
    <p>{escape_html(text.description)}</p>
    <div class="pill-row">
      {tag_pills}
      {overflow}
    </div>
    <span class="price">{escape_html(format_price(product.price))}</span>
    <a class="btn secondary" href="{url}">{strings.resolve("card.view", lang)}</a>
  </article>
"""


def _render_footer(lang: str, strings: Localizer) -> str:
    t = strings.bind(lang)
    phone = t("footer.phone")
    phone_href = re.sub(r"\s+", "", phone)
    return f"""
<footer>
  <div class="container footer-grid">
    <div>
      {_brand_block()}
      <p>{t("footer.tagline")}</p>
    </div>
    <div>
      <strong>{t("footer.shop")}</strong>
      <a href="#collections">{t("footer.all")}</a>
      <a href="#collections">{t("footer.limited")}</a>
      <a href="#service">{t("footer.concierge")}</a>
    </div>
    <div>
      <strong>{t("footer.company")}</strong>
      <a href="#craft">{t("footer.craft")}</a>
      <a href="#reviews">{t("footer.reviews")}</a>
      <a href="#service">{t("footer.warranty")}</a>
    </div>
    <div>
      <strong>{t("footer.contact")}</strong>
      <a href="mailto:{t("footer.email")}">{t("footer.email")}</a>
      <a href="tel:{phone_href}">{phone}</a>
      <span>{t("footer.address")}</span>
    </div>
  </div>
</footer>
"""


def render_home(
    lang: str,
    settings: SiteSettings,
    products: Sequence[Product],
    strings: Localizer,
) -> str:
    """Localized home page with one card per product in canonical order."""
    t = strings.bind(lang)
    cards = "".join(render_product_card(product, lang, strings) for product in products)

    craft_features = "".join([
        _feature(t("craft.movements_title"), t("craft.movements_copy")),
        _feature(t("craft.materials_title"), t("craft.materials_copy")),
        _feature(t("craft.qc_title"), t("craft.qc_copy")),
    ])
    testimonials = "".join([
        _testimonial(t("reviews.quote_1"), "Daniel", t("reviews.city_1")),
        _testimonial(t("reviews.quote_2"), "Ming", t("reviews.city_2")),
        _testimonial(t("reviews.quote_3"), "Avery", t("reviews.city_3")),
    ])
    service_features = "".join([
        _feature(t("service.sizing_title"), t("service.sizing_copy")),
        _feature(t("service.warranty_title"), t("service.warranty_copy")),
        _feature(t("service.payments_title"), t("service.payments_copy")),
    ])
    faq = _faq([
        (t("service.faq_delivery_q"), t("service.faq_delivery_a")),
        (t("service.faq_straps_q"), t("service.faq_straps_a")),
        (t("service.faq_papers_q"), t("service.faq_papers_a")),
    ])

    body = f"""
{render_header(lang, strings)}
<main>
  {render_hero(lang, settings, strings)}

  <section id="collections" class="section container">
    <h2>{t("sections.collections")}</h2>
    <p class="lead">{t("sections.collections_lead")}</p>
    <div class="grid products">
      {cards}
    </div>
  </section>

  <section id="craft" class="section container">
    <div class="split">
      <div>
        <h2>{t("sections.craft")}</h2>
        <p class="lead">{t("sections.craft_lead")}</p>
        <div class="grid feature-grid">{craft_features}
        </div>
      </div>
      <div class="hero-card">
        <h3>{t("craft.receive_title")}</h3>
        <p>{t("craft.receive_copy")}</p>
        <div class="badge-row">
          <span class="badge">{t("craft.badge_delivery")}</span>
          <span class="badge">{t("craft.badge_customs")}</span>
          <span class="badge">{t("craft.badge_support")}</span>
        </div>
      </div>
    </div>
  </section>

  <section id="reviews" class="section container">
    <h2>{t("sections.reviews")}</h2>
    <p class="lead">{t("sections.reviews_lead")}</p>
    <div class="grid feature-grid">{testimonials}
    </div>
  </section>

  <section id="service" class="section container">
    <div class="split">
      <div>
        <h2>{t("sections.service")}</h2>
        <p class="lead">{t("sections.service_lead")}</p>
        <div class="grid feature-grid">{service_features}
        </div>
      </div>
      <div class="hero-card">
        <h3>{t("service.faq_title")}</h3>
        <div class="faq">{faq}
        </div>
      </div>
    </div>
  </section>

  <section class="section container">
    <div class="newsletter">
      <h2>{t("newsletter.title")}</h2>
      <p>{t("newsletter.copy")}</p>
      {_email_form(t("newsletter.placeholder"), t("newsletter.button"))}
    </div>
  </section>
</main>
{_render_footer(lang, strings)}"""

    head = render_head(
        title=settings.meta_title,
        description=settings.meta_description,
        canonical=site_url(home_path(lang)),
        hreflang=hreflang_urls(home_path("en"), home_path("zh")),
        lang=lang,
        strings=strings,
    )
    return _document(lang, head, f"aurum-page aurum-{lang}", body, strings)


# =============================================================================
# Product page
# =============================================================================

def _spec_cards(entries: Sequence[SpecEntry]) -> str:
    return "".join(
        f'<div class="spec"><span>{escape_html(e.label)}</span>'
        f'<strong>{escape_html(e.value)}</strong></div>'
        for e in entries
    )


def _spec_rows(entries: Sequence[SpecEntry]) -> str:
    return "".join(
        f"<tr><th>{escape_html(e.label)}</th><td>{escape_html(e.value)}</td></tr>"
        for e in entries
    )


def _related_card(item: Product, lang: str) -> str:
    text = item.localized(lang)
    name = escape_html(text.name)
    return f"""
          <article class="related-card">
            <img src="{escape_html(item.images.main)}" alt="{name}" />
            <h3>{name}</h3>
            <p>{escape_html(text.description)}</p>
            <span class="price">{escape_html(format_price(item.price))}</span>
          </article>
        """


def product_structured_data(product: Product, lang: str, canonical: str) -> Dict[str, Any]:
    """Schema.org Product record embedded in the product page."""
    text = product.localized(lang)
    gallery = list(product.images.gallery)
    # stored text is kept as written; numbers print the way the price tag does
    price = product.price if isinstance(product.price, str) else format_number(product.price)
    return {
        "@context": "https://schema.org",
        "@type": "Product",
        "name": text.name,
        "image": gallery if gallery else [product.images.main],
        "description": text.subtitle,
        "brand": {
            "@type": "Brand",
            "name": BRAND_NAME,
        },
        "sku": f"AA-{product.slug.upper()}-{price}",
        "offers": {
            "@type": "Offer",
            "priceCurrency": "USD",
            "price": price,
            "availability": "https://schema.org/InStock",
            "url": canonical,
        },
    }


def render_product_page(
    product: Product,
    lang: str,
    products: Sequence[Product],
    strings: Localizer,
    related_count: int = RELATED_COUNT,
) -> str:
    """Localized product detail page.

    Args:
        product: Product to render
        lang: Language code
        products: Canonical product sequence, used for the related section
        strings: String table
        related_count: Number of related products to show

    Returns:
        Complete HTML document
    """
    t = strings.bind(lang)
    text = product.localized(lang)
    name = escape_html(text.name)
    path = product_path(lang, product.slug)
    canonical = site_url(path)
    compare_price: Optional[Any] = product.compare_price or FALLBACK_COMPARE_PRICE

    main_image = escape_html(product.images.main)
    thumbs = "".join(
        f'<img src="{escape_html(image)}" alt="{name}" />' for image in product.images.gallery
    )
    tag_chips = "".join(f'<span class="tagline">{escape_html(tag)}</span>' for tag in text.tags)
    related: List[Product] = related_products(products, product.slug, related_count)

    craft_cards = "".join([
        _feature(t("detail_craft.case_title"), t("detail_craft.case_copy"), "detail-card"),
        _feature(t("detail_craft.crystal_title"), t("detail_craft.crystal_copy"), "detail-card"),
        _feature(t("detail_craft.comfort_title"), t("detail_craft.comfort_copy"), "detail-card"),
    ])
    box_cards = "".join([
        _feature(t("detail_box.certificate_title"), t("detail_box.certificate_copy"), "detail-card"),
        _feature(t("detail_box.tool_title"), t("detail_box.tool_copy"), "detail-card"),
        _feature(t("detail_box.case_title"), t("detail_box.case_copy"), "detail-card"),
    ])
    testimonials = "".join([
        _testimonial(t("detail_reviews.quote_1"), "Chris", t("detail_reviews.city_1")),
        _testimonial(t("detail_reviews.quote_2"), "Elena", t("detail_reviews.city_2")),
        _testimonial(t("detail_reviews.quote_3"), "Jordan", t("detail_reviews.city_3")),
    ])
    faq = _faq([
        (t("detail_faq.warranty_q"), t("detail_faq.warranty_a")),
        (t("detail_faq.shipping_q"), t("detail_faq.shipping_a")),
        (t("detail_faq.strap_q"), t("detail_faq.strap_a")),
    ])

    body = f"""
{render_header(lang, strings)}
<main class="container product-detail">
  <div class="breadcrumb">
    <a href="{home_path(lang)}">{t("product.breadcrumb_home")}</a> / <a href="{home_path(lang)}#collections">{t("product.breadcrumb_collections")}</a> / {name}
  </div>

  <section class="product-hero">
    <div class="gallery">
      <div class="gallery-main">
        <img src="{main_image}" alt="{name}" />
      </div>
      <div class="gallery-thumbs">
        {thumbs}
      </div>
    </div>

    <div class="product-summary">
      <h1>{name}</h1>
      <p class="subtitle">{escape_html(text.subtitle)}</p>
      <div class="tagline-row">
        {tag_chips}
      </div>

      <div class="sticky-panel">
        <div class="price-card">
          <div class="price-row">
            <span class="price">{escape_html(format_price(product.price))}</span>
            <span class="compare">{escape_html(format_price(compare_price))}</span>
          </div>
          <p class="subtitle">{t("product.compare_label")}</p>
          <div class="cta-stack">
            <a class="btn primary" href="#contact">{t("product.inquire_button")}</a>
            <a class="btn secondary" href="#specs">{t("product.specs_button")}</a>
          </div>
        </div>

        <div class="shipping-box">
          <strong>{t("product.delivery_title")}</strong>
          <p>{t("product.delivery_copy")}</p>
        </div>
      </div>
    </div>
  </section>

  <section id="specs" class="detail-section">
    <h2>{t("product.highlights")}</h2>
    <div class="spec-grid">
      {_spec_cards(text.highlight_specs)}
    </div>

    <table class="spec-table">
      {_spec_rows(text.spec_table)}
    </table>
  </section>

  <section class="detail-section">
    <h2>{t("product.craft_title")}</h2>
    <div class="detail-grid">{craft_cards}
    </div>
  </section>

  <section class="detail-section">
    <h2>{t("product.box_title")}</h2>
    <div class="detail-grid">{box_cards}
    </div>
  </section>

  <section class="detail-section">
    <h2>{t("product.reviews_title")}</h2>
    <div class="grid feature-grid">{testimonials}
    </div>
  </section>

  <section class="detail-section">
    <h2>{t("product.faq_title")}</h2>
    <div class="faq">{faq}
    </div>
  </section>

  <section class="detail-section">
    <h2>{t("product.related_title")}</h2>
    <div class="related-grid">
      {"".join(_related_card(item, lang) for item in related)}
    </div>
  </section>

  <section id="contact" class="detail-section">
    <div class="newsletter">
      <h2>{t("product.consult_title")}</h2>
      <p>{t("product.consult_copy")}</p>
      {_email_form(t("newsletter.placeholder"), t("product.consult_button"))}
    </div>
  </section>
</main>

<script type="application/ld+json">
{render_json_ld(product_structured_data(product, lang, canonical))}
</script>"""

    head = render_head(
        title=f"{text.name or ''} | {BRAND_NAME}",
        description=text.subtitle,
        canonical=canonical,
        hreflang=hreflang_urls(product_path("en", product.slug), product_path("zh", product.slug)),
        lang=lang,
        strings=strings,
    )
    return _document(lang, head, "aurum-page aurum-product", body, strings)


# =============================================================================
# Language chooser
# =============================================================================

def render_language_selector(strings: Localizer) -> str:
    """Root page that lets visitors pick a language.

    The countdown redirect only runs when the page is served at ``/``.
    """
    alternates = hreflang_urls(home_path("en"), home_path("zh"))
    buttons = "\n".join(
        f'      <a class="btn{" primary" if index == 0 else ""}" href="{home_path(code)}" '
        f'lang="{strings.meta(code, "hreflang")}">{strings.meta(code, "label")}</a>'
        for index, code in enumerate(strings.languages)
    )
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Choose Language | 选择语言</title>
  <meta name="description" content="Choose your language to view the watch collection. 请选择语言以浏览腕表系列。" />
  <meta name="robots" content="noindex,follow" />
  <link rel="canonical" href="{alternates['default']}" />
  <link rel="alternate" hreflang="en" href="{alternates['en']}" />
  <link rel="alternate" hreflang="zh-CN" href="{alternates['zh']}" />
  <link rel="alternate" hreflang="x-default" href="{alternates['default']}" />
  <link rel="stylesheet" href="{STYLESHEET_URL}" />
  <link rel="stylesheet" href="{FONTS_URL}" />
</head>
<body class="lang-page">
  <main class="lang-panel">
    <h1>Choose Language / 选择语言</h1>
    <p>Select a language to view the watch collection. 请选择语言以浏览腕表系列。</p>
    <div class="btn-row">
{buttons}
    </div>
    <p class="note">Redirecting in <span id="countdown-en">{COUNTDOWN_SECONDS}</span>s… / 正在跳转，剩余 <span id="countdown-zh">{COUNTDOWN_SECONDS}</span> 秒…</p>
    <noscript>
      <p class="note">JavaScript 已关闭，请手动选择语言。</p>
    </noscript>
  </main>

  <script>
    (function () {{
      var lang = (navigator.language || "en").toLowerCase();
      var target = lang.indexOf("zh") !== -1 ? "/zh/" : "/en/";
      var seconds = {COUNTDOWN_SECONDS};
      var counterEn = document.getElementById("countdown-en");
      var counterZh = document.getElementById("countdown-zh");

      function tick() {{
        if (counterEn) counterEn.textContent = seconds;
        if (counterZh) counterZh.textContent = seconds;
        if (seconds <= 0) {{
          window.location.replace(target);
          return;
        }}
        seconds -= 1;
        setTimeout(tick, 1000);
      }}

      if (window.location.pathname === "/") {{
        tick();
      }}
    }})();
  </script>
</body>
</html>"""
