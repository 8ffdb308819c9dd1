"""Static site builder for the bilingual Aurum Atelier catalog."""

__version__ = "0.1.0"

# Re-export main components for convenient imports
from aurum_site.config import DEFAULT_LANGUAGE, LANGUAGES, SITE_URL
from aurum_site.content import load_content
from aurum_site.emitter import BuildReport, build_site, emit_site, render_site
from aurum_site.errors import BuildError, ContentError, EmitError
from aurum_site.i18n import Localizer
from aurum_site.models import Product, SiteSettings
from aurum_site.ordering import related_products, sort_by_recency

__all__ = [
    # Version
    "__version__",
    # Config
    "DEFAULT_LANGUAGE",
    "LANGUAGES",
    "SITE_URL",
    # Models
    "Product",
    "SiteSettings",
    # Errors
    "BuildError",
    "ContentError",
    "EmitError",
    # Core functions
    "load_content",
    "sort_by_recency",
    "related_products",
    "Localizer",
    "render_site",
    "emit_site",
    "build_site",
    "BuildReport",
]
