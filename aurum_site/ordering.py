"""Product ordering and related-product selection."""

from typing import Iterable, List, Sequence

from aurum_site.models import Product

__all__ = ["sort_by_recency", "related_products"]


def sort_by_recency(products: Iterable[Product]) -> List[Product]:
    """Return the canonical product sequence, newest content file first.

    The sort is stable, so products with the same modification time keep
    their discovery order.
    """
    return sorted(products, key=lambda p: p.source_modified_time, reverse=True)


def related_products(products: Sequence[Product], slug: str, count: int) -> List[Product]:
    """Pick ``count`` products following ``slug`` in the canonical sequence.

    The sequence is treated as circular. An unknown slug yields the first
    ``count`` products. Catalogs with no more than ``count`` products can
    return the same product more than once, including the target itself.
    """
    if not products or count <= 0:
        return []

    index = next((i for i, p in enumerate(products) if p.slug == slug), -1)
    if index == -1:
        return list(products[:count])

    total = len(products)
    return [products[(index + offset) % total] for offset in range(1, count + 1)]
