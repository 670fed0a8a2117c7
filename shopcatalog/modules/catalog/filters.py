"""Pure list transformations behind the catalog page.

None of these mutate their input; each returns a new list. The page applies
them in a fixed order (category, then price range, then sort) via
`apply_query`, so the sort is always the last stage.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from shopcatalog.app.models import CatalogQuery, Product, SortOrder


def extract_categories(products: Iterable[Product]) -> List[str]:
    """Distinct categories in order of first appearance."""
    seen = set()
    categories: List[str] = []
    for p in products:
        if p.category not in seen:
            seen.add(p.category)
            categories.append(p.category)
    return categories


def filter_by_category(products: Iterable[Product], category: Optional[str]) -> List[Product]:
    # Empty / missing category means "all categories".
    if not category:
        return list(products)
    return [p for p in products if p.category == category]


def filter_by_price_range(
    products: Iterable[Product],
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> List[Product]:
    """Keep products whose price lies within the inclusive [min, max] bounds.

    Either bound may be None, meaning unbounded on that side.
    """
    return [
        p
        for p in products
        if (min_price is None or p.price >= min_price)
        and (max_price is None or p.price <= max_price)
    ]


def sort_by_price(products: Iterable[Product], order: Union[SortOrder, str, None]) -> List[Product]:
    """Stable sort by price. An absent or unknown order leaves the list as is."""
    order = SortOrder.parse(order)
    if order is None:
        return list(products)
    return sorted(products, key=lambda p: p.price, reverse=order is SortOrder.DESC)


def apply_query(products: Iterable[Product], query: CatalogQuery) -> List[Product]:
    result = filter_by_category(products, query.category)
    result = filter_by_price_range(result, query.min_price, query.max_price)
    return sort_by_price(result, query.sort)
