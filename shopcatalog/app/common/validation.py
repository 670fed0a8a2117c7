"""Turn submitted form / query values into a CatalogQuery.

Bad input never raises here: a value that can't be used is treated as if the
field had been left empty, so the page simply shows fewer filters applied.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from shopcatalog.app.models import CatalogQuery, SortOrder


def _clean(values: Mapping[str, Any], name: str) -> str:
    return str(values.get(name) or "").strip()


def parse_price(raw: Any) -> Optional[float]:
    text = str(raw or "").strip().replace(",", ".")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def parse_catalog_query(values: Mapping[str, Any]) -> CatalogQuery:
    # category is matched verbatim against remote labels, so it is not stripped
    return CatalogQuery(
        category=str(values.get("category") or "") or None,
        min_price=parse_price(values.get("min_price")),
        max_price=parse_price(values.get("max_price")),
        sort=SortOrder.parse(_clean(values, "sort")),
    )
