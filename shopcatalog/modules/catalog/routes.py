from __future__ import annotations

from flask import Blueprint, request

from shopcatalog.app.common.errors import abort_json
from shopcatalog.app.common.json import ok
from shopcatalog.app.common.validation import parse_catalog_query
from shopcatalog.modules.catalog import source
from shopcatalog.modules.catalog.filters import apply_query, extract_categories

bp = Blueprint("catalog", __name__)


def _load_or_abort():
    try:
        return source.load_products()
    except source.ProductSourceError as e:
        abort_json(502, "upstream_unavailable", "Product catalog is unavailable", {"reason": e.reason})


@bp.get("/products")
def list_products():
    """GET /api/products - Filtered and sorted product list.

    Query params:
      - category: exact category label
      - min_price, max_price: inclusive bounds
      - sort: asc|desc
    """
    query = parse_catalog_query(request.args)
    products = _load_or_abort()
    items = apply_query(products, query)

    return ok({
        "items": [p.to_dict() for p in items],
        "categories": extract_categories(products),
        "filters": query.to_dict(),
        "count": len(items),
    })


@bp.get("/categories")
def list_categories():
    """GET /api/categories - Distinct categories in catalog order."""
    return ok({"categories": extract_categories(_load_or_abort())})
