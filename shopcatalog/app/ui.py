"""Server-rendered catalog page."""

import logging

from flask import Blueprint, render_template, request

from shopcatalog.app.common.validation import parse_catalog_query
from shopcatalog.modules.catalog import source
from shopcatalog.modules.catalog.filters import apply_query, extract_categories

logger = logging.getLogger(__name__)

ui_bp = Blueprint("ui", __name__)


@ui_bp.route("/", methods=["GET", "POST"])
def catalog_page():
    # The filter form posts back to this page; plain GET links work too.
    query = parse_catalog_query(request.values)

    load_error = None
    try:
        products = source.load_products()
    except source.ProductSourceError as e:
        logger.error("Rendering catalog without products: %s", e)
        load_error = "Impossible de charger les produits pour le moment."
        products = []

    return render_template(
        "pages/catalog.html",
        products=apply_query(products, query),
        categories=extract_categories(products),
        query=query,
        load_error=load_error,
    )
