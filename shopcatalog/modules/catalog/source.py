from __future__ import annotations

import logging
from typing import List

import requests
from flask import current_app

from shopcatalog.app.models import Product

logger = logging.getLogger(__name__)


class ProductSourceError(Exception):
    """The remote product API could not be reached or returned garbage."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


def fetch_products(url: str, timeout: float = 10) -> List[Product]:
    """GET the product list from `url` and decode it into Products.

    Malformed entries are skipped (and logged) rather than failing the whole
    list. Anything that prevents reading the list at all raises
    ProductSourceError.
    """
    logger.info("Fetching products from %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Product fetch failed for %s: %s", url, e)
        raise ProductSourceError(url, str(e)) from e

    try:
        data = response.json()
    except ValueError as e:
        logger.warning("Product API at %s returned a non-JSON body", url)
        raise ProductSourceError(url, "response is not valid JSON") from e

    if not isinstance(data, list):
        raise ProductSourceError(url, f"expected a JSON array, got {type(data).__name__}")

    products: List[Product] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping product #%d: not an object", i)
            continue
        try:
            products.append(Product.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping product #%d (id=%r): %s", i, item.get("id"), e)

    logger.info("Fetched %d products (%d skipped)", len(products), len(data) - len(products))
    return products


def load_products() -> List[Product]:
    """Fetch the product list from the URL configured on the current app."""
    cfg = current_app.config
    return fetch_products(cfg["PRODUCTS_API_URL"], timeout=cfg["PRODUCTS_API_TIMEOUT"])
