from __future__ import annotations

from collections import Counter

import click
from flask import Blueprint

from shopcatalog.modules.catalog import source
from shopcatalog.modules.catalog.filters import extract_categories

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("categories")
def list_categories() -> None:
    """Fetch the remote catalog and print each category with its product count."""

    try:
        products = source.load_products()
    except source.ProductSourceError as e:
        raise click.ClickException(f"Could not load products: {e}")

    counts = Counter(p.category for p in products)
    for category in extract_categories(products):
        click.echo(f"{category}\t{counts[category]}")
    click.echo(f"{len(products)} products")
