from __future__ import annotations

import enum
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: Any) -> Optional["SortOrder"]:
        """Return the matching order, or None for anything unrecognized."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Product:
    """One catalog item as served by the remote product API.

    Only the fields the catalog uses are kept; anything else in the payload
    (description, rating, ...) is dropped by `from_dict`.
    """

    id: Union[int, str]
    title: str
    price: float
    category: str
    image: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Build a product from a decoded JSON object.

        Raises KeyError for a missing (or null) field and ValueError/TypeError
        for a price that is not a finite non-negative number.
        """
        missing = [f for f in ("id", "title", "price", "category", "image") if data.get(f) is None]
        if missing:
            raise KeyError(", ".join(missing))

        price = data["price"]
        if isinstance(price, bool):
            raise TypeError("price must be a number")
        try:
            price = float(price)
        except OverflowError:
            raise ValueError(f"price out of range: {data['price']!r}") from None
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"invalid price: {data['price']!r}")

        return cls(
            id=data["id"],
            title=str(data["title"]),
            price=price,
            category=str(data["category"]),
            image=str(data["image"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CatalogQuery:
    """Filters and sort order submitted from the catalog form (all optional)."""

    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    sort: Optional[SortOrder] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "sort": self.sort.value if self.sort else None,
        }
