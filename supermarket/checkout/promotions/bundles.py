"""Multi-product bundles: buy every member together and save."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..models import Product, ProductUnit

DEFAULT_BUNDLE_DISCOUNT_PERCENT = 10.0


@dataclass(frozen=True)
class Bundle:
    """An ordered, non-empty group of distinct products."""

    products: tuple[Product, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but store a tuple
        object.__setattr__(self, "products", tuple(self.products))
        if not self.products:
            raise ValueError("A bundle needs at least one product")
        names = [p.name for p in self.products]
        if len(set(names)) != len(names):
            raise ValueError(f"Bundle products must be distinct: {names}")

    @property
    def description(self) -> str:
        names = " + ".join(p.name for p in self.products)
        return f"bundle({names})"


def unit_count(product: Product, quantity: float) -> int:
    """How many bundle slots a product's aggregate quantity can fill.

    Weighed products fill one slot per started kilo, so any positive
    weight satisfies at least one bundle.
    """
    if quantity <= 0:
        return 0
    # Summed float quantities drift (0.2 + 2.2 + 0.6 != 3.0)
    quantity = round(quantity, 9)
    if product.unit is ProductUnit.KILO:
        return math.ceil(quantity)
    return math.floor(quantity)


def count_complete_bundles(bundle: Bundle, quantities: dict[str, float]) -> int:
    """Return the minimum unit count across the bundle's products."""
    counts = []
    for product in bundle.products:
        quantity = quantities.get(product.name, 0.0)
        if quantity <= 0:
            return 0
        counts.append(unit_count(product, quantity))
    return min(counts)
