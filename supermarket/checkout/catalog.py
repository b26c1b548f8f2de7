"""Product catalog contract and an in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import Product


class PricingError(LookupError):
    """The catalog could not resolve a price for a product in the cart."""


class SupermarketCatalog(ABC):
    """Abstract lookup service mapping products to unit prices."""

    @abstractmethod
    def add_product(self, product: Product, price: float) -> None:
        ...

    @abstractmethod
    def get_unit_price(self, product: Product) -> float:
        """Return the current unit price of a product.

        Prices must not change during a single checkout.
        """
        ...


class InMemoryCatalog(SupermarketCatalog):
    """Catalog backed by a dict keyed by product name."""

    def __init__(self, prices: dict[Product, float] | None = None) -> None:
        self._products: dict[str, Product] = {}
        self._prices: dict[str, float] = {}
        for product, price in (prices or {}).items():
            self.add_product(product, price)

    def add_product(self, product: Product, price: float) -> None:
        if price < 0:
            raise ValueError(f"Price must not be negative: {product.name}={price}")
        self._products[product.name] = product
        self._prices[product.name] = price

    def get_unit_price(self, product: Product) -> float:
        try:
            return self._prices[product.name]
        except KeyError:
            raise PricingError(f"No price in catalog for {product.name!r}") from None

    def __contains__(self, product: Product) -> bool:
        return product.name in self._prices

    def __len__(self) -> int:
        return len(self._prices)


def unit_price_of(catalog: SupermarketCatalog, product: Product) -> float:
    """Look up a unit price, surfacing any lookup failure as PricingError."""
    try:
        price = catalog.get_unit_price(product)
    except PricingError:
        raise
    except LookupError as e:
        raise PricingError(f"No price in catalog for {product.name!r}") from e
    if price is None:
        raise PricingError(f"Catalog returned no price for {product.name!r}")
    return price
