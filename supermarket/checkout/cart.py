"""Shopping cart: purchase history plus per-product quantity index."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from .catalog import SupermarketCatalog, unit_price_of
from .models import Discount, Product, ProductQuantity, ProductUnit
from .promotions.bundles import (
    DEFAULT_BUNDLE_DISCOUNT_PERCENT,
    Bundle,
    count_complete_bundles,
)
from .promotions.coupons import Coupon
from .promotions.offers import Offer, calculate_discount
from .receipt import Receipt

logger = logging.getLogger(__name__)


class ShoppingCart:
    """Accumulates add-events and evaluates promotions against them.

    Every add call is kept as its own entry. Promotions are computed from
    the per-product aggregate, which is always the sum of those entries.
    """

    def __init__(self) -> None:
        self._items: list[ProductQuantity] = []
        self._product_quantities: dict[str, ProductQuantity] = {}

    def add_item(self, product: Product) -> None:
        self.add_item_quantity(product, 1.0)

    def add_item_quantity(self, product: Product, quantity: float) -> None:
        if quantity < 0:
            raise ValueError(
                f"Quantity must not be negative: {product.name}={quantity}"
            )
        self._items.append(ProductQuantity(product, quantity))

        current = self._product_quantities.get(product.name)
        total = quantity if current is None else current.quantity + quantity
        # The first product seen under a name represents the aggregate
        owner = product if current is None else current.product
        self._product_quantities[product.name] = ProductQuantity(owner, total)

    def items(self) -> list[ProductQuantity]:
        return list(self._items)

    def product_quantities(self) -> dict[str, ProductQuantity]:
        return dict(self._product_quantities)

    def quantity_of(self, product: Product) -> float:
        """Aggregate quantity for a product, 0.0 when absent."""
        pq = self._product_quantities.get(product.name)
        return pq.quantity if pq is not None else 0.0

    def is_empty(self) -> bool:
        return not self._items

    # ── Promotions ────────────────────────────────────────────

    def apply_offers(
        self,
        receipt: Receipt,
        offers: Mapping[str, Offer],
        catalog: SupermarketCatalog,
    ) -> None:
        """Add one discount per product whose aggregate qualifies for its offer."""
        for name, pq in self._product_quantities.items():
            offer = offers.get(name)
            if offer is None or pq.quantity == 0:
                continue
            unit_price = unit_price_of(catalog, pq.product)
            discount = calculate_discount(offer, pq.quantity, unit_price)
            if discount is None:
                logger.debug(
                    "offer %s not applicable to %s (quantity %s)",
                    offer.offer_type.value, name, pq.quantity,
                )
                continue
            receipt.add_discount(discount)

    def apply_bundles(
        self,
        receipt: Receipt,
        bundles: Iterable[Bundle],
        catalog: SupermarketCatalog,
        discount_percent: float = DEFAULT_BUNDLE_DISCOUNT_PERCENT,
    ) -> None:
        """Add at most one discount per bundle, covering every complete set."""
        quantities = {
            name: pq.quantity for name, pq in self._product_quantities.items()
        }
        for bundle in bundles:
            discount = self._bundle_discount(
                bundle, quantities, catalog, discount_percent
            )
            if discount is not None:
                receipt.add_discount(discount)

    def _bundle_discount(
        self,
        bundle: Bundle,
        quantities: dict[str, float],
        catalog: SupermarketCatalog,
        discount_percent: float,
    ) -> Discount | None:
        complete = count_complete_bundles(bundle, quantities)
        if complete == 0:
            logger.debug("%s incomplete", bundle.description)
            return None

        bundle_value = 0.0
        for product in bundle.products:
            unit_price = unit_price_of(catalog, product)
            if product.unit is ProductUnit.KILO:
                # Weight is prorated across the complete bundles
                per_bundle = quantities[product.name] / complete
            else:
                per_bundle = 1
            bundle_value += unit_price * per_bundle

        amount = complete * bundle_value * discount_percent / 100.0
        if amount <= 0:
            return None
        return Discount(bundle.products[0], bundle.description, amount)

    def apply_coupons(
        self,
        receipt: Receipt,
        coupons: Iterable[tuple[Coupon, date]],
        catalog: SupermarketCatalog,
    ) -> None:
        """Honour each valid, unredeemed coupon at most once.

        A coupon is redeemed only when the cart holds more than its
        required quantity; otherwise it stays usable for a later checkout.
        """
        for coupon, on in coupons:
            if coupon.redeemed:
                logger.debug("%s already redeemed", coupon.description)
                continue
            if not coupon.is_valid_on(on):
                logger.debug("%s not valid on %s", coupon.description, on)
                continue

            quantity = self.quantity_of(coupon.product)
            required = coupon.required_quantity
            if quantity <= 0 or quantity <= required:
                continue

            discounted_quantity = min(quantity - required, required)
            unit_price = unit_price_of(catalog, coupon.product)
            amount = (
                discounted_quantity * unit_price * coupon.discount_percent / 100.0
            )
            coupon.redeem()
            logger.info(
                "coupon redeemed: %s (%.2f)", coupon.description, amount
            )
            if amount > 0:
                receipt.add_discount(
                    Discount(coupon.product, coupon.description, amount)
                )
