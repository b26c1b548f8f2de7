"""Checkout orchestration: pricing, promotions and loyalty settlement."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import date

from .cart import ShoppingCart
from .catalog import PricingError, SupermarketCatalog, unit_price_of
from .config import CheckoutConfig
from .loyalty import LoyaltyAccount
from .models import Product
from .promotions.bundles import Bundle
from .promotions.coupons import Coupon
from .promotions.offers import Offer, OfferType
from .receipt import Receipt

logger = logging.getLogger(__name__)


class Teller:
    """Checks out carts against the promotions registered with it.

    Each teller holds its own offers, bundles, coupons and loyalty
    account, so several can coexist (e.g. one per test).
    """

    def __init__(
        self,
        catalog: SupermarketCatalog,
        config: CheckoutConfig | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config or CheckoutConfig()
        self._offers: dict[str, Offer] = {}
        self._bundles: list[Bundle] = []
        self._coupons: list[tuple[Coupon, date]] = []
        self._loyalty_account: LoyaltyAccount | None = None
        self._points_to_use: float = 0.0

    # ── Registration ──────────────────────────────────────────

    def add_special_offer(
        self, offer_type: OfferType, product: Product, argument: float = 0.0
    ) -> None:
        """Register an offer, replacing any offer already held by the product."""
        self._offers[product.name] = Offer(offer_type, product, argument)

    def add_bundle_offer(self, products: Iterable[Product]) -> Bundle:
        bundle = Bundle(tuple(products))
        self._bundles.append(bundle)
        return bundle

    def apply_coupon(self, coupon: Coupon, on: date | None = None) -> None:
        """Register a coupon to be checked against ``on`` at every checkout.

        The date is captured now (today when omitted) and reused for all
        later checkouts. Redeemed coupons are accepted and skipped at
        checkout.
        """
        self._coupons.append((coupon, on or date.today()))

    def set_loyalty_account(self, account: LoyaltyAccount | None) -> None:
        self._loyalty_account = account

    def use_points(self, points: float) -> None:
        """Spend up to ``points`` as payment on the next checkout only."""
        self._points_to_use = max(points, 0.0)

    def offers(self) -> dict[str, Offer]:
        return dict(self._offers)

    def bundles(self) -> list[Bundle]:
        return list(self._bundles)

    def coupons(self) -> list[tuple[Coupon, date]]:
        return list(self._coupons)

    @property
    def loyalty_account(self) -> LoyaltyAccount | None:
        return self._loyalty_account

    # ── Checkout ──────────────────────────────────────────────

    def checks_out_articles_from(self, cart: ShoppingCart) -> Receipt:
        """Price a cart and settle loyalty points.

        Raises:
            PricingError: If the catalog has no price for a product in the cart.
        """
        try:
            receipt = Receipt()
            for pq in cart.items():
                unit_price = unit_price_of(self._catalog, pq.product)
                receipt.add_product(
                    pq.product, pq.quantity, unit_price, pq.quantity * unit_price
                )

            # Each rule reads the raw cart aggregates, so order only
            # affects how discounts are listed
            cart.apply_offers(receipt, self._offers, self._catalog)
            cart.apply_bundles(
                receipt,
                self._bundles,
                self._catalog,
                discount_percent=self._config.bundles.discount_percent,
            )
            cart.apply_coupons(receipt, self._coupons, self._catalog)

            if self._loyalty_account is not None:
                self._settle_loyalty(receipt, self._loyalty_account)
        except PricingError:
            logger.error("checkout aborted: unpriced product in cart")
            raise
        finally:
            self._points_to_use = 0.0

        logger.info(
            "checkout: %d items, %d discounts, points used %s, total %.2f",
            len(receipt.items()),
            len(receipt.discounts()),
            receipt.points_used,
            receipt.total_price,
        )
        return receipt

    def _settle_loyalty(self, receipt: Receipt, account: LoyaltyAccount) -> None:
        remaining = receipt.total_price

        if self._points_to_use > 0:
            use = min(self._points_to_use, account.points, remaining)
            deducted = account.deduct(use) if use > 0 else 0.0
            if deducted > 0:
                receipt.record_points_payment(deducted)
                remaining -= deducted

        earned = math.floor(remaining * self._config.loyalty.points_per_unit)
        if earned > 0:
            account.add(earned)
            logger.debug("loyalty points earned: %d", earned)
