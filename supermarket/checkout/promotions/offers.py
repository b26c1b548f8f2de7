"""Per-product special offers and their discount formulas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..models import Discount, Product, format_number


class OfferType(Enum):
    THREE_FOR_TWO = "three_for_two"
    TWO_FOR_AMOUNT = "two_for_amount"
    FIVE_FOR_AMOUNT = "five_for_amount"
    TEN_PERCENT_DISCOUNT = "ten_percent_discount"


@dataclass(frozen=True)
class Offer:
    """A special offer registered for one product.

    ``argument`` is the special price for the "N for amount" kinds and the
    percentage for TEN_PERCENT_DISCOUNT; THREE_FOR_TWO ignores it.
    """

    offer_type: OfferType
    product: Product
    argument: float = 0.0


def calculate_discount(
    offer: Offer, quantity: float, unit_price: float
) -> Discount | None:
    """Compute the discount an offer grants on an aggregate quantity.

    Returns None when the quantity is below the offer's threshold or the
    resulting reduction is not positive.
    """
    match offer.offer_type:
        case OfferType.THREE_FOR_TWO:
            return _three_for_two(offer.product, quantity, unit_price)
        case OfferType.TWO_FOR_AMOUNT:
            return _n_for_amount(offer.product, quantity, unit_price, 2, offer.argument)
        case OfferType.FIVE_FOR_AMOUNT:
            return _n_for_amount(offer.product, quantity, unit_price, 5, offer.argument)
        case OfferType.TEN_PERCENT_DISCOUNT:
            return _percent_off(offer.product, quantity, unit_price, offer.argument)
        case _:
            raise ValueError(f"Unknown offer type: {offer.offer_type!r}")


def _three_for_two(
    product: Product, quantity: float, unit_price: float
) -> Discount | None:
    if quantity <= 2:
        return None
    sets = math.floor(quantity / 3)
    remainder = quantity % 3
    paid = sets * 2 * unit_price + remainder * unit_price
    return _positive(product, "3 for 2", quantity * unit_price - paid)


def _n_for_amount(
    product: Product,
    quantity: float,
    unit_price: float,
    size: int,
    special_price: float,
) -> Discount | None:
    if quantity < size:
        return None
    sets = math.floor(quantity / size)
    remainder = quantity % size
    paid = sets * special_price + remainder * unit_price
    description = f"{size} for {format_number(special_price)}"
    return _positive(product, description, quantity * unit_price - paid)


def _percent_off(
    product: Product, quantity: float, unit_price: float, percent: float
) -> Discount | None:
    amount = quantity * unit_price * percent / 100.0
    return _positive(product, f"{format_number(percent)}% off", amount)


def _positive(product: Product, description: str, amount: float) -> Discount | None:
    # A special price above the regular one would be a surcharge
    if amount <= 0:
        return None
    return Discount(product=product, description=description, discount_amount=amount)
