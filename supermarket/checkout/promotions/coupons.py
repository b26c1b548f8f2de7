"""Time-boxed, single-use coupons."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..models import Product, format_number


@dataclass(eq=False)
class Coupon:
    """Buy ``required_quantity`` of a product, get as many again at a discount.

    e.g. buy 6 orange juice, get 6 more at 50% off.

    Once redeemed a coupon stays redeemed.
    """

    product: Product
    required_quantity: int
    discount_percent: float
    valid_from: date
    valid_to: date
    _redeemed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.required_quantity <= 0:
            raise ValueError(
                f"required_quantity must be positive: {self.required_quantity}"
            )
        if self.required_quantity != int(self.required_quantity):
            raise ValueError(
                f"required_quantity must be a whole number: {self.required_quantity}"
            )
        self.required_quantity = int(self.required_quantity)
        if not 0 <= self.discount_percent <= 100:
            raise ValueError(
                f"discount_percent must be within 0..100: {self.discount_percent}"
            )
        if self.valid_from > self.valid_to:
            raise ValueError(
                f"valid_from {self.valid_from} is after valid_to {self.valid_to}"
            )

    @property
    def redeemed(self) -> bool:
        return self._redeemed

    def redeem(self) -> None:
        self._redeemed = True

    def is_valid_on(self, on: date) -> bool:
        """Both ends of the validity window are inclusive."""
        return self.valid_from <= on <= self.valid_to

    @property
    def description(self) -> str:
        return (
            f"coupon(buy {self.required_quantity} {self.product.name}, "
            f"get {self.required_quantity} at "
            f"{format_number(self.discount_percent)}% off)"
        )
