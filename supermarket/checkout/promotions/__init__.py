"""Promotion rules: special offers, bundles and coupons."""

from .bundles import (
    DEFAULT_BUNDLE_DISCOUNT_PERCENT,
    Bundle,
    count_complete_bundles,
    unit_count,
)
from .coupons import Coupon
from .offers import Offer, OfferType, calculate_discount

__all__ = [
    "Offer",
    "OfferType",
    "calculate_discount",
    "Bundle",
    "DEFAULT_BUNDLE_DISCOUNT_PERCENT",
    "count_complete_bundles",
    "unit_count",
    "Coupon",
]
