"""Supermarket checkout: pricing, promotions and loyalty settlement."""

from .cart import ShoppingCart
from .catalog import InMemoryCatalog, PricingError, SupermarketCatalog
from .config import (
    BundleConfig,
    CheckoutConfig,
    LoyaltyConfig,
    ReceiptConfig,
    load_config,
)
from .loyalty import LoyaltyAccount
from .models import Discount, Product, ProductQuantity, ProductUnit, ReceiptItem
from .printer import ReceiptPrinter
from .promotions import Bundle, Coupon, Offer, OfferType
from .receipt import Receipt
from .teller import Teller

__all__ = [
    "Product",
    "ProductUnit",
    "ProductQuantity",
    "ReceiptItem",
    "Discount",
    "SupermarketCatalog",
    "InMemoryCatalog",
    "PricingError",
    "Offer",
    "OfferType",
    "Bundle",
    "Coupon",
    "ShoppingCart",
    "LoyaltyAccount",
    "Receipt",
    "ReceiptPrinter",
    "Teller",
    "CheckoutConfig",
    "BundleConfig",
    "LoyaltyConfig",
    "ReceiptConfig",
    "load_config",
]
