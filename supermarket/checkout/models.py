"""Data models for products, quantities and receipt lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProductUnit(Enum):
    """How a product is sold: counted per piece or weighed per kilo."""

    EACH = "each"
    KILO = "kilo"


@dataclass(frozen=True)
class Product:
    """A product identified by its name."""

    name: str
    unit: ProductUnit = ProductUnit.EACH


@dataclass(frozen=True)
class ProductQuantity:
    """A product together with a requested quantity."""

    product: Product
    quantity: float


@dataclass(frozen=True)
class ReceiptItem:
    """A single priced line on a receipt."""

    product: Product
    quantity: float
    price: float        # Unit price at checkout time
    total_price: float  # quantity * price


@dataclass(frozen=True)
class Discount:
    """A positive reduction attached to a product on the receipt."""

    product: Product
    description: str
    discount_amount: float


def format_number(value: float) -> str:
    """Render a number the way promotion descriptions show it.

    Integral values drop the fractional part ("2" rather than "2.0").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
