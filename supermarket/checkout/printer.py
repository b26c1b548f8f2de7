"""Plain-text rendering of receipts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from .models import Discount, ProductUnit, ReceiptItem
from .receipt import Receipt

if TYPE_CHECKING:
    from .config import CheckoutConfig


class ReceiptPrinter:
    """Render a Receipt as fixed-width text."""

    def __init__(self, columns: int = 40) -> None:
        self._columns = columns

    @classmethod
    def from_config(cls, config: CheckoutConfig) -> ReceiptPrinter:
        return cls(columns=config.receipt.columns)

    def print_receipt(self, receipt: Receipt) -> str:
        result = ""
        for item in receipt.items():
            result += self._format_item(item)
        for discount in receipt.discounts():
            result += self._format_discount(discount)
        if receipt.points_used > 0:
            result += self._format_line(
                "Points:", "-" + _format_price(receipt.points_used)
            )
        result += "\n" + self._format_line(
            "Total:", _format_price(receipt.total_price)
        ).rstrip("\n")
        return result

    def _format_item(self, item: ReceiptItem) -> str:
        line = self._format_line(item.product.name, _format_price(item.total_price))
        if item.quantity != 1:
            line += f"  {_format_price(item.price)} * {_present_quantity(item)}\n"
        return line

    def _format_discount(self, discount: Discount) -> str:
        label = f"{discount.description}({discount.product.name})"
        return self._format_line(label, "-" + _format_price(discount.discount_amount))

    def _format_line(self, left: str, right: str) -> str:
        # Overlong labels push the value right instead of truncating
        whitespace = " " * max(self._columns - len(left) - len(right), 1)
        return f"{left}{whitespace}{right}\n"


def _format_price(value: float) -> str:
    return f"{value:,.2f}"


def _present_quantity(item: ReceiptItem) -> str:
    # Halves round up, not to even
    places = "1" if item.product.unit is ProductUnit.EACH else "0.001"
    quantity = Decimal(str(item.quantity)).quantize(
        Decimal(places), rounding=ROUND_HALF_UP
    )
    return f"{quantity:,f}"
