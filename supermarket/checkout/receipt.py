"""Receipt aggregate: priced lines, itemized discounts and the final total."""

from __future__ import annotations

from .models import Discount, Product, ReceiptItem


class Receipt:
    """Filled in during one checkout and owned by the caller afterwards.

    ``items()`` and ``discounts()`` return copies, so the receipt cannot be
    changed through them.
    """

    def __init__(self) -> None:
        self._items: list[ReceiptItem] = []
        self._discounts: list[Discount] = []
        self._points_used: float = 0.0

    def add_product(
        self,
        product: Product,
        quantity: float,
        price: float,
        total_price: float,
    ) -> None:
        self._items.append(ReceiptItem(product, quantity, price, total_price))

    def add_discount(self, discount: Discount) -> None:
        self._discounts.append(discount)

    def record_points_payment(self, points: float) -> None:
        """Record loyalty points spent as payment on this receipt."""
        if points > 0:
            self._points_used += points

    def items(self) -> list[ReceiptItem]:
        return list(self._items)

    def discounts(self) -> list[Discount]:
        return list(self._discounts)

    @property
    def points_used(self) -> float:
        return self._points_used

    @property
    def total_price(self) -> float:
        items_total = sum(item.total_price for item in self._items)
        discounts_total = sum(d.discount_amount for d in self._discounts)
        return items_total - discounts_total - self._points_used

    def summary_dict(self) -> dict:
        """Return a plain dict for JSON serialization or rendering."""
        return {
            "items": [
                {
                    "product": item.product.name,
                    "unit": item.product.unit.value,
                    "quantity": item.quantity,
                    "price": item.price,
                    "total_price": item.total_price,
                }
                for item in self._items
            ],
            "discounts": [
                {
                    "product": d.product.name,
                    "description": d.description,
                    "amount": d.discount_amount,
                }
                for d in self._discounts
            ],
            "points_used": self._points_used,
            "total_price": self.total_price,
        }
