"""Loyalty points account: one point per currency unit spent."""

from __future__ import annotations


class LoyaltyAccount:
    """Point balance that can be spent as payment and earned on purchases.

    The balance never goes negative. Not thread-safe: a deduct/add pair
    shared between registers would need an external lock.
    """

    def __init__(self, points: float = 0.0) -> None:
        if points < 0:
            raise ValueError(f"Starting balance must not be negative: {points}")
        self._points = points

    @property
    def points(self) -> float:
        return self._points

    def add(self, points: float) -> None:
        """Credit points. Non-positive amounts are ignored."""
        if points > 0:
            self._points += points

    def deduct(self, points: float) -> float:
        """Remove up to ``points`` from the balance.

        Returns:
            The amount actually removed, capped at the current balance.
        """
        if points <= 0:
            return 0.0
        removed = min(points, self._points)
        self._points -= removed
        return removed

    def __repr__(self) -> str:
        return f"LoyaltyAccount(points={self._points!r})"
