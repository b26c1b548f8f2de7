"""TOML configuration loader for the checkout engine."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class BundleConfig:
    discount_percent: float = 10.0


@dataclass
class LoyaltyConfig:
    points_per_unit: float = 1.0  # points earned per currency unit paid


@dataclass
class ReceiptConfig:
    columns: int = 40


@dataclass
class CheckoutConfig:
    bundles: BundleConfig = field(default_factory=BundleConfig)
    loyalty: LoyaltyConfig = field(default_factory=LoyaltyConfig)
    receipt: ReceiptConfig = field(default_factory=ReceiptConfig)


def load_config(
    path: str | Path | None = None,
    env_file: str | Path | None = None,
) -> CheckoutConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Values can be overridden via environment variables, optionally read
    from a .env file first.

    Raises:
        ValueError: If a value is out of range or not a number.
    """
    if env_file is not None:
        load_dotenv(env_file)

    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    bnd = raw.get("bundles", {})
    loy = raw.get("loyalty", {})
    rcp = raw.get("receipt", {})

    # Resolve values: environment variable → config file → default
    discount_percent = _env_number(
        "SUPERMARKET_BUNDLE_DISCOUNT_PERCENT", bnd.get("discount_percent", 10.0)
    )
    points_per_unit = _env_number(
        "SUPERMARKET_POINTS_PER_UNIT", loy.get("points_per_unit", 1.0)
    )
    columns = _env_number("SUPERMARKET_RECEIPT_COLUMNS", rcp.get("columns", 40))

    if not 0 <= discount_percent <= 100:
        raise ValueError(
            f"bundles.discount_percent must be within 0..100: {discount_percent}"
        )
    if points_per_unit < 0:
        raise ValueError(
            f"loyalty.points_per_unit must not be negative: {points_per_unit}"
        )
    if not columns.is_integer() or columns <= 0:
        raise ValueError(
            f"receipt.columns must be a positive whole number: {columns}"
        )

    return CheckoutConfig(
        bundles=BundleConfig(discount_percent=discount_percent),
        loyalty=LoyaltyConfig(points_per_unit=points_per_unit),
        receipt=ReceiptConfig(columns=int(columns)),
    )


def _env_number(name: str, default: float) -> float:
    value = os.environ.get(name, "") or default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number: {value!r}") from None
