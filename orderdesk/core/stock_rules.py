from collections.abc import Iterable, Mapping
from dataclasses import dataclass

TRACKING_UNTRACKED = "untracked"
TRACKING_OUT_OF_STOCK = "out_of_stock"
TRACKING_IN_STOCK = "in_stock"


@dataclass(frozen=True)
class StockSummary:
    stock: int
    is_low_stock: bool
    inventory_count: int


def _value(row, name):
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def is_row_low_stock(row) -> bool:
    quantity = _value(row, "quantity")
    if quantity is None:
        return False
    min_quantity = _value(row, "min_quantity") or 0
    return quantity <= min_quantity


def summarize_stock(rows: Iterable | None) -> StockSummary:
    """Reduce a product's inventory rows to its derived stock fields.

    Rows may be ORM objects or mappings with ``quantity`` and
    ``min_quantity``. A product without rows has zero stock and is never
    low on stock; it is simply not tracked.
    """
    rows = list(rows or [])
    stock = sum(_value(row, "quantity") or 0 for row in rows)
    return StockSummary(
        stock=stock,
        is_low_stock=any(is_row_low_stock(row) for row in rows),
        inventory_count=len(rows),
    )


def tracking_state(summary: StockSummary) -> str:
    if summary.inventory_count == 0:
        return TRACKING_UNTRACKED
    if summary.stock == 0:
        return TRACKING_OUT_OF_STOCK
    return TRACKING_IN_STOCK


__all__ = [
    "StockSummary",
    "TRACKING_IN_STOCK",
    "TRACKING_OUT_OF_STOCK",
    "TRACKING_UNTRACKED",
    "is_row_low_stock",
    "summarize_stock",
    "tracking_state",
]
