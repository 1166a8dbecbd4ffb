import logging
import re
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from orderdesk.core.constants import (
    DEFAULT_INVENTORY_CATEGORY,
    DEFAULT_MIN_QUANTITY,
    SYNC_SKU_PREFIX,
)
from orderdesk.core.errors import CollaboratorFailure, NotFoundError, ValidationFailure
from orderdesk.core.stock_rules import is_row_low_stock
from orderdesk.core.variant_rules import build_variant_matrix, variant_key, variant_label
from orderdesk.models.inventory import InventoryItem
from orderdesk.models.product import Product
from orderdesk.schemas.inventory import (
    InventoryCreate,
    InventoryRead,
    InventoryUpdate,
)

logger = logging.getLogger(__name__)

_TEXTILE_FIELDS = ("branch", "gender", "fit", "fabric", "gsm")
_WHITESPACE_RE = re.compile(r"\s+")


def _sku_stem(product_id: str) -> str:
    return product_id.replace("-", "")[:8].upper()


def sync_sku(product_id: str) -> str:
    return SYNC_SKU_PREFIX + _sku_stem(product_id)


def variant_sku(product_id: str, color: Optional[str], size: Optional[str]) -> str:
    parts = [_sku_stem(product_id)]
    for value in (color, size):
        if value:
            parts.append(_WHITESPACE_RE.sub("", value).upper())
    return "-".join(parts)


def new_inventory_row(
    product: Product,
    color: Optional[str],
    size: Optional[str],
    *,
    min_quantity: int = DEFAULT_MIN_QUANTITY,
    sku: Optional[str] = None,
) -> InventoryItem:
    label = variant_label(color, size)
    return InventoryItem(
        product_id=product.id,
        name="{} / {}".format(product.name, label) if label else product.name,
        sku=sku or variant_sku(product.id, color, size),
        category=product.category or DEFAULT_INVENTORY_CATEGORY,
        color=color,
        size=size,
        quantity=0,
        min_quantity=min_quantity,
        **{name: getattr(product, name) for name in _TEXTILE_FIELDS},
    )


def to_inventory_read(item: InventoryItem) -> InventoryRead:
    base = InventoryRead.model_validate(item).model_dump()
    base["is_low_stock"] = is_row_low_stock(item)
    return InventoryRead(**base)


def list_inventory(db: Session) -> list[InventoryItem]:
    return list(
        db.execute(
            select(InventoryItem)
            .options(selectinload(InventoryItem.product))
            .order_by(InventoryItem.name, InventoryItem.created_at)
        )
        .scalars()
        .all()
    )


def get_inventory_item(db: Session, item_id: str) -> InventoryItem:
    item = db.get(InventoryItem, item_id)
    if item is None:
        raise NotFoundError("Inventory item not found", details={"inventory_id": item_id})
    return item


def _ensure_product_exists(db: Session, product_id: Optional[str]) -> None:
    if product_id is not None and db.get(Product, product_id) is None:
        raise NotFoundError("Product not found", details={"product_id": product_id})


def _ensure_variant_free(
    db: Session,
    product_id: Optional[str],
    color: Optional[str],
    size: Optional[str],
    *,
    exclude_id: Optional[str] = None,
) -> None:
    if product_id is None:
        return
    query = select(InventoryItem.id).where(
        InventoryItem.product_id == product_id,
        InventoryItem.variant_key == variant_key(color, size),
    )
    if exclude_id is not None:
        query = query.where(InventoryItem.id != exclude_id)
    if db.execute(query).first():
        raise ValidationFailure(
            "An inventory row for this product variant already exists.",
            details={"product_id": product_id, "color": color, "size": size},
        )


def create_inventory_item(db: Session, payload: InventoryCreate) -> InventoryItem:
    values = payload.model_dump()
    values["color"] = values.get("color") or None
    values["size"] = values.get("size") or None
    _ensure_product_exists(db, values["product_id"])
    _ensure_variant_free(db, values["product_id"], values["color"], values["size"])

    item = InventoryItem(**values)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_inventory_item(db: Session, item_id: str, payload: InventoryUpdate) -> InventoryItem:
    item = get_inventory_item(db, item_id)
    values = payload.model_dump(exclude_unset=True)
    for key in ("color", "size"):
        if key in values:
            values[key] = values[key] or None
    for key in ("name", "quantity", "min_quantity"):
        if key in values and values[key] is None:
            del values[key]

    if {"product_id", "color", "size"} & values.keys():
        product_id = values.get("product_id", item.product_id)
        _ensure_product_exists(db, product_id)
        _ensure_variant_free(
            db,
            product_id,
            values.get("color", item.color),
            values.get("size", item.size),
            exclude_id=item.id,
        )

    for key, value in values.items():
        setattr(item, key, value)
    db.commit()
    db.refresh(item)
    return item


def update_inventory_quantity(db: Session, item_id: str, quantity: int) -> InventoryItem:
    if quantity is None or quantity < 0:
        raise ValidationFailure("quantity must be a non-negative integer.")
    item = get_inventory_item(db, item_id)
    item.quantity = quantity
    db.commit()
    db.refresh(item)
    return item


def delete_inventory_item(db: Session, item_id: str) -> None:
    item = get_inventory_item(db, item_id)
    db.delete(item)
    db.commit()


def _plan_sync(db: Session, expand_variants: bool) -> list[InventoryItem]:
    products = (
        db.execute(
            select(Product)
            .options(selectinload(Product.inventory))
            .order_by(Product.created_at, Product.id)
            .execution_options(populate_existing=True)
        )
        .scalars()
        .all()
    )
    tracked = set(
        db.execute(
            select(InventoryItem.product_id)
            .where(InventoryItem.product_id.is_not(None))
            .distinct()
        )
        .scalars()
        .all()
    )

    rows = []
    for product in products:
        has_rows = product.id in tracked
        matrix = build_variant_matrix(product.available_colors, product.available_sizes)
        declares_variants = matrix != [(None, None)]

        if not expand_variants or not declares_variants:
            if not has_rows:
                rows.append(new_inventory_row(product, None, None, sku=sync_sku(product.id)))
            continue

        existing = {variant_key(row.color, row.size) for row in product.inventory}
        for color, size in matrix:
            if variant_key(color, size) not in existing:
                rows.append(new_inventory_row(product, color, size))
    return rows


def sync_inventory(db: Session, *, expand_variants: bool = False) -> int:
    """Backfill inventory for catalog products that have none.

    Every product without a single inventory row gets one empty row. With
    ``expand_variants`` the declared color/size matrix of every product is
    completed instead. Returns the number of rows inserted; a second run
    inserts nothing.

    Concurrent runs are kept apart by the unique (product_id, variant_key)
    constraint: the losing run rolls back, plans again once, and only
    then gives up.
    """
    for attempt in (1, 2):
        rows = _plan_sync(db, expand_variants)
        if not rows:
            logger.info("Inventory sync: catalog already fully backed.")
            return 0

        db.add_all(rows)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            if attempt == 2:
                raise CollaboratorFailure(
                    "Inventory sync conflicted with a concurrent run.",
                    details={"hint": "Retry the sync."},
                ) from exc
            logger.warning("Inventory sync hit a concurrent insert; planning again.")
            continue

        logger.info(
            "Inventory sync created %d row(s) (expand_variants=%s).",
            len(rows),
            expand_variants,
        )
        return len(rows)
    return 0


__all__ = [
    "create_inventory_item",
    "delete_inventory_item",
    "get_inventory_item",
    "list_inventory",
    "new_inventory_row",
    "sync_inventory",
    "sync_sku",
    "to_inventory_read",
    "update_inventory_item",
    "update_inventory_quantity",
    "variant_sku",
]
