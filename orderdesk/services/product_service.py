import logging
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from orderdesk.core.constants import DEFAULT_MIN_QUANTITY
from orderdesk.core.errors import NotFoundError
from orderdesk.core.stock_rules import summarize_stock, tracking_state
from orderdesk.core.variant_rules import (
    build_variant_matrix,
    normalize_dimension,
    resolve_variants,
)
from orderdesk.models._ids import new_id
from orderdesk.models.inventory import InventoryItem
from orderdesk.models.product import Product
from orderdesk.models.product_asset import ProductAsset
from orderdesk.schemas.product import (
    ProductAssetUpsert,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from orderdesk.services.inventory_service import new_inventory_row

logger = logging.getLogger(__name__)


def _with_stock(query):
    return query.options(
        selectinload(Product.inventory),
        selectinload(Product.assets),
    ).execution_options(populate_existing=True)


def to_product_read(product: Product) -> ProductRead:
    summary = summarize_stock(product.inventory)
    resolved = resolve_variants(
        product.available_colors,
        product.available_sizes,
        product.inventory,
    )
    base = ProductRead.model_validate(product).model_dump()
    base["stock"] = summary.stock
    base["is_low_stock"] = summary.is_low_stock
    base["inventory_count"] = summary.inventory_count
    base["tracking"] = tracking_state(summary)
    base["selectable_colors"] = list(resolved.colors)
    base["selectable_sizes"] = list(resolved.sizes)
    return ProductRead(**base)


def list_products(db: Session, *, include_archived: bool = False) -> list[Product]:
    query = _with_stock(select(Product))
    if not include_archived:
        query = query.where(Product.is_archived.is_(False))
    return list(db.execute(query.order_by(Product.name)).scalars().all())


def get_product(db: Session, product_id: str) -> Product:
    product = (
        db.execute(_with_stock(select(Product)).where(Product.id == product_id))
        .scalars()
        .first()
    )
    if product is None:
        raise NotFoundError("Product not found", details={"product_id": product_id})
    return product


def provision_variants(
    product: Product,
    *,
    min_quantity: int = DEFAULT_MIN_QUANTITY,
) -> list[InventoryItem]:
    """Inventory rows for every declared (color, size) combination.

    Every row starts empty; the product id must already be assigned.
    """
    return [
        new_inventory_row(product, color, size, min_quantity=min_quantity)
        for color, size in build_variant_matrix(product.available_colors, product.available_sizes)
    ]


def _new_product(payload: ProductCreate) -> Product:
    values = payload.model_dump()
    values["available_colors"] = normalize_dimension(values.get("available_colors"))
    values["available_sizes"] = normalize_dimension(values.get("available_sizes"))
    product = Product(id=new_id(), is_archived=False, **values)
    product.inventory = provision_variants(product)
    return product


def create_product(db: Session, payload: ProductCreate) -> Product:
    product = _new_product(payload)
    db.add(product)
    db.commit()
    logger.info(
        "Created product %s (%s) with %d inventory row(s).",
        product.id,
        product.name,
        len(product.inventory),
    )
    return get_product(db, product.id)


def create_products(db: Session, payloads: Iterable[ProductCreate]) -> list[Product]:
    products = [_new_product(payload) for payload in payloads]
    if not products:
        return []
    db.add_all(products)
    db.commit()
    logger.info("Imported %d product(s).", len(products))

    ids = [product.id for product in products]
    loaded = {
        product.id: product
        for product in db.execute(_with_stock(select(Product)).where(Product.id.in_(ids)))
        .scalars()
        .all()
    }
    return [loaded[product_id] for product_id in ids]


def update_product(db: Session, product_id: str, payload: ProductUpdate) -> Product:
    product = get_product(db, product_id)
    values = payload.model_dump(exclude_unset=True)
    for key in ("available_colors", "available_sizes"):
        if key in values:
            values[key] = normalize_dimension(values[key])
    for key, value in values.items():
        if key in ("name", "base_price", "is_archived") and value is None:
            continue
        setattr(product, key, value)
    db.commit()
    return get_product(db, product_id)


def archive_product(db: Session, product_id: str) -> None:
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product not found", details={"product_id": product_id})
    product.is_archived = True
    db.commit()
    logger.info("Archived product %s.", product_id)


def _find_asset(db: Session, product_id: str, view: str, color: Optional[str]) -> Optional[ProductAsset]:
    query = select(ProductAsset).where(
        ProductAsset.product_id == product_id,
        ProductAsset.view == view,
    )
    if color is None:
        query = query.where(ProductAsset.color.is_(None))
    else:
        query = query.where(ProductAsset.color == color)
    return db.execute(query).scalars().first()


def upsert_product_asset(db: Session, product_id: str, payload: ProductAssetUpsert) -> ProductAsset:
    if db.get(Product, product_id) is None:
        raise NotFoundError("Product not found", details={"product_id": product_id})

    color = payload.color or None
    asset = _find_asset(db, product_id, payload.view, color)
    if asset is None:
        asset = ProductAsset(product_id=product_id, view=payload.view, color=color)
        db.add(asset)
    asset.base_image = payload.base_image
    db.commit()
    db.refresh(asset)
    return asset


__all__ = [
    "archive_product",
    "create_product",
    "create_products",
    "get_product",
    "list_products",
    "provision_variants",
    "to_product_read",
    "update_product",
    "upsert_product_asset",
]
