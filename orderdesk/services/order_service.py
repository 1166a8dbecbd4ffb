import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from orderdesk.core.constants import ORDER_STATUS_DRAFT, UNKNOWN_CLIENT_NAME
from orderdesk.core.errors import NotFoundError, ValidationFailure
from orderdesk.core.order_rules import check_status_transition
from orderdesk.core.variant_rules import resolve_variants, validate_line_variant
from orderdesk.models._ids import new_id
from orderdesk.models.client import Client
from orderdesk.models.order import Order, OrderItem
from orderdesk.models.product import Product
from orderdesk.schemas.order import OrderCreate, OrderItemRead, OrderRead, OrderSummary

logger = logging.getLogger(__name__)


def _load_order_query():
    return select(Order).options(
        selectinload(Order.items).selectinload(OrderItem.product),
        selectinload(Order.client),
    )


def to_order_read(order: Order) -> OrderRead:
    items = []
    for item in order.items:
        base = OrderItemRead.model_validate(item).model_dump()
        base["product_name"] = item.product.name if item.product is not None else None
        items.append(OrderItemRead(**base))
    return OrderRead(
        id=order.id,
        client_id=order.client_id,
        customer_name=order.customer_name,
        status=order.status,
        created_at=order.created_at,
        items=items,
    )


def to_order_summary(order: Order) -> OrderSummary:
    client_name = None
    if order.client is not None:
        client_name = order.client.name
    return OrderSummary(
        id=order.id,
        client_id=order.client_id,
        customer_name=order.customer_name,
        status=order.status,
        created_at=order.created_at,
        client_name=client_name or order.customer_name or UNKNOWN_CLIENT_NAME,
        items_count=sum(item.quantity or 0 for item in order.items),
    )


def list_orders(db: Session) -> list[Order]:
    return list(
        db.execute(_load_order_query().order_by(Order.created_at.desc()))
        .scalars()
        .all()
    )


def list_client_orders(db: Session, client_id: str) -> list[Order]:
    if db.get(Client, client_id) is None:
        raise NotFoundError("Client not found", details={"client_id": client_id})
    return list(
        db.execute(
            _load_order_query()
            .where(Order.client_id == client_id)
            .order_by(Order.created_at.desc())
        )
        .scalars()
        .all()
    )


def get_order(db: Session, order_id: str) -> Order:
    order = db.execute(_load_order_query().where(Order.id == order_id)).scalars().first()
    if order is None:
        raise NotFoundError("Order not found", details={"order_id": order_id})
    return order


def _load_products(db: Session, product_ids: set[str]) -> dict[str, Product]:
    products = (
        db.execute(
            select(Product)
            .options(selectinload(Product.inventory))
            .where(Product.id.in_(product_ids))
            .execution_options(populate_existing=True)
        )
        .scalars()
        .all()
    )
    found = {product.id: product for product in products}
    missing = sorted(product_ids - found.keys())
    if missing:
        raise NotFoundError("Product not found", details={"product_ids": missing})
    return found


def create_order(db: Session, payload: OrderCreate) -> Order:
    """Create an order header and its line items in one transaction.

    The header always starts as a draft and snapshots the client's current
    name. If anything fails nothing is written, so there is never a header
    without items.
    """
    client = db.get(Client, payload.client_id)
    if client is None:
        raise NotFoundError("Client not found", details={"client_id": payload.client_id})

    products = _load_products(db, {line.product_id for line in payload.items})

    order = Order(
        id=new_id(),
        client_id=client.id,
        customer_name=client.name,
        status=ORDER_STATUS_DRAFT,
    )
    for index, line in enumerate(payload.items):
        product = products[line.product_id]
        if product.is_archived:
            raise ValidationFailure(
                "Product is archived and cannot be ordered.",
                details={"item": index, "product_id": product.id},
            )
        resolved = resolve_variants(product.available_colors, product.available_sizes, product.inventory)
        try:
            color, size = validate_line_variant(resolved, line.color, line.size)
        except ValidationFailure as exc:
            exc.details = {"item": index, "product_id": product.id, **(exc.details or {})}
            raise
        order.items.append(
            OrderItem(
                product_id=product.id,
                color=color,
                size=size,
                quantity=line.quantity,
                branding_method=line.branding.method,
                branding_position=line.branding.position,
            )
        )

    db.add(order)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Order creation for client %s rolled back.", client.id)
        raise

    logger.info(
        "Created order %s for client %s with %d item(s).",
        order.id,
        client.id,
        len(order.items),
    )
    return get_order(db, order.id)


def update_order_status(
    db: Session,
    order_id: str,
    new_status: str,
    *,
    forward_only: bool = False,
) -> Order:
    order = db.get(Order, order_id)
    if order is None:
        raise NotFoundError("Order not found", details={"order_id": order_id})
    check_status_transition(order.status, new_status, forward_only=forward_only)

    previous = order.status
    order.status = new_status
    db.commit()
    logger.info("Order %s status %s -> %s.", order_id, previous, new_status)
    return order


def delete_order(db: Session, order_id: str) -> None:
    order = db.get(Order, order_id)
    if order is None:
        raise NotFoundError("Order not found", details={"order_id": order_id})

    # Items first so the header delete never trips the foreign key.
    db.execute(delete(OrderItem).where(OrderItem.order_id == order_id))
    db.execute(delete(Order).where(Order.id == order_id))
    db.commit()
    logger.info("Deleted order %s.", order_id)


__all__ = [
    "create_order",
    "delete_order",
    "get_order",
    "list_client_orders",
    "list_orders",
    "to_order_read",
    "to_order_summary",
    "update_order_status",
]
