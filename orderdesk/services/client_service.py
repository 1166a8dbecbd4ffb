import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from orderdesk.core.errors import NotFoundError, ReferentialConflict
from orderdesk.models.client import Client
from orderdesk.models.order import Order
from orderdesk.schemas.client import ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


def list_clients(db: Session) -> list[Client]:
    return list(
        db.execute(select(Client).order_by(Client.created_at.desc(), Client.name))
        .scalars()
        .all()
    )


def get_client(db: Session, client_id: str) -> Client:
    client = db.get(Client, client_id)
    if client is None:
        raise NotFoundError("Client not found", details={"client_id": client_id})
    return client


def create_client(db: Session, payload: ClientCreate) -> Client:
    client = Client(**payload.model_dump())
    db.add(client)
    db.commit()
    db.refresh(client)
    logger.info("Created client %s (%s).", client.id, client.name)
    return client


def update_client(db: Session, client_id: str, payload: ClientUpdate) -> Client:
    client = get_client(db, client_id)
    for key, value in payload.model_dump(exclude_unset=True).items():
        if key == "name" and value is None:
            continue
        setattr(client, key, value)
    db.commit()
    db.refresh(client)
    return client


def count_client_orders(db: Session, client_id: str) -> int:
    return db.execute(
        select(func.count(Order.id)).where(Order.client_id == client_id)
    ).scalar_one()


def delete_client(db: Session, client_id: str) -> None:
    client = get_client(db, client_id)
    order_count = count_client_orders(db, client_id)
    if order_count > 0:
        raise ReferentialConflict(
            "Client has existing orders and cannot be deleted.",
            details={"client_id": client_id, "orders": order_count},
        )
    db.delete(client)
    db.commit()
    logger.info("Deleted client %s.", client_id)


__all__ = [
    "count_client_orders",
    "create_client",
    "delete_client",
    "get_client",
    "list_clients",
    "update_client",
]
