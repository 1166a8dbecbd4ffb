from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from orderdesk.config import Settings
from orderdesk.dependencies import get_app_settings, get_db, require_auth
from orderdesk.schemas.order import (
    OrderCreate,
    OrderRead,
    OrderStatusResult,
    OrderStatusUpdate,
    OrderSummary,
)
from orderdesk.services import order_service
from orderdesk.services.order_service import to_order_read, to_order_summary

router = APIRouter(prefix="/orders", tags=["Orders"], dependencies=[Depends(require_auth)])


@router.get("", response_model=List[OrderSummary])
def list_orders(db: Session = Depends(get_db)):
    return [to_order_summary(order) for order in order_service.list_orders(db)]


@router.post("", response_model=OrderRead, status_code=201)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    return to_order_read(order_service.create_order(db, payload))


@router.get("/{order_id}", response_model=OrderRead)
def get_order(order_id: str, db: Session = Depends(get_db)):
    return to_order_read(order_service.get_order(db, order_id))


@router.patch("/{order_id}/status", response_model=OrderStatusResult)
def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    order = order_service.update_order_status(
        db,
        order_id,
        payload.status,
        forward_only=settings.ORDER_FORWARD_ONLY,
    )
    return OrderStatusResult(id=order.id, status=order.status)


@router.delete("/{order_id}")
def delete_order(order_id: str, db: Session = Depends(get_db)):
    order_service.delete_order(db, order_id)
    return {"success": True}


__all__ = ["router"]
