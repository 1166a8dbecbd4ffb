from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from orderdesk.dependencies import get_db, require_auth
from orderdesk.schemas.client import ClientCreate, ClientRead, ClientUpdate
from orderdesk.schemas.order import OrderSummary
from orderdesk.services import client_service
from orderdesk.services.order_service import list_client_orders, to_order_summary

router = APIRouter(prefix="/clients", tags=["Clients"], dependencies=[Depends(require_auth)])


@router.get("", response_model=List[ClientRead])
def list_clients(db: Session = Depends(get_db)):
    return client_service.list_clients(db)


@router.post("", response_model=ClientRead, status_code=201)
def create_client(payload: ClientCreate, db: Session = Depends(get_db)):
    return client_service.create_client(db, payload)


@router.get("/{client_id}", response_model=ClientRead)
def get_client(client_id: str, db: Session = Depends(get_db)):
    return client_service.get_client(db, client_id)


@router.get("/{client_id}/orders", response_model=List[OrderSummary])
def get_client_orders(client_id: str, db: Session = Depends(get_db)):
    return [to_order_summary(order) for order in list_client_orders(db, client_id)]


@router.patch("/{client_id}", response_model=ClientRead)
def update_client(client_id: str, payload: ClientUpdate, db: Session = Depends(get_db)):
    return client_service.update_client(db, client_id, payload)


@router.delete("/{client_id}")
def delete_client(client_id: str, db: Session = Depends(get_db)):
    client_service.delete_client(db, client_id)
    return {"success": True, "message": "Client deleted successfully"}


__all__ = ["router"]
