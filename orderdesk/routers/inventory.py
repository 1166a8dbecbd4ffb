from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from orderdesk.dependencies import get_db, require_auth
from orderdesk.schemas.inventory import (
    InventoryCreate,
    InventoryQuantityUpdate,
    InventoryRead,
    InventoryUpdate,
    SyncResult,
)
from orderdesk.services import inventory_service
from orderdesk.services.inventory_service import to_inventory_read

router = APIRouter(prefix="/inventory", tags=["Inventory"], dependencies=[Depends(require_auth)])


@router.get("", response_model=List[InventoryRead])
def list_inventory(db: Session = Depends(get_db)):
    return [to_inventory_read(item) for item in inventory_service.list_inventory(db)]


@router.post("", response_model=InventoryRead, status_code=201)
def create_inventory_item(payload: InventoryCreate, db: Session = Depends(get_db)):
    return to_inventory_read(inventory_service.create_inventory_item(db, payload))


@router.post("/sync", response_model=SyncResult)
def sync_inventory(
    expand_variants: bool = Query(False, description="Also backfill missing declared color/size combinations"),
    db: Session = Depends(get_db),
):
    created = inventory_service.sync_inventory(db, expand_variants=expand_variants)
    if created:
        message = "Created {} inventory row(s).".format(created)
    else:
        message = "Inventory already in sync with the product catalog."
    return SyncResult(created=created, expanded_variants=expand_variants, message=message)


@router.put("/{item_id}", response_model=InventoryRead)
def update_inventory_item(item_id: str, payload: InventoryUpdate, db: Session = Depends(get_db)):
    return to_inventory_read(inventory_service.update_inventory_item(db, item_id, payload))


@router.patch("/{item_id}/quantity", response_model=InventoryRead)
def update_inventory_quantity(
    item_id: str,
    payload: InventoryQuantityUpdate,
    db: Session = Depends(get_db),
):
    return to_inventory_read(inventory_service.update_inventory_quantity(db, item_id, payload.quantity))


@router.delete("/{item_id}")
def delete_inventory_item(item_id: str, db: Session = Depends(get_db)):
    inventory_service.delete_inventory_item(db, item_id)
    return {"success": True}


__all__ = ["router"]
