from typing import List

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from orderdesk.dependencies import get_db, require_auth
from orderdesk.schemas.product import (
    ProductAssetRead,
    ProductAssetUpsert,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from orderdesk.services import product_service
from orderdesk.services.product_service import to_product_read

router = APIRouter(prefix="/products", tags=["Products"], dependencies=[Depends(require_auth)])


@router.get("", response_model=List[ProductRead])
def list_products(
    include_archived: bool = Query(False, description="Also return archived products"),
    db: Session = Depends(get_db),
):
    products = product_service.list_products(db, include_archived=include_archived)
    return [to_product_read(product) for product in products]


@router.post("", response_model=ProductRead, status_code=201)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return to_product_read(product_service.create_product(db, payload))


@router.post("/batch", response_model=List[ProductRead], status_code=201)
def create_products(payload: List[ProductCreate], db: Session = Depends(get_db)):
    return [to_product_read(product) for product in product_service.create_products(db, payload)]


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: str, db: Session = Depends(get_db)):
    return to_product_read(product_service.get_product(db, product_id))


@router.put("/{product_id}", response_model=ProductRead)
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    return to_product_read(product_service.update_product(db, product_id, payload))


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    product_service.archive_product(db, product_id)
    return Response(status_code=204)


@router.put("/{product_id}/assets", response_model=ProductAssetRead)
def upsert_product_asset(
    product_id: str,
    payload: ProductAssetUpsert,
    db: Session = Depends(get_db),
):
    return product_service.upsert_product_asset(db, product_id, payload)


__all__ = ["router"]
