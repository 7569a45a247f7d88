"""
Suppliers API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status

from inventory.db import schemas
from inventory.db.repositories import SupplierRepository
from inventory.api.deps import get_supplier_repository
from inventory.api.results import unwrap, ensure_matching_id

router = APIRouter(prefix="/api/suppliers", tags=["suppliers"])


@router.get("/", response_model=List[schemas.Supplier])
def list_suppliers(repo: SupplierRepository = Depends(get_supplier_repository)):
    return unwrap(repo.list())


@router.get("/{supplier_id}", response_model=schemas.Supplier)
def get_supplier(supplier_id: int, repo: SupplierRepository = Depends(get_supplier_repository)):
    return unwrap(repo.get(supplier_id))


@router.post("/", response_model=schemas.Supplier, status_code=status.HTTP_201_CREATED)
def create_supplier(
    payload: schemas.SupplierCreate,
    response: Response,
    repo: SupplierRepository = Depends(get_supplier_repository),
):
    created = unwrap(repo.create(payload))
    response.headers["Location"] = f"{router.prefix}/{created.supplier_id}"
    return created


@router.put("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_supplier(
    supplier_id: int,
    payload: schemas.SupplierUpdate,
    repo: SupplierRepository = Depends(get_supplier_repository),
):
    ensure_matching_id(supplier_id, payload.supplier_id)
    unwrap(repo.update(supplier_id, payload))


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_supplier(supplier_id: int, repo: SupplierRepository = Depends(get_supplier_repository)):
    unwrap(repo.delete(supplier_id))
