"""
Products API endpoints.

Includes a detail view that returns the product with its category and
supplier resolved in one query.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status

from inventory.db import schemas
from inventory.db.repositories import ProductRepository
from inventory.api.deps import get_product_repository
from inventory.api.results import unwrap, ensure_matching_id

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/", response_model=List[schemas.Product])
def list_products(repo: ProductRepository = Depends(get_product_repository)):
    return unwrap(repo.list())


@router.get("/{product_id}", response_model=schemas.Product)
def get_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    return unwrap(repo.get(product_id))


@router.get("/{product_id}/detail", response_model=schemas.ProductDetail)
def get_product_detail(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    return unwrap(repo.get_detail(product_id))


@router.post("/", response_model=schemas.Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: schemas.ProductCreate,
    response: Response,
    repo: ProductRepository = Depends(get_product_repository),
):
    created = unwrap(repo.create(payload))
    response.headers["Location"] = f"{router.prefix}/{created.product_id}"
    return created


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    product_id: int,
    payload: schemas.ProductUpdate,
    repo: ProductRepository = Depends(get_product_repository),
):
    ensure_matching_id(product_id, payload.product_id)
    unwrap(repo.update(product_id, payload))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    unwrap(repo.delete(product_id))
