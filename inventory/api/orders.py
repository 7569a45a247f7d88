"""
Orders API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status

from inventory.db import schemas
from inventory.db.repositories import OrderRepository
from inventory.api.deps import get_order_repository
from inventory.api.results import unwrap, ensure_matching_id

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("/", response_model=List[schemas.Order])
def list_orders(repo: OrderRepository = Depends(get_order_repository)):
    return unwrap(repo.list())


@router.get("/{order_id}", response_model=schemas.Order)
def get_order(order_id: int, repo: OrderRepository = Depends(get_order_repository)):
    return unwrap(repo.get(order_id))


@router.post("/", response_model=schemas.Order, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: schemas.OrderCreate,
    response: Response,
    repo: OrderRepository = Depends(get_order_repository),
):
    created = unwrap(repo.create(payload))
    response.headers["Location"] = f"{router.prefix}/{created.order_id}"
    return created


@router.put("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_order(
    order_id: int,
    payload: schemas.OrderUpdate,
    repo: OrderRepository = Depends(get_order_repository),
):
    ensure_matching_id(order_id, payload.order_id)
    unwrap(repo.update(order_id, payload))


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: int, repo: OrderRepository = Depends(get_order_repository)):
    unwrap(repo.delete(order_id))
