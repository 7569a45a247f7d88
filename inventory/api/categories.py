"""
Categories API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status

from inventory.db import schemas
from inventory.db.repositories import CategoryRepository
from inventory.api.deps import get_category_repository
from inventory.api.results import unwrap, ensure_matching_id

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("/", response_model=List[schemas.Category])
def list_categories(repo: CategoryRepository = Depends(get_category_repository)):
    return unwrap(repo.list())


@router.get("/{category_id}", response_model=schemas.Category)
def get_category(category_id: int, repo: CategoryRepository = Depends(get_category_repository)):
    return unwrap(repo.get(category_id))


@router.post("/", response_model=schemas.Category, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: schemas.CategoryCreate,
    response: Response,
    repo: CategoryRepository = Depends(get_category_repository),
):
    created = unwrap(repo.create(payload))
    response.headers["Location"] = f"{router.prefix}/{created.category_id}"
    return created


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_category(
    category_id: int,
    payload: schemas.CategoryUpdate,
    repo: CategoryRepository = Depends(get_category_repository),
):
    ensure_matching_id(category_id, payload.category_id)
    unwrap(repo.update(category_id, payload))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, repo: CategoryRepository = Depends(get_category_repository)):
    unwrap(repo.delete(category_id))
