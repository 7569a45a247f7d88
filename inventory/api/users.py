"""
Users API endpoints.

Role data is stored with each user but not used for authorization.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status

from inventory.db import schemas
from inventory.db.repositories import UserRepository
from inventory.api.deps import get_user_repository
from inventory.api.results import unwrap, ensure_matching_id

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/", response_model=List[schemas.User])
def list_users(repo: UserRepository = Depends(get_user_repository)):
    return unwrap(repo.list())


@router.get("/{user_id}", response_model=schemas.User)
def get_user(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    return unwrap(repo.get(user_id))


@router.post("/", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: schemas.UserCreate,
    response: Response,
    repo: UserRepository = Depends(get_user_repository),
):
    created = unwrap(repo.create(payload))
    response.headers["Location"] = f"{router.prefix}/{created.user_id}"
    return created


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user(
    user_id: int,
    payload: schemas.UserUpdate,
    repo: UserRepository = Depends(get_user_repository),
):
    ensure_matching_id(user_id, payload.user_id)
    unwrap(repo.update(user_id, payload))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    unwrap(repo.delete(user_id))
