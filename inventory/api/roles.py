"""
Roles API endpoints.

Role ids are assigned by the repository; any ``role_id`` in a create body is
ignored.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status

from inventory.db import schemas
from inventory.db.repositories import RoleRepository
from inventory.api.deps import get_role_repository
from inventory.api.results import unwrap, ensure_matching_id

router = APIRouter(prefix="/api/roles", tags=["roles"])


@router.get("/", response_model=List[schemas.Role])
def list_roles(repo: RoleRepository = Depends(get_role_repository)):
    return unwrap(repo.list())


@router.get("/{role_id}", response_model=schemas.Role)
def get_role(role_id: int, repo: RoleRepository = Depends(get_role_repository)):
    return unwrap(repo.get(role_id))


@router.post("/", response_model=schemas.Role, status_code=status.HTTP_201_CREATED)
def create_role(
    payload: schemas.RoleCreate,
    response: Response,
    repo: RoleRepository = Depends(get_role_repository),
):
    created = unwrap(repo.create(payload))
    response.headers["Location"] = f"{router.prefix}/{created.role_id}"
    return created


@router.put("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_role(
    role_id: int,
    payload: schemas.RoleUpdate,
    repo: RoleRepository = Depends(get_role_repository),
):
    ensure_matching_id(role_id, payload.role_id)
    unwrap(repo.update(role_id, payload))


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(role_id: int, repo: RoleRepository = Depends(get_role_repository)):
    unwrap(repo.delete(role_id))
