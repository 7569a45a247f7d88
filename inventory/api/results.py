"""
Translate repository results into HTTP responses.

not found -> 404, rejected reference -> 400, storage fault -> 500.
"""
from typing import Optional, TypeVar

from fastapi import HTTPException, status

from inventory.db.results import Outcome, Result

T = TypeVar("T")

_STATUS_BY_OUTCOME = {
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.INVALID: status.HTTP_400_BAD_REQUEST,
    Outcome.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def unwrap(result: Result[T]) -> T:
    """Return the value of a successful result or raise the matching HTTPException."""
    if result.ok:
        return result.value
    # Storage failures stay opaque; the cause is already in the logs
    raise HTTPException(status_code=_STATUS_BY_OUTCOME[result.outcome], detail=result.message)


def ensure_matching_id(path_id: int, payload_id: Optional[int]) -> None:
    if payload_id is not None and payload_id != path_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"ID mismatch: path has {path_id}, payload has {payload_id}",
        )
