"""
User repository.

The referenced role is verified before any write; an unknown role id is
reported as a rejected result and nothing is persisted.
"""
from __future__ import annotations

import logging
from typing import Optional

from inventory.db import models, schemas
from inventory.db.results import Result
from .base import Repository

logger = logging.getLogger(__name__)


class UserRepository(Repository[schemas.User]):
    model = models.User
    read_schema = schemas.User
    id_field = "user_id"
    entity_name = "user"
    entity_plural = "users"
    mutable_fields = ("first_name", "last_name", "email", "password_hash", "role_id")

    def _check_references(self, data) -> Optional[Result]:
        role = self.db.query(models.Role.role_id).filter(models.Role.role_id == data.role_id).first()
        if role is None:
            logger.warning("role_id %s does not exist in the roles table.", data.role_id)
            return Result.rejected(f"Invalid role_id: {data.role_id}")
        return None
