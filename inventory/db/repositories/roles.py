"""
Role repository.

Unlike every other entity, role ids are computed as ``max(role_id) + 1``;
an id in the create payload is ignored.
"""
from __future__ import annotations

from inventory.db import models, schemas
from inventory.db.identifiers import IdentifierPolicy
from .base import Repository


class RoleRepository(Repository[schemas.Role]):
    model = models.Role
    read_schema = schemas.Role
    id_field = "role_id"
    entity_name = "role"
    entity_plural = "roles"
    mutable_fields = ("role_name",)
    identifier_policy = IdentifierPolicy.MAX_PLUS_ONE
