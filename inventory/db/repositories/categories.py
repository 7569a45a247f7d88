"""
Category repository.

Categories are keyed by a caller-supplied id; products reference them
through a mandatory foreign key.
"""
from __future__ import annotations

from inventory.db import models, schemas
from .base import Repository


class CategoryRepository(Repository[schemas.Category]):
    model = models.Category
    read_schema = schemas.Category
    id_field = "category_id"
    entity_name = "category"
    entity_plural = "categories"
    mutable_fields = ("category_type",)
