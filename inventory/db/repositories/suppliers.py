from __future__ import annotations

from inventory.db import models, schemas
from .base import Repository


class SupplierRepository(Repository[schemas.Supplier]):
    model = models.Supplier
    read_schema = schemas.Supplier
    id_field = "supplier_id"
    entity_name = "supplier"
    entity_plural = "suppliers"
    mutable_fields = ("name", "contact_info", "address")
