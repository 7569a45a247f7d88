from __future__ import annotations

from typing import Any, Dict

from inventory.db import models, schemas
from inventory.db.models import now_utc
from .base import Repository


class OrderRepository(Repository[schemas.Order]):
    model = models.Order
    read_schema = schemas.Order
    id_field = "order_id"
    entity_name = "order"
    entity_plural = "orders"
    mutable_fields = ("product_id", "quantity", "order_date", "status")

    def _values(self, data) -> Dict[str, Any]:
        values = super()._values(data)
        if values.get("order_date") is None:
            values["order_date"] = now_utc()
        return values
