"""
Product repository.

Besides the shared CRUD contract, exposes `get_detail`, which loads the
product's category and optional supplier through an explicit join instead
of relationship navigation.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from inventory.db import models, schemas
from inventory.db.results import Result
from .base import Repository

logger = logging.getLogger(__name__)


class ProductRepository(Repository[schemas.Product]):
    model = models.Product
    read_schema = schemas.Product
    id_field = "product_id"
    entity_name = "product"
    entity_plural = "products"
    mutable_fields = (
        "sku",
        "name",
        "description",
        "price",
        "category_id",
        "stock_level",
        "reorder_level",
        "supplier_id",
    )

    def get_detail(self, product_id: int) -> Result[schemas.ProductDetail]:
        logger.info("Fetching product detail with ID %s.", product_id)
        try:
            row = (
                self._query()
                .options(joinedload(models.Product.category), joinedload(models.Product.supplier))
                .filter(models.Product.product_id == product_id)
                .first()
            )
        except SQLAlchemyError as e:
            return self._storage_error("get detail of", e, product_id)
        if row is None:
            return self._not_found(product_id)
        return Result.success(schemas.ProductDetail.model_validate(row))
