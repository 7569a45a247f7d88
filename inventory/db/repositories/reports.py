"""
Inventory report query.

Inner-joins suppliers to their products and those products to their orders,
so products without a supplier or without orders never appear.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory.db import models, schemas
from inventory.db.results import Result

logger = logging.getLogger(__name__)


class ReportRepository:
    def __init__(self, db: Session):
        self.db = db

    def inventory_report(self) -> Result[List[schemas.InventoryReportRow]]:
        logger.info("Building inventory report.")
        try:
            rows = (
                self.db.query(
                    models.Supplier.supplier_id,
                    models.Supplier.name.label("supplier_name"),
                    models.Product.product_id,
                    models.Product.stock_level,
                    models.Product.reorder_level,
                    models.Order.quantity,
                )
                .select_from(models.Supplier)
                .join(models.Product, models.Product.supplier_id == models.Supplier.supplier_id)
                .join(models.Order, models.Order.product_id == models.Product.product_id)
                .order_by(models.Supplier.supplier_id, models.Product.product_id, models.Order.order_id)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("storage_error: operation=report entity=inventory_report")
            return Result.storage_error("Failed to build inventory report", e)
        if not rows:
            logger.warning("No report data available.")
            return Result.missing("No report data available.")
        return Result.success([schemas.InventoryReportRow(**row._mapping) for row in rows])
