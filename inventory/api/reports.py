"""
Reports API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends

from inventory.db import schemas
from inventory.db.repositories import ReportRepository
from inventory.api.deps import get_report_repository
from inventory.api.results import unwrap

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/inventoryreport", response_model=List[schemas.InventoryReportRow])
def get_inventory_report(repo: ReportRepository = Depends(get_report_repository)):
    return unwrap(repo.inventory_report())
