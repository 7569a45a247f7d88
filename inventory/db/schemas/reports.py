from pydantic import BaseModel, ConfigDict


class InventoryReportRow(BaseModel):
    """One supplier/product/order match from the inventory report join."""
    supplier_id: int
    supplier_name: str
    product_id: int
    stock_level: int
    reorder_level: int
    quantity: int
    model_config = ConfigDict(from_attributes=True)
