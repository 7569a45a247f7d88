from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class OrderBase(BaseModel):
    product_id: int
    quantity: int = Field(gt=0)
    status: str = Field(min_length=1, max_length=50)


class OrderCreate(OrderBase):
    order_id: int
    # Defaults to the insert time when omitted
    order_date: datetime | None = None


class OrderUpdate(OrderBase):
    order_id: int | None = None
    order_date: datetime


class Order(OrderBase):
    order_id: int
    order_date: datetime
    model_config = ConfigDict(from_attributes=True)
