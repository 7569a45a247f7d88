from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field


class CategoryBase(BaseModel):
    category_type: str = Field(min_length=1, max_length=255)


class CategoryCreate(CategoryBase):
    category_id: int


class CategoryUpdate(CategoryBase):
    # Optional echo of the path id; mismatches are rejected by the API layer
    category_id: int | None = None


class Category(CategoryBase):
    category_id: int
    model_config = ConfigDict(from_attributes=True)


class SupplierBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    contact_info: str | None = Field(default=None, max_length=255)
    address: str | None = None


class SupplierCreate(SupplierBase):
    supplier_id: int


class SupplierUpdate(SupplierBase):
    supplier_id: int | None = None


class Supplier(SupplierBase):
    supplier_id: int
    model_config = ConfigDict(from_attributes=True)


class ProductBase(BaseModel):
    sku: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    category_id: int
    stock_level: int = Field(default=0, ge=0)
    reorder_level: int = Field(default=0, ge=0)
    supplier_id: int | None = None


class ProductCreate(ProductBase):
    product_id: int


class ProductUpdate(ProductBase):
    product_id: int | None = None


class Product(ProductBase):
    product_id: int
    model_config = ConfigDict(from_attributes=True)


class ProductDetail(Product):
    """Product with its category and optional supplier loaded by an explicit join."""
    category: Category
    supplier: Supplier | None = None
