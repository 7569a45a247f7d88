from sqlalchemy import Column, Integer, String, Text, Numeric, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base


class Category(Base):
    __tablename__ = 'categories'
    category_id = Column(Integer, primary_key=True, autoincrement=False)
    category_type = Column(String(255), nullable=False)

    products = relationship("Product", back_populates="category", lazy="raise", passive_deletes="all")


class Supplier(Base):
    __tablename__ = 'suppliers'
    supplier_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    contact_info = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)

    products = relationship("Product", back_populates="supplier", lazy="raise", passive_deletes="all")


class Product(Base):
    __tablename__ = 'products'
    product_id = Column(Integer, primary_key=True, autoincrement=False)
    sku = Column(String(64), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(18, 2), nullable=False, default=0)
    category_id = Column(Integer, ForeignKey('categories.category_id', ondelete='RESTRICT'), nullable=False)
    stock_level = Column(Integer, nullable=False, default=0)
    reorder_level = Column(Integer, nullable=False, default=0)
    # Optional supplier; products without one never appear in the inventory report
    supplier_id = Column(Integer, ForeignKey('suppliers.supplier_id', ondelete='RESTRICT'), nullable=True)

    category = relationship("Category", back_populates="products", lazy="raise")
    supplier = relationship("Supplier", back_populates="products", lazy="raise")
    orders = relationship("Order", back_populates="product", lazy="raise", passive_deletes="all")

    __table_args__ = (
        Index('idx_products_category_id', 'category_id'),
        Index('idx_products_supplier_id', 'supplier_id'),
        CheckConstraint('stock_level >= 0', name='ck_products_stock_level_non_negative'),
        CheckConstraint('reorder_level >= 0', name='ck_products_reorder_level_non_negative'),
    )
