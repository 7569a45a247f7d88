from sqlalchemy import Column, Integer, String, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from inventory.db.types import UtcDateTime


class Order(Base):
    __tablename__ = 'orders'
    order_id = Column(Integer, primary_key=True, autoincrement=False)
    product_id = Column(Integer, ForeignKey('products.product_id', ondelete='RESTRICT'), nullable=False)
    quantity = Column(Integer, nullable=False)
    order_date = Column(UtcDateTime(), nullable=False, default=now_utc)
    status = Column(String(50), nullable=False)

    product = relationship("Product", back_populates="orders", lazy="raise")

    __table_args__ = (
        Index('idx_orders_product_id', 'product_id'),
        CheckConstraint('quantity > 0', name='ck_orders_quantity_positive'),
    )
