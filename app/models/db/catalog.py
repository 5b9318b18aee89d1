"""
Product catalog models: Products and their size variants
"""

import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .promotions import Promotion


class Product(Base, TimestampMixin):
    """Productos del catálogo"""

    __tablename__ = "products"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    category_id = Column(UUID(as_uuid=True), index=True)
    status = Column(String(20), nullable=False, default="visible")  # visible | hidden
    colors = Column(JSONB, default=list)  # ["red", "blue"]

    # Relationships
    sizes: Mapped[List["ProductSize"]] = relationship(
        "ProductSize",
        back_populates="product",
        order_by="ProductSize.position",
        cascade="all, delete-orphan",
    )
    promotions: Mapped[List["Promotion"]] = relationship("Promotion", back_populates="product")

    __table_args__ = (
        CheckConstraint("status IN ('visible', 'hidden')", name="check_product_status"),
        Index("idx_products_status", status),
    )

    def __repr__(self):
        return f"<Product(name='{self.name}', status='{self.status}')>"


class ProductSize(Base):
    """Talles/variantes de un producto, cada uno con su precio"""

    __tablename__ = "product_sizes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(UUID(as_uuid=True), ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    label = Column(String(50), nullable=False)  # S, M, L, 500ml
    price = Column(Numeric(12, 2), nullable=False)
    position = Column(Integer, nullable=False, default=0)  # display / default order

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="sizes")

    __table_args__ = (
        CheckConstraint("price > 0", name="check_size_price_positive"),
        UniqueConstraint("product_id", "label", name="uq_product_size_label"),
        Index("idx_product_sizes_product", product_id, position),
    )

    def __repr__(self):
        return f"<ProductSize(label='{self.label}', price={self.price})>"
