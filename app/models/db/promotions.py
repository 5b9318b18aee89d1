"""
Promotion models
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .catalog import Product


class Promotion(Base, TimestampMixin):
    """Promociones ligadas a un único producto"""

    __tablename__ = "promotions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    type = Column(String(30), nullable=False)  # PERCENTAGE_DISCOUNT | BUY_X_GET_Y_FREE
    product_id = Column(UUID(as_uuid=True), ForeignKey("products.id", ondelete="CASCADE"), nullable=False)

    # Percentage discount
    discount_percentage = Column(Numeric(5, 2))  # 15.00 para 15%

    # Buy X get Y free
    buy_quantity = Column(Integer)
    get_quantity = Column(Integer)

    status = Column(String(20), nullable=False, default="VISIBLE")  # VISIBLE | HIDDEN

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="promotions")

    __table_args__ = (
        CheckConstraint("status IN ('VISIBLE', 'HIDDEN')", name="check_promotion_status"),
        CheckConstraint(
            "(type = 'PERCENTAGE_DISCOUNT' AND discount_percentage > 0 AND discount_percentage <= 100"
            " AND buy_quantity IS NULL AND get_quantity IS NULL)"
            " OR (type = 'BUY_X_GET_Y_FREE' AND buy_quantity >= 1 AND get_quantity >= 1"
            " AND discount_percentage IS NULL)",
            name="check_promotion_kind_fields",
        ),
        Index("idx_promotions_product_status", product_id, status),
    )

    def __repr__(self):
        return f"<Promotion(name='{self.name}', type='{self.type}', status='{self.status}')>"
