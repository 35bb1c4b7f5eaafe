# stock_alerts/db/models/sales_order_items.py
from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.sql import func

from stock_alerts.db.base import Base


class SalesOrderItem(Base):
    """A single sold product line; the demand history behind sales velocity.

    Rows are immutable once written. Only ``product_id``, ``quantity`` and
    ``created_at`` are read when projecting stockouts.
    """

    __tablename__ = "sales_order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_sales_order_items_product_created", "product_id", "created_at"),
    )
