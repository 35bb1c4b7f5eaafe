from sqlalchemy import Column, ForeignKey, Index, Integer, UniqueConstraint

from stock_alerts.db.base import Base


class Inventory(Base):
    """On-hand quantity of one product at one warehouse."""

    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, autoincrement=True)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("warehouse_id", "product_id", name="uq_inventory_warehouse_product"),
        Index("ix_inventory_product", "product_id"),
    )
