# stock_alerts/db/models/product_suppliers.py
from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer

from stock_alerts.db.base import Base


class ProductSupplier(Base):
    """Many-to-many link between products and the suppliers that can source them.

    At most one link per product is expected to carry ``is_primary``; that is
    an upstream data rule and is not enforced by a constraint here.
    """

    __tablename__ = "product_suppliers"

    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), primary_key=True)
    is_primary = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_product_suppliers_primary", "product_id", "is_primary"),
    )
