# stock_alerts/db/models/products.py
from sqlalchemy import Column, Integer, String

from stock_alerts.db.base import Base


class Product(Base):
    """A sellable product with its own low-stock rule.

    ``low_stock_threshold`` is a per-product business setting; stock strictly
    below it is considered insufficient.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    sku = Column(String, nullable=False, unique=True)
    low_stock_threshold = Column(Integer, nullable=False, default=0)
