# stock_alerts/db/models/warehouses.py
from sqlalchemy import Column, Integer, String

from stock_alerts.db.base import Base


class Warehouse(Base):
    """A stocking location owned by a single company.

    The company id is the scoping boundary for alert reports: a company only
    ever sees inventory held in its own warehouses.
    """

    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
