# stock_alerts/domain/alerts/schemas.py
from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional

class SupplierOut(BaseModel):
    id: int
    name: str
    contact_email: Optional[str] = None

    class Config:
        from_attributes = True

class LowStockAlert(BaseModel):
    product_id: int
    product_name: str
    sku: str
    warehouse_id: int
    warehouse_name: str
    current_stock: int
    threshold: int
    days_until_stockout: Optional[int] = None
    supplier: Optional[SupplierOut] = None

class LowStockReport(BaseModel):
    alerts: List[LowStockAlert]
    total_alerts: int
    lookback_days: int
    generated_at: datetime
