
from datetime import datetime
from typing import List, Mapping
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import and_, func, select

from stock_alerts.db.models.inventory import Inventory
from stock_alerts.db.models.product_suppliers import ProductSupplier
from stock_alerts.db.models.products import Product
from stock_alerts.db.models.sales_order_items import SalesOrderItem
from stock_alerts.db.models.suppliers import Supplier
from stock_alerts.db.models.warehouses import Warehouse


def recent_sales_subquery(since: datetime):
    """Per-product units sold on or after ``since``.

    Products without a sale in the window have no row at all, so an inner
    join against this subquery is also the "sold recently" existence check.
    """
    return (
        select(
            SalesOrderItem.product_id.label("product_id"),
            func.coalesce(func.sum(SalesOrderItem.quantity), 0).label("recent_sales_total"),
        )
        .where(SalesOrderItem.created_at >= since)
        .group_by(SalesOrderItem.product_id)
        .subquery("recent_sales")
    )


def primary_supplier_subquery():
    # MIN() keeps the pick deterministic if upstream flagged several links as primary
    return (
        select(
            ProductSupplier.product_id.label("product_id"),
            func.min(ProductSupplier.supplier_id).label("supplier_id"),
        )
        .where(ProductSupplier.is_primary.is_(True))
        .group_by(ProductSupplier.product_id)
        .subquery("primary_supplier")
    )


async def fetch_low_stock_rows(
    db: AsyncSession,
    company_id: str,
    since: datetime,
) -> List[Mapping]:
    recent_sales = recent_sales_subquery(since)
    primary = primary_supplier_subquery()

    stmt = (
        select(
            Product.id.label("product_id"),
            Product.name.label("product_name"),
            Product.sku.label("sku"),
            Warehouse.id.label("warehouse_id"),
            Warehouse.name.label("warehouse_name"),
            Inventory.quantity.label("current_stock"),
            Product.low_stock_threshold.label("threshold"),
            recent_sales.c.recent_sales_total,
            Supplier.id.label("supplier_id"),
            Supplier.name.label("supplier_name"),
            Supplier.contact_email.label("supplier_contact_email"),
        )
        .select_from(Inventory)
        .join(Warehouse, Inventory.warehouse_id == Warehouse.id)
        .join(Product, Inventory.product_id == Product.id)
        .join(recent_sales, recent_sales.c.product_id == Product.id)
        .outerjoin(primary, primary.c.product_id == Product.id)
        .outerjoin(Supplier, Supplier.id == primary.c.supplier_id)
        .where(
            and_(
                Warehouse.company_id == company_id,
                Product.low_stock_threshold > Inventory.quantity,
                Inventory.quantity > 0,
            )
        )
        .order_by(Warehouse.id, Product.id)
    )

    result = await db.execute(stmt)
    rows = result.mappings().all()
    return rows
