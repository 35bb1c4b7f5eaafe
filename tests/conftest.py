from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from stock_alerts.db.base import build_engine, build_sessionmaker, create_tables
from stock_alerts.db.models.inventory import Inventory
from stock_alerts.db.models.product_suppliers import ProductSupplier
from stock_alerts.db.models.products import Product
from stock_alerts.db.models.sales_order_items import SalesOrderItem
from stock_alerts.db.models.suppliers import Supplier
from stock_alerts.db.models.warehouses import Warehouse

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class Seeder:
    """Small helper for writing fixture rows through a session."""

    def __init__(self, session):
        self.session = session

    async def _add(self, obj):
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def warehouse(self, company_id="acme", name="Main"):
        return await self._add(Warehouse(company_id=company_id, name=name))

    async def product(self, name="Widget", sku="W-1", threshold=10):
        return await self._add(Product(name=name, sku=sku, low_stock_threshold=threshold))

    async def stock(self, warehouse, product, quantity):
        return await self._add(
            Inventory(warehouse_id=warehouse.id, product_id=product.id, quantity=quantity)
        )

    async def sale(self, product, quantity, days_ago, hours_ago=0):
        return await self._add(
            SalesOrderItem(
                product_id=product.id,
                quantity=quantity,
                created_at=NOW - timedelta(days=days_ago, hours=hours_ago),
            )
        )

    async def supplier(self, name="Acme Parts", contact_email="orders@acmeparts.test"):
        return await self._add(Supplier(name=name, contact_email=contact_email))

    async def link(self, product, supplier, is_primary=True):
        return await self._add(
            ProductSupplier(product_id=product.id, supplier_id=supplier.id, is_primary=is_primary)
        )

    async def commit(self):
        await self.session.commit()


@pytest.fixture
def now():
    return NOW


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'alerts.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = build_sessionmaker(engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seed(db):
    return Seeder(db)


@pytest.fixture
def seeder():
    return Seeder
