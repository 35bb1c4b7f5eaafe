# stock_alerts/domain/alerts/service.py
import logging
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Mapping, Optional, Union

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stock_alerts.core.config import settings
from stock_alerts.core.exceptions import DataAccessError, InvalidInput
from stock_alerts.db.repositories.inventory import fetch_low_stock_rows
from .schemas import LowStockAlert, LowStockReport, SupplierOut

logger = logging.getLogger(__name__)


def normalize_company_id(company_id: Union[str, int, None]) -> str:
    # bool is an int subclass, but True is never a company
    if company_id is None or isinstance(company_id, bool):
        raise InvalidInput("company_id is required")
    if isinstance(company_id, int):
        return str(company_id)
    if not isinstance(company_id, str):
        raise InvalidInput(f"company_id must be a string or integer, got {type(company_id).__name__}")
    if not company_id.strip():
        raise InvalidInput("company_id must not be blank")
    return company_id


def _check_lookback_days(lookback_days) -> int:
    if isinstance(lookback_days, bool) or not isinstance(lookback_days, int) or lookback_days <= 0:
        raise InvalidInput(f"lookback_days must be a positive integer, got {lookback_days!r}")
    return lookback_days


def as_utc(now: Optional[datetime]) -> datetime:
    """Current UTC time, or ``now`` converted to UTC; naive values are taken as UTC."""
    if now is None:
        return datetime.now(timezone.utc)
    if not isinstance(now, datetime):
        raise InvalidInput(f"now must be a datetime, got {type(now).__name__}")
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    # sale timestamps are stored and compared as UTC wall-clock values
    return now.astimezone(timezone.utc)


def calculate_days_until_stockout(
    current_stock,
    recent_sales_total,
    lookback_days: int,
) -> Optional[int]:
    """Days of stock left at the average daily sales rate of the window.

    Halves round up, so 1.5 days becomes 2. Returns None when nothing was
    sold in the window (no velocity, no projection).
    """
    avg_daily_sales = Decimal(str(recent_sales_total)) / Decimal(lookback_days)
    if avg_daily_sales <= 0:
        return None

    days = Decimal(str(current_stock)) / avg_daily_sales
    return int(days.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_supplier(row: Mapping) -> Optional[SupplierOut]:
    # a product without a primary supplier is a normal state
    if row["supplier_id"] is None:
        return None

    return SupplierOut(
        id=row["supplier_id"],
        name=row["supplier_name"],
        contact_email=row["supplier_contact_email"],
    )


def build_alert(row: Mapping, lookback_days: int) -> LowStockAlert:
    """Shape one flat joined row into a LowStockAlert."""
    try:
        return LowStockAlert(
            product_id=row["product_id"],
            product_name=row["product_name"],
            sku=row["sku"],
            warehouse_id=row["warehouse_id"],
            warehouse_name=row["warehouse_name"],
            current_stock=row["current_stock"],
            threshold=row["threshold"],
            days_until_stockout=calculate_days_until_stockout(
                row["current_stock"], row["recent_sales_total"], lookback_days
            ),
            supplier=build_supplier(row),
        )
    except KeyError as exc:
        raise DataAccessError(f"Inventory row is missing column {exc.args[0]!r}") from exc
    except (ValidationError, ArithmeticError, TypeError, ValueError) as exc:
        raise DataAccessError(f"Inventory row could not be read: {exc}") from exc


async def generate_low_stock_alerts(
    db: AsyncSession,
    company_id: Union[str, int],
    *,
    now: Optional[datetime] = None,
    lookback_days: Optional[int] = None,
) -> List[LowStockAlert]:
    company_id = normalize_company_id(company_id)
    if lookback_days is None:
        lookback_days = settings.ALERT_LOOKBACK_DAYS
    lookback_days = _check_lookback_days(lookback_days)

    now = as_utc(now)
    since = now - timedelta(days=lookback_days)
    logger.debug("Low-stock scan for company %s, sales since %s", company_id, since.isoformat())

    try:
        rows = await fetch_low_stock_rows(db, company_id, since)
    except SQLAlchemyError as exc:
        logger.exception("Low-stock query failed for company %s", company_id)
        raise DataAccessError(f"Low-stock query failed for company {company_id}") from exc

    alerts = [build_alert(row, lookback_days) for row in rows]
    logger.info("Company %s has %d low-stock alert(s)", company_id, len(alerts))
    return alerts


async def build_low_stock_report(
    db: AsyncSession,
    company_id: Union[str, int],
    *,
    now: Optional[datetime] = None,
    lookback_days: Optional[int] = None,
) -> LowStockReport:
    now = as_utc(now)
    if lookback_days is None:
        lookback_days = settings.ALERT_LOOKBACK_DAYS

    alerts = await generate_low_stock_alerts(
        db, company_id, now=now, lookback_days=lookback_days
    )
    return LowStockReport(
        alerts=alerts,
        total_alerts=len(alerts),
        lookback_days=lookback_days,
        generated_at=now,
    )
