# stock_alerts/core/exceptions.py


class StockAlertError(Exception):
    """Base class for errors raised while building low-stock alerts."""


class InvalidInput(StockAlertError, ValueError):
    """Raised before any query is issued when call arguments are unusable."""


class DataAccessError(StockAlertError):
    """The data store failed, or handed back rows the alert builder cannot read."""
