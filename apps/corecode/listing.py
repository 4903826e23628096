"""
Public listings with literal fallback data.

When the backing store cannot be read, a listing substitutes a fixed demo
data set instead of an error page. The substitution is logged, flagged on the
result and reported to administrators, but never shown to visitors.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from django.conf import settings
from django.core.cache import cache

from .gateway import GatewayError, get_gateway

logger = logging.getLogger(__name__)


@dataclass
class Listing:
    table: str
    items: List[Any] = field(default_factory=list)
    is_fallback: bool = False
    error: Optional[str] = None

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


def as_rows(model, records):
    """Unsaved model instances built from literal dicts"""
    return [model(**record) for record in records]


def fetch_listing(table, fallback, order_by="-created_at", gateway=None, **filters):
    """
    Read all rows of ``table``; on any gateway failure return ``fallback`` instead.

    An empty table is a successful read and yields an empty listing.
    """
    gateway = gateway or get_gateway()
    try:
        items = gateway.select(table, order_by=order_by, **filters)
    except GatewayError as e:
        logger.warning(f"Listing '{table}' fell back to demo data: {e}")
        notify_fallback(table, str(e))
        items = as_rows(gateway.model_for(table), fallback)
        return Listing(table=table, items=items, is_fallback=True, error=str(e))
    return Listing(table=table, items=items)


def notify_fallback(table, error):
    """Queue one alert per table per FALLBACK_ALERT_INTERVAL"""
    interval = getattr(settings, "FALLBACK_ALERT_INTERVAL", 3600)
    if interval <= 0:
        return
    key = f"content-fallback-alert:{table}"
    if not cache.add(key, True, timeout=interval):
        return

    from tasks import dispatch
    from tasks.system_tasks import content_fallback_alert_task

    try:
        dispatch(content_fallback_alert_task, table, error)
    except Exception as e:
        logger.error(f"Failed to queue fallback alert for '{table}': {e}")
        cache.delete(key)
