from fastapi import FastAPI, Depends, Query, Request
from fastapi.responses import JSONResponse

from datetime import date
from typing import Optional
import logging

from inventory.api.dependencies import get_store, get_today, product_payload
from inventory.api.routes import export, products
from inventory.domain.Product_Store import ProductStore
from inventory.events.web_observers import start as start_event_observers, get_events as get_web_events
from inventory.infra.Product_Repository import PersistenceError
from inventory.logic.alerts.analysis import compute_alert_snapshot
from inventory.logic.reporting.valuation import compute_inventory_summary
from inventory.logic.shopping.list_builder import build_shopping_list
from inventory.utilities.constants import SAVE_FAILED_NOTICE

# Logging
logger = logging.getLogger("inventory_app")

# Initialize FastAPI app
app = FastAPI(title="Perishable Inventory API")

# Include routers
app.include_router(products.router)
app.include_router(export.router)


@app.on_event("startup")
def _startup():
    """Register event bus subscribers for web alerts and hydrate the store."""
    start_event_observers()
    logger.info("Web observers for inventory events started")
    get_store()


@app.exception_handler(PersistenceError)
async def _persistence_failed(request: Request, exc: PersistenceError):
    # The in-memory change went through; tell the user it is not saved
    logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": SAVE_FAILED_NOTICE})


# -------------------- API: Alerts --------------------
@app.get('/api/alerts')
def api_alerts(store: ProductStore = Depends(get_store), today: date = Depends(get_today)):
    """Expiring-soon products (notification list) and low-stock count (badge)."""
    snapshot = compute_alert_snapshot(store.snapshot(), today)
    return {
        'expiring_soon': [product_payload(p, today) for p in snapshot['expiring_soon']],
        'expiring_count': snapshot['expiring_count'],
        'low_stock_count': snapshot['low_stock_count'],
    }


@app.get('/api/alerts/events')
def api_alert_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent inventory events (low stock, expiring soon, persistence failures).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Subsequent polls: /api/alerts/events?since=<next_cursor>
    """
    return get_web_events(since)


# -------------------- API: Shopping List --------------------
@app.get('/api/shopping-list')
def api_shopping_list(store: ProductStore = Depends(get_store)):
    items = build_shopping_list(store.snapshot())
    return {"items": items, "count": len(items)}


# -------------------- API: Report --------------------
@app.get('/api/report')
def api_report(store: ProductStore = Depends(get_store), today: date = Depends(get_today)):
    summary = compute_inventory_summary(store.snapshot(), today)
    # Decimal is not JSON serializable; send the exact value as text
    summary['total_value'] = str(summary['total_value'])
    return summary
