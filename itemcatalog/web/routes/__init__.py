"""Item catalog web route modules.

Each module exports a `router` object (APIRouter instance) that
itemcatalog.web.app includes. Shared dependencies live in
itemcatalog.web.dependencies and shared models in itemcatalog.web.models.

Usage:
    from itemcatalog.web.routes import items
    app.include_router(items.router)
"""

from itemcatalog.web.routes import health, history, items

__all__ = [
    "items",
    "history",
    "health",
]
