"""
API route modules.
"""

from .admin_routes import router as admin_router
from .notifications_routes import router as notifications_router
from .simulations_routes import router as simulations_router

__all__ = ["admin_router", "notifications_router", "simulations_router"]
