"""
API module.
"""

from .routes import admin_router, notifications_router, simulations_router

__all__ = [
    "admin_router",
    "notifications_router",
    "simulations_router",
]
