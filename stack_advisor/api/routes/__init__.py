"""
StackAdvisor — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .catalog import router as catalog_router
from .sessions import router as sessions_router

__all__ = [
    'health_router',
    'catalog_router',
    'sessions_router',
]
