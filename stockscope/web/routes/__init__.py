"""
Web API routes
"""

from stockscope.web.routes.health_routes import router as health_router
from stockscope.web.routes.series_routes import router as series_router

__all__ = ["health_router", "series_router"]
