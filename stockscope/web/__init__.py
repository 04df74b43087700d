"""
Web API module - FastAPI service
"""

from stockscope.web.app import create_app
from stockscope.web.models import APIResponse, ErrorResponse
from stockscope.web.routes import health_router, series_router

__all__ = ["create_app", "health_router", "series_router", "APIResponse", "ErrorResponse"]
