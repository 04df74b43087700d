"""Web helper functions."""

from fastapi import Request

from stockscope.core.services.session import AnalysisSession


def get_request_id(request: Request) -> str | None:
    """Read the X-Request-ID header."""
    return request.headers.get("X-Request-ID")


def get_session(request: Request) -> AnalysisSession:
    """Return the analysis session attached to the application."""
    return request.app.state.session
