"""
FastAPI dependencies shared by the API routers.
"""

from fastapi import Request

from color_service.services.color_registry import ColorRegistry


def get_color_registry(request: Request) -> ColorRegistry:
    """Return the registry created for this application at startup."""
    return request.app.state.color_registry
