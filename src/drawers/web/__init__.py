"""FastAPI REST API for drawer grid layouts.

This module exposes the layout workflows, the panel catalog, presets and
exporters over HTTP. Layouts travel in the ``layout`` query parameter as
share tokens, exactly like share links.

Usage:
    uvicorn drawers.web:app --reload
"""

from drawers.web.app import app, create_app

__all__ = ["app", "create_app"]
