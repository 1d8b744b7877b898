"""FastAPI REST API for worktop drawings.

This module provides a REST API for generating worktop drawings, validating
configurations, and exporting to the registered formats.

Usage:
    uvicorn worktops.web:app --reload
"""

from worktops.web.app import app, create_app

__all__ = ["app", "create_app"]
