"""API routers for the REST API."""

from worktops.web.routers.drawings import router as drawings_router
from worktops.web.routers.validate import router as validate_router

__all__ = [
    "drawings_router",
    "validate_router",
]
