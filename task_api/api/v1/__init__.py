"""API v1: routers and dependencies."""

from task_api.api.v1.router import api_router

__all__ = ["api_router"]
