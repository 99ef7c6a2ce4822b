"""API route exports."""

from .auth import router as auth_router
from .transcriptions import router as transcriptions_router

__all__ = ["auth_router", "transcriptions_router"]
