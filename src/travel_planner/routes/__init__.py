"""API routers."""

from .expenses import router as expenses_router
from .llm import router as llm_router
from .plans import router as plans_router
from .voice import router as voice_router

__all__ = ["expenses_router", "llm_router", "plans_router", "voice_router"]
