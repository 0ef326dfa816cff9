"""
Prompt Architect Routers
"""
from .analysis import router as analysis_router
from .models import router as models_router

__all__ = ["analysis_router", "models_router"]
