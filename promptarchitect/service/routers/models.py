"""
Models Router - target model catalog and token estimates
"""
from fastapi import APIRouter
from typing import Optional
from pydantic import BaseModel

from ... import config
from ...connectors.adapters import list_adapters
from ...engine.tokens import estimate_tokens, get_ratio

router = APIRouter(prefix="/api", tags=["models"])


class TokenRequest(BaseModel):
    text: str
    model: Optional[str] = None


@router.get("/models")
async def get_models():
    """List supported target models."""
    return {"models": list_adapters(), "default": config.DEFAULT_MODEL}


@router.post("/tokens")
async def count_tokens(request: TokenRequest):
    """Estimate tokens for a piece of text."""
    model = request.model or config.DEFAULT_MODEL
    return {
        "model": model,
        "tokens": estimate_tokens(request.text, model),
        "ratio": get_ratio(model),
        "chars": len(request.text),
    }
