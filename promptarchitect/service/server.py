#!/usr/bin/env python3
"""
Prompt Architect - HTTP Service
HTTP API on localhost:9997

Architecture:
- This is a THIN HTTP layer
- ALL analysis and rewriting goes through core/
- Input gating (empty / too-short prompts) happens here, never in core

Endpoints:
- /api/health
- /api/errors           -> error_handler stats
- /api/analyze          -> core.analyzer.full_report()
- /api/optimize         -> core.optimizer.PromptOptimizer
- /api/questions        -> core.advisor.suggest_questions()
- /api/score            -> core.heuristics.calculate_quick_score()
- /api/compose          -> core.composer.compose_prompt()
- /api/models, /api/tokens
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .. import config
from ..error_handler import get_error_handler
from ..validation_utils import ValidationError
from .routers import analysis_router, models_router

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(message)s'
)
logger = logging.getLogger("promptarchitect")

HOST = config.HOST
PORT = config.PORT
VERSION = config.VERSION


@asynccontextmanager
async def lifespan(app):
    logger.info(f"Prompt Architect v{VERSION} started on {HOST}:{PORT}")
    logger.info(f"Defaults: model={config.DEFAULT_MODEL} level={config.DEFAULT_LEVEL} style={config.DEFAULT_STYLE}")
    yield
    logger.info("Prompt Architect shutting down")


app = FastAPI(title="Prompt Architect", version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis_router)
app.include_router(models_router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    get_error_handler().handle_error(exc, context=request.url.path)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}


@app.get("/api/errors")
async def errors():
    """Boundary errors seen since startup."""
    return get_error_handler().get_stats()


def run():
    """Run the service in the foreground."""
    uvicorn.run(app, host=HOST, port=PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
