#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for the whiteboard math toolkit.

Usage:
    # Start server
    uvicorn api.main:app --host 0.0.0.0 --port 8000

    # Or run directly
    python -m api.main

Key Endpoints:
    POST /api/math/segments - Split text into text/math segments
    POST /api/math/classify - Is a string a math expression
    POST /api/math/latex - Plain notation to LaTeX
    POST /api/math/plain - LaTeX to plain notation
    POST /api/math/normalize - Normalize LaTeX whitespace
    POST /api/math/delimited - Split chat content on $ delimiters
    POST /api/math/variables - Sidebar variables and graphable equations
    POST /api/board/lasso - Lasso selection
    GET /api/health - Health check

Configuration:
    Environment variables (or .env):
    - RATE_LIMIT: API rate limit (default: "60/minute")
    - MAX_TEXT_LENGTH: Max characters per request (default: 20000)
    - LOG_LEVEL: Logging level (default: INFO)
"""

from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from config.constants import API_VERSION
from config.logging_config import setup_logger
from config.settings import settings
from api.board_routes import router as board_router
from api.math_routes import router as math_router

# Route modules log under "api.*" and propagate here
logger = setup_logger("api", level=settings.log_level)


class HealthResponse(BaseModel):
    status: str
    version: str


app = FastAPI(
    title="Whiteboard Math API",
    description="Math detection, LaTeX conversion and lasso selection for the tutoring whiteboard",
    version=API_VERSION
)

# Rate limiting, applied to every route by the middleware
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit]
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(math_router)
app.include_router(board_router)


@app.get("/api/health", response_model=HealthResponse)
async def health():
    """Health check"""
    return HealthResponse(status="ok", version=API_VERSION)


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    settings.print_config()
    logger.info("Starting Whiteboard Math API Server...")
    logger.info("API Documentation: http://localhost:8000/docs")

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
