"""FastAPI application — Demand Wizard API.

Hosts demand wizard sessions and the demand store they submit into.
"""

from __future__ import annotations

import os
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wizard import __version__

from .routers import demands, wizard_sessions

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Demand Wizard API",
    version=__version__,
    description="Multi-step demand intake with gated steps and example prefill",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
ALLOWED_ORIGINS = os.environ.get(
    "CORS_ORIGINS",
    "http://localhost:3000",
).split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in ALLOWED_ORIGINS],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(demands.router, prefix="/v1", tags=["demands"])
app.include_router(wizard_sessions.router, prefix="/v1", tags=["wizard"])


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.get("/")
async def root():
    return {"message": "Demand Wizard API", "docs": "/docs"}
