"""Carpentry Calc — FastAPI application entry point."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .exceptions import register_exception_handlers
from .routers import cut_list, export, fractions, lengths
from .services.cut_list import DEFAULT_BOARD_LENGTH, DEFAULT_KERF

logging.basicConfig(
    level=os.environ.get("CARPENTRY_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)

# Vite dev server by default
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CARPENTRY_CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Defaults: board {DEFAULT_BOARD_LENGTH}\", kerf {DEFAULT_KERF}\"; "
        f"CORS origins {CORS_ORIGINS}"
    )
    yield


app = FastAPI(
    title="Carpentry Calc",
    description="Fraction converter and cut-list planner for the shop",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routes
app.include_router(fractions.router)
app.include_router(lengths.router)
app.include_router(cut_list.router)
app.include_router(export.router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/")
async def root() -> dict:
    return {"message": "Carpentry Calc API", "docs": "/docs"}
