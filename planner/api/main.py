"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planner.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Floor Plan Wall Engine",
        description="Derives walls from room outlines and moves them step by step",
        version="0.1.0",
    )

    # CORS: allow the Vite dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
