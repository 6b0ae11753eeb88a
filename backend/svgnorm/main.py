"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgnorm import __version__
from svgnorm.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgnorm_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="SVG Normalizer",
        description="Rescales batches of SVG icons onto a uniform square viewBox",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    from svgnorm.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
