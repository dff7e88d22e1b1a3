"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studio.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.studio_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Generative Studio",
        description="Seeded procedural shape compositions with frame-driven animation",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all phase modules to trigger registration
    from studio.engine.generator import _register_phases

    _register_phases()

    from studio.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
