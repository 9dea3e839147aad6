"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ribbonwalk import __version__
from ribbonwalk.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.ribbonwalk_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="RibbonWalk",
        description="Tangent circle chains rendered as extruded, pulsing ribbons",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    from ribbonwalk.engine.pipeline import register_stages

    register_stages()

    from ribbonwalk.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
