"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.errors import TBAssistError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.tbassist_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="TB Assist",
        description="AI-assisted tuberculosis screening support — diagnosis gateway, lesion overlays, records",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TBAssistError, _handle_app_error)

    from app.db.session import init_db

    init_db()

    from app.api.router import api_router

    app.include_router(api_router)

    return app


async def _handle_app_error(request: Request, exc: TBAssistError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app = create_app()
