# main.py
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from json_response.api.exception_handlers import EXCEPTION_HANDLERS
from json_response.api.router import router
from json_response.core.config import Settings, get_settings
from json_response.utils.logger import get_logger, setup_logging

logger = get_logger("json_response.main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.env, settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)

    app.include_router(router)

    logger.info("%s %s ready (env=%s)", settings.app_name, settings.app_version, settings.env)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("main:app", host=_settings.host, port=_settings.port, reload=_settings.debug)
