#!/usr/bin/env python
"""
create the fastapi app
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Callable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware

from showcase.apis.projects import router as projects_router
from showcase.config import Config
from showcase.db import DatabaseManager
from showcase.utils.error_handler import ApiException


logger = logging.getLogger(__name__)


# pylint: disable=too-few-public-methods
class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log incoming requests to stdout."""
    async def dispatch(self, request: Request, call_next: Callable) -> Any:
        response = await call_next(request)

        timestamp = datetime.now().strftime("%I:%M%p on %B %d, %Y")
        logger.info(
            f'{timestamp}\t{request.url.path}\t-\t{request.method}\t{response.status_code}'
        )
        return response


async def handle_api_exception(request: Request, err: ApiException):
    """Return custom JSON when an ApiException is raised."""
    return JSONResponse(err.to_dict(), status_code=err.status_code)


async def handle_validation_error(request: Request, err: RequestValidationError):
    errors = err.errors()
    message = "Invalid request body"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_general_exception(request: Request, err: Exception):
    """Return JSON instead of a bare 500 for any other server error."""
    logger.exception(f"Unknown Exception: {err}")
    return JSONResponse(
        {"error": "Internal Server Error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(config=Config) -> FastAPI:
    logging.basicConfig(level=config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = DatabaseManager(config.DATABASE_URL, echo=config.SQL_ECHO)
        await db.init_db(reset=config.RESET_DB)
        app.db = db
        yield
        await db.dispose()

    app = FastAPI(title="Project showcase", lifespan=lifespan)
    app.config = config

    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(ApiException, handle_api_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_general_exception)

    @app.get("/live")
    def live():
        """Liveness endpoint"""
        return "live"

    app.include_router(projects_router)
    return app


def main():
    return create_app()


if __name__ == "__main__":
    uvicorn.run(
        f"{__name__}:main",
        factory=True,
        host=Config.SERVER_HOST,
        port=Config.SERVER_PORT,
        lifespan="on",
        proxy_headers=True,
        forwarded_allow_ips='*',
        log_level=Config.LOG_LEVEL.lower(),
        access_log=False
    )
