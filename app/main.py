"""Course Progress API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import cors_origins, get_settings
from app.core.errors import ServiceError
from app.db import session as db_session
from app.db.init_db import init_db
from app.routers import admin, auth, health, progress, users

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # create tables / add missing columns
    init_db(db_session.engine)
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Accounts and lesson progress for the course site",
        debug=settings.debug,
        lifespan=lifespan,
    )

    origins = cors_origins(settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected request %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Server error"})

    for module in (auth, progress, users, admin, health):
        app.include_router(module.router, prefix=settings.api_prefix)
    if settings.api_prefix:
        # root /health for load balancers
        app.include_router(health.router)

    return app


app = create_app()
