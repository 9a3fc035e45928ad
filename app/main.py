import logging
import logging.config
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import FileResponse

from app.api.api_router import router
from app.models import Base
from app.db.base import create_db_engine, create_session_factory
from app.core.config import settings
from app.helpers.exception_handler import (
    CustomException, http_exception_handler, starlette_exception_handler,
    validation_exception_handler, unhandled_exception_handler
)

if os.path.exists(settings.LOGGING_CONFIG_FILE):
    logging.config.fileConfig(settings.LOGGING_CONFIG_FILE, disable_existing_loggers=False)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    # One engine (and its connection pool) per process, shared by every request through get_db
    engine = create_db_engine(settings.DATABASE_URL)
    with engine.begin() as connection:
        Base.metadata.create_all(bind=connection)
    application.state.engine = engine
    application.state.session_factory = create_session_factory(engine)
    logger.info("Database ready")
    try:
        yield
    finally:
        engine.dispose()


def _mount_frontend(application: FastAPI) -> None:
    dist_dir = settings.FRONTEND_DIST_DIR
    index_path = os.path.join(dist_dir, 'index.html')

    if not os.path.isdir(dist_dir):
        logger.warning(f"Frontend dist not found at {dist_dir}")

        @application.get("/", include_in_schema=False)
        async def root():
            return {"message": "API is running", "frontend": "Not available", "health": "/api/health"}
        return

    assets_dir = os.path.join(dist_dir, 'assets')
    if os.path.isdir(assets_dir):
        application.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    # Every other non-API path belongs to the client-side router
    @application.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        file_path = os.path.realpath(os.path.join(dist_dir, full_path))
        if full_path and file_path.startswith(os.path.realpath(dist_dir)) and os.path.isfile(file_path):
            return FileResponse(file_path)
        if os.path.exists(index_path):
            return FileResponse(index_path)
        raise HTTPException(status_code=404, detail="Frontend not found")


def get_application() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME, docs_url="/docs", redoc_url='/re-docs',
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        description='''
        Personal medical tracking API with FastAPI + Postgresql
            - Register/Login with JWT
            - Drugs, consumptions and schedules
            - Procedures, records, schedules and Excel export
            - Admin user management
        ''',
        lifespan=lifespan
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router, prefix=settings.API_PREFIX)

    @application.api_route(
        f"{settings.API_PREFIX}/{{path:path}}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False
    )
    async def api_not_found(path: str):
        raise HTTPException(status_code=404)

    application.add_exception_handler(CustomException, http_exception_handler)
    application.add_exception_handler(StarletteHTTPException, starlette_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    _mount_frontend(application)
    return application


app = get_application()
if __name__ == '__main__':
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv('PORT', '3001')))
