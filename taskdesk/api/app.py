import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskdesk.adapter.database import create_engine, create_session_factory, create_tables
from taskdesk.adapter.services.local_blob_storage import LocalBlobStorage
from taskdesk.app.repositories.errors import StorageUnavailableError
from taskdesk.domain.errors import ErrorCode
from .error import ClientError, ServerError
from .middleware import log_requests

logger = logging.getLogger(__name__)


def _code(error) -> str:
    return getattr(error.code, "value", error.code)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": _code(exc.base_error), "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": _code(exc.base_error), "message": "Internal server error"}
    logger.error(f"Server error: {_code(exc.base_error)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_storage_unavailable(request: Request, exc: StorageUnavailableError):
    error_dict = {
        "code": ErrorCode.STORAGE_UNAVAILABLE.value,
        "message": "Storage is temporarily unavailable, retry later",
    }
    logger.error(f"Storage unavailable: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    engine = create_engine(ApplicationConfig.DB_URI, ApplicationConfig.DB_CONNECT_TIMEOUT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES_ON_STARTUP:
            await create_tables(engine)
        yield
        await engine.dispose()

    app = FastAPI(title="Taskdesk API", version="0.1.0", lifespan=lifespan)

    # Built once per process and shared by every request
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.blob_storage = LocalBlobStorage(
        ApplicationConfig.STORAGE_DIR, ApplicationConfig.STORAGE_PUBLIC_URL
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from taskdesk.api.routes import auth, health_check, messages, tasks, users

    app.include_router(health_check.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(tasks.router)
    app.include_router(messages.router)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(StorageUnavailableError, handle_storage_unavailable)

    return app
