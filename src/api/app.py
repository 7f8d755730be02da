import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.app.services.authorization_gate import AuthorizationGate, RouteTable
from .error import ClientError, ServerError
from .utils.authorization import enforce_route_table

logger = logging.getLogger(__name__)


def _envelope(status_code: int, error_code: str, message: str, **extra) -> dict:
    return {"code": status_code, "message": message, "error": error_code, **extra}


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning(f"Client error on {request.method} {request.url.path}: {error.code} {error.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_envelope(exc.status_code, error.code, error.message),
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR, exc.base_error.code, "Internal server error"
        ),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_envelope(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "VALIDATION_ERROR",
            "Invalid request",
            details=jsonable_encoder(exc.errors()),
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "Internal server error"
        ),
    )


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
    )
    return response


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.adapter.services.bootstrap import create_schema, seed_credentials
        from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
        from src.depends import AsyncSessionLocal, engine

        if ApplicationConfig.AUTO_CREATE_SCHEMA:
            await create_schema(engine)
        if ApplicationConfig.SEED_DEMO_ACCOUNTS:
            async with AsyncSessionLocal() as session:
                await seed_credentials(
                    SqlAlchemyUnitOfWork(session),
                    ApplicationConfig.DEMO_ACCOUNTS,
                    ApplicationConfig.BCRYPT_ROUNDS,
                )
        yield
        await engine.dispose()

    app = FastAPI(
        title="Authorization Gateway",
        version="0.1.0",
        lifespan=lifespan,
        dependencies=[Depends(enforce_route_table)],
    )
    app.state.gate = AuthorizationGate(RouteTable.from_config(ApplicationConfig.ROUTE_RULES))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import (
        admin,
        annotation,
        auth,
        combined,
        comment,
        goods,
        health_check,
        notice,
        orders,
        session,
        user,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(session.router, tags=["Sessions"])
    app.include_router(user.router, tags=["User"])
    app.include_router(goods.router, tags=["Goods"])
    app.include_router(orders.router, tags=["Orders"])
    app.include_router(notice.router, tags=["Notice"])
    app.include_router(comment.router, tags=["Comment"])
    app.include_router(admin.router, tags=["Admin"])
    app.include_router(annotation.basic_router, tags=["Annotation"])
    app.include_router(annotation.advanced_router, tags=["Annotation"])
    app.include_router(combined.router, tags=["Combined"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
