import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from dating_app.api.routes.health import router as health_router
from dating_app.api.routes.matches import router as matches_router
from dating_app.api.routes.subscriptions import router as subscriptions_router
from dating_app.api.routes.swipes import router as swipes_router
from dating_app.api.routes.users import router as users_router
from dating_app.core.config import get_settings
from dating_app.core.logging import configure_logging

logger = structlog.get_logger(__name__)


async def _persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "internal_error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": {"code": "E_INTERNAL", "message": "Internal server error"}},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.app_env != "dev")

    app = FastAPI(
        title="Dating Swipe API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.add_exception_handler(SQLAlchemyError, _persistence_error_handler)
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(swipes_router)
    app.include_router(matches_router)
    app.include_router(subscriptions_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "dating_app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    run()
