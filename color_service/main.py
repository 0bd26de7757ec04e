"""
Main FastAPI application for Color Service.
Provides color conversion, comparison, interpolation and a recent colors list.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from color_service.core.config import get_settings
from color_service.core.logging_config import setup_logging, get_logger
from color_service.core.middleware import ErrorHandlingMiddleware
from color_service.api.color_routes import router as color_router
from color_service.api.health import router as health_router
from color_service.services.color_registry import ColorRegistry

settings = get_settings()

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages the application lifecycle."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}...")

    # Single registry shared by every request for the lifetime of the process
    app.state.color_registry = ColorRegistry(capacity=settings.RECENT_COLORS_CAPACITY)
    logger.info(f"Recent colors list initialized (capacity={settings.RECENT_COLORS_CAPACITY})")

    try:
        yield
    finally:
        app.state.color_registry.clear()
        logger.info(f"{settings.APP_NAME} shut down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Color utilities: random colors, hex/RGB conversion, brightness comparison, "
                "a recent colors list and linear interpolation.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Colors",
            "description": "Color conversion, comparison and interpolation endpoints.",
        },
        {
            "name": "Health",
            "description": "Endpoints for checking application health.",
        },
    ]
)

# Middleware configuration (order matters - last added runs first)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(ErrorHandlingMiddleware)

app.include_router(health_router, tags=["Health"])
app.include_router(color_router)


def main() -> None:
    """Run the Color Service with uvicorn."""
    try:
        logger.info(f"Starting Color Service on {settings.HOST}:{settings.PORT}")
        uvicorn.run(
            "color_service.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=settings.DEBUG,
            log_level=settings.LOG_LEVEL.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
