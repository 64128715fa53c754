# routeline/main.py

from fastapi import FastAPI

from routeline.api.v1 import routes_directions, routes_health, routes_polyline
from routeline.core.config import settings
from routeline.core.logger import logger


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Decodes encoded route polylines into GeoJSON line features.",
    )

    # Routers
    app.include_router(routes_health.router, prefix="", tags=["health"])
    app.include_router(routes_polyline.router, prefix="", tags=["polyline"])
    app.include_router(routes_directions.router, prefix="", tags=["directions"])

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready ({settings.ENVIRONMENT})")

    return app


app = create_app()
