from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solar_app.api.v1 import design, weather
from solar_app.config import settings
from solar_app.core.logging import RequestLoggingMiddleware, setup_logging
from solar_app.services.design_service import design_cache


def create_app() -> FastAPI:
    setup_logging(
        json_format=settings.log_json,
        level=settings.log_level,
        engine_level=settings.engine_log_level,
    )

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        debug=settings.debug,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.include_router(design.router, prefix="/api/v1/design", tags=["design"])
    application.include_router(weather.router, prefix="/api/v1/weather", tags=["weather"])

    @application.get("/health")
    async def health_check() -> dict:
        return {
            "status": "ok",
            "environment": settings.environment,
            "design_cache": {
                "entries": len(design_cache),
                "hits": design_cache.hits,
                "misses": design_cache.misses,
            },
        }

    return application


app = create_app()
