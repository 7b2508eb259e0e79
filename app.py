import logging

from dotenv import load_dotenv
load_dotenv()  # Load .env file before importing settings

from fastapi import FastAPI, Request
from slowapi.errors import RateLimitExceeded

from core.config import settings
from core.rate_limiter import limiter, rate_limit_exceeded_handler, RateLimits
from src.gtfs_clean_bc.agency.domain.entities.agency_profile import get_agency_profile


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    # Settings validation is done automatically in core/config.py on import
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    app = FastAPI(
        title="GTFS Clean API",
        description="Route, trip and stop label cleaning for transit real-time APIs",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.DEBUG,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Register routers
    from adapters.http.api.gtfs_clean.routers import clean_router
    app.include_router(clean_router, prefix="/api/v1")

    @app.get("/health")
    @limiter.limit(RateLimits.HEALTH)
    async def health_check(request: Request):
        """Health check endpoint with the active agency profile."""
        profile = get_agency_profile(settings.AGENCY_CODE)
        return {
            "status": "healthy",
            "agency": {
                "code": profile.code,
                "name": profile.name,
                "locale": profile.locale.tag,
            },
        }

    return app


app = create_app()
