from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from realty.api.routers import (
    properties, users, messages, saved_properties, neighborhoods, amenities, directory
)
from realty.core.config import settings
from realty.core.storage_provider import init_storage
from realty.modules.storage import Storage
import logging

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """
    Build the API application.

    When a storage instance is passed it is used as-is (tests do this);
    otherwise the configured backend is created and seeded on startup.
    """
    app = FastAPI(
        title="Real Estate Marketplace API",
        description="API for property listings, messaging and neighborhood discovery",
        version="1.0.0"
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(properties.router, prefix="/api/v1/properties", tags=["properties"])
    app.include_router(users.router, prefix="/api/v1/users", tags=["users"])
    app.include_router(messages.router, prefix="/api/v1/messages", tags=["messages"])
    app.include_router(saved_properties.router, prefix="/api/v1/saved-properties", tags=["saved-properties"])
    app.include_router(neighborhoods.router, prefix="/api/v1/neighborhoods", tags=["neighborhoods"])
    app.include_router(
        neighborhoods.property_links_router,
        prefix="/api/v1/property-neighborhoods",
        tags=["neighborhoods"]
    )
    app.include_router(amenities.router, prefix="/api/v1/amenities", tags=["amenities"])
    app.include_router(amenities.categories_router, prefix="/api/v1/amenity-categories", tags=["amenities"])
    app.include_router(
        amenities.neighborhood_links_router,
        prefix="/api/v1/neighborhood-amenities",
        tags=["amenities"]
    )
    app.include_router(directory.agents_router, prefix="/api/v1/agents", tags=["agents"])
    app.include_router(directory.testimonials_router, prefix="/api/v1/testimonials", tags=["testimonials"])
    app.include_router(directory.waitlist_router, prefix="/api/v1/waitlist", tags=["waitlist"])

    app.state.storage = storage

    @app.on_event("startup")
    async def startup_event():
        """Initialize storage on startup"""
        if app.state.storage is not None:
            return
        try:
            app.state.storage = await init_storage()
            logger.info("Application startup completed successfully")
        except Exception as e:
            logger.error(f"Failed to initialize storage: {e}")
            raise

    @app.get("/")
    async def root():
        return {"message": "Real Estate Marketplace API"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint reporting the active storage backend"""
        current = app.state.storage
        if current is None:
            return {"status": "starting", "storage": None}
        return {"status": "healthy", "storage": type(current).__name__}

    return app


app = create_app()
