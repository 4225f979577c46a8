from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from fasttruck import __version__
from fasttruck.api.routes import router as api_router
from fasttruck.auth.routes import router as auth_router
from fasttruck.config.app_config import AppConfig, JsonPreferenceStore
from fasttruck.config.settings import settings
from fasttruck.marketplace.base import MarketplaceBackend
from fasttruck.pincode.lookup import PostalLookupClient


def create_app(
    backend: Optional[MarketplaceBackend] = None,
    lookup_client: Optional[PostalLookupClient] = None,
    app_config: Optional[AppConfig] = None,
) -> FastAPI:
    """
    Composition root.

    Builds the backend, postal lookup client and app config once and hands
    them to routes via app.state. Tests pass their own instances.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Release the postal lookup connection pool
        await app.state.lookup_client.aclose()

    app = FastAPI(
        title="Fast Truck API",
        description="Delivery job marketplace: clients post jobs, freelancers apply",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if backend is None:
        from fasttruck.db.session import SessionLocal, engine, init_db
        from fasttruck.marketplace.sql_backend import SqlMarketplaceBackend

        init_db(engine)
        backend = SqlMarketplaceBackend(SessionLocal)

    app.state.backend = backend
    app.state.lookup_client = lookup_client or PostalLookupClient()
    app.state.app_config = app_config or AppConfig.init(JsonPreferenceStore(settings.PREFERENCES_PATH))

    # Include routers
    app.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    return app


app = create_app()

# Lambda handler
handler = Mangum(app, lifespan="off")
