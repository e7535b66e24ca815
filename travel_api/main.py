import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_api import __version__
from travel_api.api.dependencies import build_in_memory_bundle
from travel_api.api.error_handlers import register_exception_handlers
from travel_api.api.routers.admin import router as admin_router
from travel_api.api.routers.bookings import router as bookings_router
from travel_api.api.routers.catalog import router as catalog_router
from travel_api.api.routers.health import router as health_router
from travel_api.api.routers.payments import router as payments_router
from travel_api.api.routers.users import router as users_router
from travel_api.application.interfaces.clock import SystemClock
from travel_api.application.interfaces.identity_verifier import IdentityVerifier
from travel_api.config import Settings, get_settings
from travel_api.infrastructure.auth import FirebaseIdentityVerifier, LocalJwtIdentityVerifier
from travel_api.infrastructure.db.engine import build_engine, build_sessionmaker
from travel_api.infrastructure.db.tables import metadata
from travel_api.infrastructure.gateways.stripe_gateway_real import StripeGatewayReal

logger = logging.getLogger(__name__)


def build_identity_verifier(settings: Settings) -> IdentityVerifier:
    if settings.identity_provider == "firebase":
        return FirebaseIdentityVerifier(project_id=settings.firebase_project_id)
    return LocalJwtIdentityVerifier(
        secret=settings.auth_jwt_secret,
        algorithm=settings.auth_jwt_algorithm,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    engine = None if settings.use_in_memory else build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if engine is not None:
            # Create tables on startup (no migrations yet)
            async with engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
        logger.info(
            "Travel booking API started",
            extra={"mode": "in-memory" if engine is None else "sql"},
        )
        yield
        if engine is not None:
            await engine.dispose()

    app = FastAPI(title="Travel Booking API", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.clock = SystemClock()
    app.state.identity_verifier = build_identity_verifier(settings)
    app.state.engine = engine
    app.state.session_maker = build_sessionmaker(engine) if engine is not None else None
    app.state.bundle = build_in_memory_bundle() if engine is None else None
    app.state.stripe_gateway = StripeGatewayReal(
        api_key=settings.stripe_api_key,
        timeout_seconds=settings.stripe_timeout_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health_router, tags=["Health"])
    app.include_router(users_router, tags=["Users"])
    app.include_router(catalog_router, tags=["Catalog"])
    app.include_router(payments_router, tags=["Payments"])
    app.include_router(bookings_router, tags=["Bookings"])
    app.include_router(admin_router, tags=["Admin"])
    return app


app = create_app()
