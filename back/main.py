# Standard library imports
from contextlib import asynccontextmanager
from uuid import UUID, uuid4

# Third-party imports
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.api import router as api_router
from nagrik.api.internal.utils.exceptions import register_exception_handlers
from nagrik.core.db import create_all_tables, get_async_session, run_with_new_session
from nagrik.core.monitoring import get_logger, setup_sentry
from nagrik.models.auth.user import UserRole
from nagrik.services.auth import get_or_create_user
from nagrik.settings import settings

# Set up the main application logger
logger = get_logger("nagrik")

APP_VERSION = "1.0.0"


async def create_default_admin_user(db: AsyncSession) -> UUID:
    """Make sure the configured admin phone number exists with the admin role."""
    admin = await get_or_create_user(
        db,
        settings.ADMIN_PHONE_NUMBER,
        role=UserRole.ADMIN,
        display_name=settings.ADMIN_DISPLAY_NAME,
    )
    if admin.role != UserRole.ADMIN:
        logger.warning(f"Promoting existing user {admin.id} to admin")
        admin.role = UserRole.ADMIN
    await db.commit()
    return admin.id


# ---- FASTAPI APP CREATION ----
def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Startup
    logger.info("Starting up Nagrik Seva API")

    if settings.AUTO_CREATE_TABLES:
        tables = await create_all_tables()
        logger.info(f"Database tables ready: {', '.join(tables)}")

    try:
        admin_id = await run_with_new_session(create_default_admin_user)
        logger.info(f"Admin user ready with ID: {admin_id}")
    except SQLAlchemyError as e:
        logger.error(f"Failed to create admin user: {e}")

    yield

    # Shutdown
    logger.info("Shutting down Nagrik Seva API")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    if setup_sentry():
        logger.info(f"Sentry initialised in {settings.ENVIRONMENT} environment")

    show_docs = settings.ENVIRONMENT != "production"
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=APP_VERSION,
        description="Civic issue reporting and area dashboards",
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if show_docs else None,
        docs_url=f"{settings.API_V1_STR}/docs" if show_docs else None,
        redoc_url=f"{settings.API_V1_STR}/redoc" if show_docs else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def attach_request_id(request: Request, call_next):
        request.state.request_id = request.headers.get("x-request-id") or str(uuid4())
        response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check(db: AsyncSession = Depends(get_async_session)):
        try:
            await db.execute(text("SELECT 1"))
            database = "connected"
        except SQLAlchemyError as e:
            logger.error(f"Health check database error: {e}")
            database = "unavailable"
        return {"status": "healthy", "version": APP_VERSION, "database": database}

    app.include_router(api_router)

    return app


# Create the app instance
app = create_app()
