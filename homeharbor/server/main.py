"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homeharbor import __version__
from homeharbor.core.database.session import async_session_maker, init_db
from homeharbor.core.logging_config import get_logger, setup_logging
from homeharbor.core.monitoring import initialize_logfire

from .api.v1 import (
    admin,
    crime,
    favorites,
    footer,
    health,
    locations,
    logs,
    messages,
    neighborhoods,
    oulu,
    page_content,
    places,
    posts,
    properties,
    reseed,
    settings as settings_routes,
    static_pages,
    users,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.crime_data import CrimeDataService
from .services.scheduler import CrimeSyncScheduler
from .services.seed import initialize_database

# Initialize logging
setup_logging(log_level=settings.log_level)
logger = get_logger(__name__)


def build_crime_scheduler() -> CrimeSyncScheduler:
    crime_sync = settings.crime_sync
    service = CrimeDataService(async_session_maker, crime_sync.api_url, timeout=settings.open_data_http_timeout)
    return CrimeSyncScheduler(service, cron_hour=crime_sync.cron_hour, run_on_startup=crime_sync.run_on_startup)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Startup creates missing tables, seeds an empty database and starts the
    crime data scheduler. Shutdown stops the scheduler.
    """
    # Startup
    logger.info(f"Starting up {constant.PROJECT_NAME} ({settings.environment})...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
        if settings.seed_on_startup:
            async with async_session_maker() as session:
                if await initialize_database(session):
                    logger.info("Empty database seeded with demo data")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    scheduler = None
    if settings.crime_sync.enabled:
        scheduler = build_crime_scheduler()
        scheduler.start()
    else:
        logger.info("Crime data synchronisation is disabled")

    yield

    # Shutdown
    logger.info(f"Shutting down {constant.PROJECT_NAME}...")
    if scheduler is not None:
        await scheduler.shutdown()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    HomeHarbor API

    Backend of the HomeHarbor real-estate portal: listings with search and
    recommendations, accounts, favourites, buyer-agent messages, blog and site
    content, an admin console, and Finnish open data (crime statistics, Oulu
    datasets and attractions).
    """,
    version=__version__,
    openapi_url=f"{constant.API_STR}/openapi.json",
    docs_url=f"{constant.API_STR}/docs",
    redoc_url=f"{constant.API_STR}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)


API = constant.API_STR

app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{API}/users")
app.include_router(properties.router, prefix=f"{API}/properties")
app.include_router(locations.router, prefix=f"{API}/locations")
app.include_router(favorites.router, prefix=f"{API}/favorites")
app.include_router(messages.router, prefix=f"{API}/messages")
app.include_router(neighborhoods.router, prefix=f"{API}/neighborhoods")
app.include_router(posts.router, prefix=f"{API}/posts")
app.include_router(settings_routes.router, prefix=f"{API}/settings")
app.include_router(footer.router, prefix=f"{API}/footer")
app.include_router(page_content.router, prefix=f"{API}/page-content")
app.include_router(crime.router, prefix=f"{API}/crime-rate")
app.include_router(oulu.router, prefix=f"{API}/oulu")
app.include_router(oulu.attractions_router, prefix=f"{API}/attractions")
app.include_router(places.router, prefix=f"{API}/places")
app.include_router(reseed.router, prefix=f"{API}/reseed")
app.include_router(settings_routes.admin_router, prefix=f"{API}/admin/settings")
app.include_router(static_pages.router, prefix=f"{API}/admin/page-content")
app.include_router(logs.router, prefix=f"{API}/admin/logs")
app.include_router(admin.router, prefix=f"{API}/admin")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())
