"""
myFlix Backend - FastAPI Application

A movie catalog API with user accounts and favorite lists.
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from myflix.config import get_settings
from myflix.core.exceptions import MyFlixError, UnauthorizedError, ValidationFailure
from myflix.core.logging_config import get_access_logger, setup_logging
from myflix.database.connections import get_mongo_client, close_connections
from myflix.database.databases import myflix_db
from myflix.database.registry import sync_registry, create_indexes
from myflix.routers import auth, health, movies, users

settings = get_settings()
setup_logging(settings.log_level, settings.access_log_file)

logger = logging.getLogger(__name__)
access_logger = get_access_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Sync database registry
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up myFlix Backend...")

    try:
        client = await get_mongo_client()
        db = client[myflix_db.db_name()]
        await sync_registry(db)
        await create_indexes(db)
        logger.info("Database registry synced and indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down myFlix Backend...")
    await close_connections()
    logger.info("Database connections closed")


# Create FastAPI application
app = FastAPI(
    title="myFlix API",
    description="""
## myFlix Movie API

Movie catalog with user accounts and favorite movie lists.

### Features
- **Movies**: Browse the catalog by title, genre or director
- **Users**: Register, update and delete accounts
- **Favorites**: Add and remove movies from a user's favorites

### Authentication
All protected endpoints require a JWT bearer token:
```
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def access_log(request: Request, call_next):
    """Write one line per request to the access log."""
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        access_logger.info(
            '%s "%s %s" %s %.1fms "%s"',
            client,
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
            request.headers.get("user-agent", "-"),
        )


# ==================== Error handlers ====================


@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "errors": [{"field": v.field, "message": v.message} for v in exc.violations],
        },
    )


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    # Same body for every reason; the reason is only logged
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": "Unauthorized"},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(MyFlixError)
async def myflix_error_handler(request: Request, exc: MyFlixError):
    if exc.status_code >= 500:
        logger.error("Service fault on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": MyFlixError.default_detail})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": MyFlixError.default_detail},
    )


# Include routers (auth before users so /users/me wins over /users/{username})
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(movies.router)
app.include_router(users.router)


@app.get("/", tags=["Root"], response_class=PlainTextResponse)
async def root():
    """Root endpoint with a welcome message."""
    return "Welcome to myFlix! See /documentation.html or /docs for the API reference."


# Static documentation and media, served as plain files
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
