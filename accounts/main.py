"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accounts.config import get_settings
from accounts.infrastructure.database import engine, Base
from accounts.core.logging import configure_logging
from accounts.core.middleware import setup_middleware
from accounts.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from accounts.domain.models.user import User  # noqa: F401
from accounts.domain.models.phone import Phone  # noqa: F401

from accounts.interfaces.api.users import router as users_router

settings = get_settings()

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting user accounts service", env=settings.ENVIRONMENT)

    # Schema migrations are managed outside the service; this only fills gaps
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    engine.dispose()
    logger.info("User accounts service stopped")


app = FastAPI(
    title="User Accounts",
    description="User account management API with token authentication",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)


@app.get("/")
def root():
    return {
        "name": "User Accounts",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
