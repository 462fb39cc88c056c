"""Main FastAPI application entry point"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from survey_schedule.api.errors import request_validation_exception_handler
from survey_schedule.api.health import router as health_router
from survey_schedule.api.masters import router as masters_router
from survey_schedule.api.projects import router as projects_router
from survey_schedule.config import settings
from survey_schedule.database import init_db
from survey_schedule.services.memory_project_repository import InMemoryProjectRepository

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on first start"""
    await init_db()
    yield


app = FastAPI(
    title="測量工程表管理システム API",
    description="Project tracking API for survey and photography engagements",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=3600,
)

app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

if settings.storage_backend == "memory":
    app.state.project_store = InMemoryProjectRepository()
    logger.warning("Projects are kept in memory and will be lost on restart")

# Include routers
app.include_router(health_router)
app.include_router(projects_router)
app.include_router(masters_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "測量工程表管理システム API",
        "version": "1.0.0",
        "status": "running",
    }
