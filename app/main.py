"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI

from app.core.config import settings
from app.core.logger import setup_logger
from app.api.v1.router import api_router

setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE, json_logs=settings.LOG_JSON)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="NOVA Performance Engine: zone readiness from workout history.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "NOVA Performance Engine API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "nova-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "authors emails": settings.AUTHORS_EMAILS,
        "project url": settings.PROJECT_URL
    }
