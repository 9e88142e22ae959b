"""
TechOps Storefront - Main FastAPI Application

Single entry point for the storefront API: catalog, cart, checkout and
contact routes, plus a health check.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.db import get_storage
from storefront.logging import get_logger
from storefront.routers import router as storefront_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup: pick the storage backend once so misconfiguration shows up in the logs early
    storage = get_storage()
    logger.info(f"Storefront started with {type(storage).__name__} storage")
    yield


app = FastAPI(
    title="TechOps Storefront",
    description="Product listing, cart, simulated checkout and contact form API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(storefront_router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}
