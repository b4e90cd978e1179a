"""
Storefront CMS - Backend API
Layouts de temas, pedidos y datos demo para el storefront
"""
import logging
import time
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from app.core.config import settings
from app.core.database import get_db_connection_with_retry
from app.api import modifications, orders, mock
from app.repositories.theme_config_repository import ThemeNotConfiguredError, load_cms_config

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

API_V1 = "/api/v1"

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(modifications.router, prefix=f"{API_V1}/modifications", tags=["Modifications"])
app.include_router(orders.router, prefix=f"{API_V1}/orders", tags=["Orders"])
app.include_router(mock.router, prefix=f"{API_V1}/mock", tags=["Mock Data"])


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Storefront CMS API",
        "status": "online",
        "version": settings.API_VERSION,
    }


@app.get("/health")
async def health():
    """Health check endpoint para monitoreo - tests theme config and database"""
    start_time = time.time()

    theme_name = None
    theme_error = None
    try:
        theme_name = load_cms_config().theme_name
    except ThemeNotConfiguredError as e:
        theme_error = str(e)

    db_status = "not_configured"
    db_latency_ms = None
    db_error = None

    if settings.DATABASE_URL:
        try:
            # Minimal retry (fast check)
            db_start = time.time()
            conn = get_db_connection_with_retry(max_retries=1, retry_delay=0.5)
            conn.close()
            db_latency_ms = round((time.time() - db_start) * 1000, 2)
            db_status = "connected"
        except Exception as e:
            db_status = "disconnected"
            db_error = str(e)
            logger.warning(f"Health check: database unavailable: {e}")

    healthy = theme_name is not None and db_status != "disconnected"

    return {
        "status": "healthy" if healthy else "degraded",
        "service": "storefront-cms-api",
        "version": settings.API_VERSION,
        "theme": {
            "name": theme_name,
            "error": theme_error
        },
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error
        },
        "total_latency_ms": round((time.time() - start_time) * 1000, 2)
    }
