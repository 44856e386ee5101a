from fastapi import FastAPI, Request, Depends
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from foodhub.core.config import settings
from foodhub.core.metrics import request_count, request_duration, db_connected, get_metrics_text
from foodhub.db.session import engine, get_db
import time
import logging

logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        
        try:
            response = await call_next(request)
            duration = time.time() - start_time
            
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code
            ).inc()
            
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)
            
            return response
        except Exception:
            duration = time.time() - start_time
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=500
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Application starting...")
    
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        db_connected.set(1)
        logger.info("Database connected")
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database connection failed: {e}")
        db_connected.set(0)
    
    yield
    
    logger.info("Application shutting down...")
    await engine.dispose()
    db_connected.set(0)
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check(db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(text("SELECT 1"))
        database = "connected"
        db_connected.set(1)
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Health check database probe failed: {e}")
        database = "disconnected"
        db_connected.set(0)
    
    return {
        "status": "healthy" if database == "connected" else "degraded",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "dependencies": {
            "database": database
        }
    }


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }
