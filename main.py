"""
FastAPI Application Entry Point

Integrates:
  - WhatsApp webhook (verification + message delivery)
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8080
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import get_config
from transport.whatsapp import router as whatsapp_router

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    config = get_config()

    # Startup
    logger.info("=" * 60)
    logger.info("Fire report bot starting up...")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"WhatsApp API: {config.api_version} (phone number {config.phone_number_id or 'unset'})")
    if not config.validate():
        logger.critical(f"Missing required environment variables: {', '.join(config.missing())}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Fire report bot shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Fire Report Bot",
    description="WhatsApp bot for reporting fires and donating to the volunteer fire brigade",
    version="1.0.0",
    lifespan=lifespan,
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(whatsapp_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    config = get_config()
    if config.validate():
        return {"status": "ready"}
    return {"status": "not_ready", "reason": f"missing: {', '.join(config.missing())}"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Fire Report Bot",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "whatsapp_verify": "GET /webhook",
            "whatsapp_webhook": "POST /webhook",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=config.port,
        reload=False,
    )
