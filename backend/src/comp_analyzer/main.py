"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from comp_analyzer.config import settings
from comp_analyzer.api.routes.analysis import router as analysis_router
from comp_analyzer.services.analysis_orchestrator import AnalysisOrchestrator
from comp_analyzer.services.remote_analysis_client import RemoteAnalysisClient

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: one orchestrator per app, so one analysis in flight at a time
    if not hasattr(app.state, "orchestrator"):
        client = RemoteAnalysisClient(settings.analysis_webhook_url)
        if not client.is_configured:
            logger.warning("ANALYSIS_WEBHOOK_URL is not set; analyze requests will be refused")
        app.state.orchestrator = AnalysisOrchestrator(client)
    yield
    # Shutdown: release the HTTP client
    await app.state.orchestrator.client.close()


app = FastAPI(
    title="Comp Analyzer",
    description="LoL 5v5 team composition analyzer",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "comp-analyzer"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Comp Analyzer API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(analysis_router)
