"""FastAPI application for the grid restart engine.

This module provides the main FastAPI application with all routes,
middleware, and configuration.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gridrestart import __version__
from gridrestart.api.routes import router as simulation_router
from gridrestart.api.schemas import HealthResponse
from gridrestart.api.services import simulation_service


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    # Startup
    print(
        f"Starting Grid Restart Engine API with {len(simulation_service.plants)} plants "
        f"and {len(simulation_service.demand)} demand points..."
    )
    yield
    # Shutdown
    print("Shutting down API...")


# Create FastAPI application
app = FastAPI(
    title="Grid Restart Engine",
    description="""
Minute-by-minute dispatch of a generation fleet during recovery from a
total blackout.

## Features

- **Staged restart**: hydro, wind, geothermal, solar, thermal and nuclear
  come back online on a fixed schedule
- **Merit-order dispatch** against a cyclic demand forecast
- **Stability correction**: unstable renewables are curtailed and replaced
  by firm generation

## Key Endpoints

- `GET /api/v1/plants`: Generation plant catalog
- `POST /api/v1/simulations`: Run a 36-hour recovery simulation
- `GET /api/v1/simulations/current`: Per-minute results of the last run
- `GET /api/v1/simulations/current/summary`: Recovery KPIs of the last run
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(simulation_router)


# =============================================================================
# Root & Health Endpoints
# =============================================================================


@app.get("/", response_class=JSONResponse)
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Grid Restart Engine",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(),
        plants_loaded=len(simulation_service.plants),
        demand_points_loaded=len(simulation_service.demand),
    )


# =============================================================================
# Main Entry Point
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gridrestart.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
