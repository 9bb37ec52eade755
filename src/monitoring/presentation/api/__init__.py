"""
API package.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from omegaconf import DictConfig

from ...application.service import TrafficDataService
from .routes import streaming, traffic

# Initialize main app
app = FastAPI(title="Traffic Monitoring API")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # The dashboard is served from another origin in development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(traffic.app.router, tags=["traffic"])
app.include_router(streaming.app.router, tags=["streaming"])

def configure(cfg: DictConfig) -> TrafficDataService:
    """Builds the service from the ``monitoring`` config node and plugs it into the routes."""
    service = TrafficDataService.from_config(cfg)
    traffic.init_service(service)
    return service
