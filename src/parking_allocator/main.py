"""Main application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .api.router import init_router, router
from .config import AppConfig, get_config_path, load_config
from .state.lot import ParkingLot

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_app_config() -> AppConfig:
    """Load configuration from the default path, falling back to defaults."""
    config_path = get_config_path()
    if not config_path.exists():
        logger.warning(f"Configuration file not found: {config_path}")
        logger.warning("Using default lot capacities")
        return AppConfig()

    config = load_config(config_path)
    logger.info(f"Loaded configuration from {config_path}")
    return config


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Parking Spot Allocator...")

    config = load_app_config()
    logging.getLogger().setLevel(config.logging.level)

    lot = ParkingLot.from_config(config.lot)
    init_router(lot)

    logger.info(f"Parking Spot Allocator ready on http://{config.api.host}:{config.api.port}")

    yield  # Application runs here

    logger.info("Shutting down...")
    init_router(None)
    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Parking Spot Allocator",
    description="API for allocating parking spots to vehicles by size class",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


def main():
    """Run the application."""
    # Load config just to get API settings
    config = load_app_config()

    uvicorn.run(
        "parking_allocator.main:app",
        host=config.api.host,
        port=config.api.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
