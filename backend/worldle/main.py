from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .database.session import init_db
from .routers import game
from .config import get_settings
from .utils.logger import get_logger, setup_logging

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events for the application."""
    setup_logging(json_logs=settings.LOG_JSON or settings.is_production)
    await init_db()
    city = game.daily_service.city_for_today()
    logger.info("startup", cities=len(game.daily_service.catalog), todays_city=city.name)
    yield


# Create FastAPI application
app = FastAPI(
    title="Worldle",
    description="Daily city guessing game: one city per day, scored by distance and geography",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify your frontend domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(game.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to Worldle API",
        "docs": "/docs",
        "health": "ok"
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
