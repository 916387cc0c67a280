import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learning_roadmap.api.pages import router as pages_router
from learning_roadmap.api.roadmap import router as roadmap_router
from learning_roadmap.api.routes import router
from learning_roadmap.config import settings

# Configure logging from settings
logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup: Code that runs when the app starts
    logging.info("=" * 60)
    logging.info(f"🚀 {settings.app_name} starting up...")
    logging.info("=" * 60)

    # App Settings
    logging.info("📋 App Configuration:")
    logging.info(f"  Environment: {settings.environment}")
    logging.info(f"  Debug mode: {settings.debug}")
    logging.info(f"  Log level: {settings.log_level}")

    # Server Settings
    logging.info("🌐 Server Configuration:")
    logging.info(f"  Host: {settings.host}")
    logging.info(f"  Port: {settings.port}")
    logging.info(f"  CORS Origins: {settings.cors_origins}")

    # LLM Settings
    logging.info("🤖 LLM Configuration:")
    logging.info(f"  Gemini Model: {settings.gemini_model}")
    logging.info(
        f"  Gemini API Key: {'✓ Configured' if settings.gemini_api_key else '✗ Not set'}"
    )
    logging.info(f"  Gemini Timeout: {settings.gemini_timeout}s")
    if not settings.gemini_api_key:
        logging.warning("⚠️  Roadmap generation will fail until GEMINI_API_KEY (or API_KEY) is set")

    logging.info("=" * 60)
    logging.info("✅ Startup complete - Ready to accept requests")
    logging.info("=" * 60)

    yield  # App runs here

    # Shutdown: Code that runs when the app shuts down
    logging.info("=" * 60)
    logging.info("🛑 App is shutting down...")
    logging.info("=" * 60)


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

# Add CORS middleware - configured from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages_router)
app.include_router(router, prefix="/api")
app.include_router(roadmap_router, prefix="/api/roadmap", tags=["roadmap"])


def run():
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "learning_roadmap.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
