# leadimage/main.py
# Responsibility: Application entry point. Configures and launches the FastAPI app.

import uvicorn
from fastapi import FastAPI

from leadimage.config.settings import settings
from leadimage.logging_setup import configure_logging
from leadimage.routers import images


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    Logging is left to the process entry point.
    """
    app = FastAPI(
        title="Lead Image Resolver",
        description="Picks the representative image of a web article.",
        version="1.0.0",
        debug=settings.SERVER.DEBUG
    )

    # Register Routers
    app.include_router(images.router)

    # Health Check
    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "ok", "version": "1.0.0"}

    return app

# Application instance
app = create_app()

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "leadimage.main:app",
        host=settings.SERVER.HOST,
        port=settings.SERVER.PORT,
        reload=settings.SERVER.DEBUG
    )
