from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sga_transcoder import __version__
from sga_transcoder.api.endpoints import alphabet, health, transcode
from sga_transcoder.config import Settings, load_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="SGA Transcoder API",
        description="Converts text between Latin script and the Standard Galactic Alphabet",
        version=__version__,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(transcode.router, prefix="/api/v1/transcode", tags=["transcode"])
    app.include_router(alphabet.router, prefix="/api/v1/alphabet", tags=["alphabet"])

    @app.get("/")
    async def root():
        return {
            "message": "SGA Transcoder API",
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


app = create_app()
