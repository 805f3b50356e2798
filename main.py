"""PropTrack - Application principale"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from proptrack.core.config import settings
from proptrack.api.errors import register_exception_handlers
from proptrack.api.v1.api import api_router
from proptrack.db import get_supabase
import logging

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="API PropTrack - Gestion de biens, locataires et documents",
    version=settings.VERSION,
    debug=settings.DEBUG
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    try:
        get_supabase()
        logger.info("✓ Supabase connecté")
    except Exception as e:
        logger.error(f"✗ Erreur Supabase: {e}")


@app.get("/")
async def root():
    return {
        "app": settings.APP_NAME,
        "version": settings.VERSION,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}

# Routes API
app.include_router(api_router, prefix="/api/v1")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
