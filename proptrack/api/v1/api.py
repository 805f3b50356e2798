"""Router API principal v1"""
from fastapi import APIRouter
from proptrack.api.v1.endpoints import properties

# Créer le router principal
api_router = APIRouter()

# ==================== PROPERTIES ====================
api_router.include_router(
    properties.router,
    prefix="/properties",
    tags=["Properties"]
)
