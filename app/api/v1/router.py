"""
Router principal de la API v1.
Incluye todos los endpoints de la aplicación.
"""
from fastapi import APIRouter

from app.api.v1.endpoints import (
    users,
    members,
    classified_ads,
    photos,
)

api_router = APIRouter()

# ============================================================================
# USUARIOS
# ============================================================================
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Usuarios"]
)

api_router.include_router(
    members.router,
    prefix="/members",
    tags=["Usuarios"]
)

# ============================================================================
# ANUNCIOS
# ============================================================================
api_router.include_router(
    classified_ads.router,
    prefix="/classified-ads",
    tags=["Anuncios"]
)

api_router.include_router(
    photos.router,
    prefix="",  # Las rutas ya incluyen /{user_id}/photos
    tags=["Fotos"]
)
