"""
Endpoints de la API v1.
"""
from app.api.v1.endpoints import (
    users,
    members,
    classified_ads,
    photos,
)

__all__ = [
    "users",
    "members",
    "classified_ads",
    "photos",
]
