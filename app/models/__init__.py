"""
Módulo de modelos ORM.
Importa todos los modelos para que SQLAlchemy los reconozca.
"""
from app.db.base import Base

# Usuarios
from app.models.user import User

# Anuncios
from app.models.classified_ad import ClassifiedAd
from app.models.photo import Photo

__all__ = [
    "Base",
    "User",
    "ClassifiedAd",
    "Photo",
]
