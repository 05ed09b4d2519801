"""
Schemas para anuncios clasificados.
"""
from pydantic import BaseModel
from typing import List, Optional
from decimal import Decimal
from datetime import datetime

from app.schemas.photo import PhotoForReturn


class ClassifiedAdForList(BaseModel):
    """Schema resumido para listados."""

    id: int
    user_id: int
    title: str
    price: Optional[Decimal] = None
    city: Optional[str] = None
    created_at: Optional[datetime] = None
    main_photo_url: Optional[str] = None

    model_config = {"from_attributes": True}


class ClassifiedAdDetail(ClassifiedAdForList):
    """Schema de detalle con todas las fotos."""

    description: Optional[str] = None
    photos: List[PhotoForReturn] = []
