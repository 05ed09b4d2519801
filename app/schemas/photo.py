"""
Schemas para fotos de anuncios.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class PhotoForCreation(BaseModel):
    """Metadatos enviados junto al archivo al crear una foto."""

    description: Optional[str] = Field(None, max_length=500)
    date_added: datetime = Field(default_factory=datetime.utcnow)

    # Informados tras la subida al host de imágenes
    url: Optional[str] = None
    public_id: Optional[str] = None


class PhotoForReturn(BaseModel):
    """Proyección segura de una foto para devolver al cliente."""

    id: int
    url: Optional[str] = None
    description: Optional[str] = None
    date_added: Optional[datetime] = None
    is_main: bool
    public_id: Optional[str] = None

    model_config = {"from_attributes": True}
