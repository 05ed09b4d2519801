"""
Schemas para usuarios.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class UserForDetailed(BaseModel):
    """Schema de perfil detallado de usuario (pantalla de edición)."""

    id: int
    username: str
    known_as: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    city: Optional[str] = None
    country: Optional[str] = None
    introduction: Optional[str] = None
    created_at: Optional[datetime] = None
    last_active: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MemberEditResolution(BaseModel):
    """
    Resultado de resolver el usuario actual antes de abrir la pantalla de edición.

    Exactamente uno de `user` o `redirect_to` viene informado.
    """

    user: Optional[UserForDetailed] = None
    notification: Optional[str] = None
    redirect_to: Optional[str] = None
