"""
Endpoints de resolución del miembro actual.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_bearer_token, get_locale
from app.schemas.user import MemberEditResolution
from app.services.member_resolver import resolve_current_user, to_member_edit_resolution

router = APIRouter()


@router.get("/edit", response_model=MemberEditResolution)
def resolve_member_edit(
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db),
    locale: str = Depends(get_locale)
):
    """
    Precargar el perfil del usuario autenticado antes de abrir la edición.

    Siempre responde 200: si no se puede obtener el usuario, devuelve
    `notification` y `redirect_to` en lugar de `user`.
    """
    resolution = resolve_current_user(db, token, locale)
    return to_member_edit_resolution(resolution, locale)
