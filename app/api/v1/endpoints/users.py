"""
Endpoints de usuarios.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_locale
from app.core.exceptions import NotFoundException
from app.core.messages import translate
from app.crud.user import user as crud_user
from app.schemas.user import UserForDetailed

router = APIRouter()


@router.get("/{user_id}", response_model=UserForDetailed)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    locale: str = Depends(get_locale)
):
    """
    Obtener el perfil detallado de un usuario.

    No requiere autenticación.
    """
    user = crud_user.get(db, id=user_id)

    if not user:
        raise NotFoundException(translate("user_not_found", locale))

    return user
