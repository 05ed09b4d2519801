"""
Resolución del usuario actual para la pantalla de edición de perfil.

Nunca propaga errores: cualquier fallo se convierte en una resolución
fallida con una notificación para el usuario y la ruta a la que el
frontend debe redirigir.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from jose import JWTError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.exceptions import FreeAdsException, NotFoundException, UnauthorizedException
from app.core.messages import translate
from app.core.security import decode_token, parse_subject
from app.crud.user import user as crud_user
from app.models.user import User
from app.schemas.user import MemberEditResolution, UserForDetailed

logger = logging.getLogger(__name__)


@dataclass
class UserResolution:
    """Resultado explícito: el usuario o el motivo del fallo."""
    user: Optional[User] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.user is not None


def resolve_current_user(db: Session, token: Optional[str], locale: Optional[str] = None) -> UserResolution:
    """
    Obtener el usuario indicado por el claim `sub` del token.

    Args:
        db: Sesión de base de datos
        token: Bearer token (puede faltar)
        locale: Idioma de los mensajes

    Returns:
        UserResolution con el usuario, o con el error si algo falló
    """
    try:
        if not token:
            raise UnauthorizedException(translate("invalid_token", locale))

        user_id = parse_subject(decode_token(token))
        if user_id is None:
            raise UnauthorizedException(translate("invalid_token", locale))

        user = crud_user.get(db, id=user_id)
        if user is None:
            raise NotFoundException(translate("user_not_found", locale))

        return UserResolution(user=user)

    except JWTError:
        return UserResolution(error=translate("invalid_token", locale))
    except FreeAdsException as e:
        return UserResolution(error=e.message)
    except SQLAlchemyError as e:
        logger.error(f"Error consultando usuario actual: {e}")
        return UserResolution(error=str(e.__class__.__name__))


def to_member_edit_resolution(resolution: UserResolution, locale: Optional[str] = None) -> MemberEditResolution:
    """
    Convertir la resolución en la respuesta que consume el router del frontend.

    En caso de fallo se informa la notificación y la ruta por defecto.
    """
    if resolution.succeeded:
        return MemberEditResolution(user=UserForDetailed.model_validate(resolution.user))

    notification = translate("problem_retrieving_data", locale, reason=resolution.error)
    logger.info(f"No se pudo resolver el usuario actual: {resolution.error}")

    return MemberEditResolution(
        notification=notification,
        redirect_to=get_settings().DEFAULT_REDIRECT_PATH,
    )
