"""
Dependencias comunes de FastAPI.
"""
from typing import Generator, Optional
from fastapi import Depends, Header, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError

from app.config import get_settings
from app.db.session import SessionLocal
from app.core.security import decode_token, parse_subject
from app.core.exceptions import UnauthorizedException
from app.core.messages import normalize_locale, translate
from app.services.image_host import ImageHost, ImageTransform
from app.services.photo_service import PhotoService

security = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    """
    Dependencia que proporciona una sesión de base de datos.

    Yields:
        Session: Sesión de SQLAlchemy
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_locale(accept_language: Optional[str] = Header(None)) -> str:
    """Idioma de los mensajes según el header Accept-Language."""
    return normalize_locale(accept_language)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """Bearer token crudo, o None si no se envió."""
    return credentials.credentials if credentials else None


async def get_current_user_id(
    token: Optional[str] = Depends(get_bearer_token),
    locale: str = Depends(get_locale)
) -> int:
    """
    Obtener el ID numérico del usuario actual desde el JWT.

    Returns:
        ID del usuario (claim `sub`)

    Raises:
        UnauthorizedException: Si falta el token o es inválido
    """
    if not token:
        raise UnauthorizedException(translate("invalid_token", locale))

    try:
        payload = decode_token(token)
    except JWTError:
        raise UnauthorizedException(translate("invalid_token", locale))

    user_id = parse_subject(payload)
    if user_id is None:
        raise UnauthorizedException(translate("invalid_token", locale))

    return user_id


def get_image_host(request: Request) -> ImageHost:
    """Host de imágenes construido al iniciar la aplicación."""
    return request.app.state.image_host


def get_photo_service(
    db: Session = Depends(get_db),
    image_host: ImageHost = Depends(get_image_host),
    locale: str = Depends(get_locale)
) -> PhotoService:
    """Servicio de fotos ligado a la sesión y al idioma de la petición."""
    settings = get_settings()
    transform = ImageTransform(settings.PHOTO_MAX_WIDTH, settings.PHOTO_MAX_HEIGHT)
    return PhotoService(db, image_host, transform, locale)
