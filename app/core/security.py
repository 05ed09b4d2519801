"""
Utilidades de seguridad: JWT.

Creación y decodificación de access tokens (claim `sub` con el ID numérico
del usuario).
"""
from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from jose import jwt
from app.config import settings


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Crear un JWT access token.

    Args:
        data: Datos a codificar en el token (ej: {"sub": "42"})
        expires_delta: Tiempo de expiración personalizado

    Returns:
        Token JWT codificado
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire, "type": "access"})

    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decodificar y verificar un JWT.

    Args:
        token: Token JWT a decodificar

    Returns:
        Payload del token

    Raises:
        JWTError: Si el token es inválido o expiró
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def parse_subject(payload: Dict[str, Any]) -> Optional[int]:
    """
    Extraer el ID numérico del usuario desde el claim `sub`.

    Returns:
        ID del usuario, o None si falta, no es numérico o no es un access token
    """
    subject = payload.get("sub")
    if subject is None or payload.get("type") != "access":
        return None
    try:
        return int(subject)
    except (TypeError, ValueError):
        return None
