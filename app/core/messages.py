"""
Catálogo de mensajes localizados para respuestas de la API.

Los mensajes son datos puros; translate() solo formatea.
El idioma por defecto es el macedonio ("mk"), con inglés como alternativa.
"""
from typing import Dict, Optional

from app.config import get_settings

SUPPORTED_LOCALES = ("mk", "en")

_MESSAGES: Dict[str, Dict[str, str]] = {
    "mk": {
        "unauthorized": "Немате овластување за оваа акција",
        "ad_not_found": "Огласот не е пронајден",
        "photo_not_found": "Сликата не е пронајдена",
        "user_not_found": "Корисникот не е пронајден",
        "add_photo_failed": "Грешка при додавање на сликата",
        "already_main": "Сликата е веќе главна слика на огласот",
        "no_main_photo": "Огласот нема главна слика",
        "set_main_failed": "Грешка при поставување на сликата главна слика на огласот",
        "cannot_delete_main": "Не можете да ја бришете главната слика",
        "delete_failed": "Грешка при бришење на сликата",
        "remote_delete_failed": "Сликата не може да се избрише од серверот за слики",
        "photo_deleted": "Сликата е избришана",
        "empty_file": "Не е примена ниту една датотека",
        "invalid_extension": "Недозволена екстензија. Користете: {allowed}",
        "file_too_large": "Датотеката е преголема. Максимум: {max_mb:.1f}MB",
        "invalid_image": "Датотеката не е валидна слика",
        "upload_failed": "Грешка при прикачување на сликата",
        "problem_retrieving_data": "Проблем при преземање на вашите податоци {reason}",
        "invalid_token": "Невалиден токен",
    },
    "en": {
        "unauthorized": "You are not authorized to perform this action",
        "ad_not_found": "Classified ad not found",
        "photo_not_found": "Photo not found",
        "user_not_found": "User not found",
        "add_photo_failed": "Could not add the photo",
        "already_main": "This is already the main photo",
        "no_main_photo": "The classified ad has no main photo",
        "set_main_failed": "Could not set the photo to main",
        "cannot_delete_main": "You cannot delete the main photo",
        "delete_failed": "Failed to delete the photo",
        "remote_delete_failed": "The image host could not delete the photo",
        "photo_deleted": "Photo deleted",
        "empty_file": "No file was received",
        "invalid_extension": "Extension not allowed. Use: {allowed}",
        "file_too_large": "File too large. Maximum: {max_mb:.1f}MB",
        "invalid_image": "The file is not a valid image",
        "upload_failed": "Could not upload the photo",
        "problem_retrieving_data": "Problem retrieving your data {reason}",
        "invalid_token": "Invalid token",
    },
}


def normalize_locale(value: Optional[str]) -> str:
    """
    Elegir un idioma soportado a partir de un header Accept-Language.

    Toma la primera etiqueta cuyo idioma principal esté soportado;
    si ninguna coincide, devuelve DEFAULT_LOCALE.
    """
    if value:
        for part in value.split(","):
            tag = part.split(";")[0].strip().lower()
            primary = tag.split("-")[0]
            if primary in SUPPORTED_LOCALES:
                return primary

    default = get_settings().DEFAULT_LOCALE
    return default if default in SUPPORTED_LOCALES else "en"


def translate(key: str, locale: Optional[str] = None, **params) -> str:
    """Obtener el mensaje `key` en `locale`, formateado con `params`."""
    catalog = _MESSAGES.get(locale or normalize_locale(None), _MESSAGES["en"])
    template = catalog.get(key) or _MESSAGES["en"][key]
    return template.format(**params) if params else template
