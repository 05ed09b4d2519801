"""
Servicio de ciclo de vida de fotos de anuncios.

Invariantes:
    - Toda operación de escritura verifica primero que el usuario autenticado
      coincide con el user_id de la ruta, antes de tocar la base o el host
    - Como máximo una foto por anuncio es principal, y exactamente una cuando
      el anuncio tiene fotos; la primera foto subida pasa a ser principal
    - La foto principal no se puede eliminar
    - El registro local solo se elimina si el host confirmó el borrado remoto

Una foto que no pertenece al anuncio indicado se reporta como
UnauthorizedException, igual que un usuario distinto al del token.
"""
import logging
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from app.core.exceptions import (
    NotFoundException,
    UnauthorizedException,
    InvalidStateException,
    PersistenceException,
    RemoteDeleteFailedException,
    InvalidFileException,
    ImageHostException,
)
from app.core.messages import translate
from app.crud.classified_ad import classified_ad as crud_classified_ad
from app.models.classified_ad import ClassifiedAd
from app.models.photo import Photo
from app.schemas.photo import PhotoForCreation
from app.services.image_host import ImageHost, ImageTransform, DESTROY_OK

logger = logging.getLogger(__name__)


def _stream_size(stream) -> int:
    """Tamaño en bytes de un stream posicionable, dejándolo al inicio."""
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(0)
    return size


class PhotoService:
    """Orquesta base de datos y host de imágenes para las fotos de un anuncio."""

    def __init__(
        self,
        db: Session,
        image_host: ImageHost,
        transform: ImageTransform,
        locale: Optional[str] = None
    ):
        self.db = db
        self.image_host = image_host
        self.transform = transform
        self.locale = locale

    def _t(self, key: str, **params) -> str:
        return translate(key, self.locale, **params)

    def _authorize(self, user_id: int, current_user_id: int) -> None:
        if user_id != current_user_id:
            logger.warning(f"Usuario {current_user_id} intentó operar sobre fotos de {user_id}")
            raise UnauthorizedException(self._t("unauthorized"))

    def _get_owned_ad(self, user_id: int, classified_ad_id: int) -> ClassifiedAd:
        ad = crud_classified_ad.get_classified_ad_detail(self.db, classified_ad_id)
        if ad is None:
            raise NotFoundException(self._t("ad_not_found"))
        if ad.user_id != user_id:
            raise UnauthorizedException(self._t("unauthorized"))
        return ad

    def _get_photo_in_ad(self, ad: ClassifiedAd, photo_id: int) -> Photo:
        if not any(photo.id == photo_id for photo in ad.photos):
            raise UnauthorizedException(self._t("unauthorized"))
        return crud_classified_ad.get_photo(self.db, photo_id)

    def get_photo(self, photo_id: int) -> Photo:
        """
        Obtener una foto por ID.

        Raises:
            NotFoundException: Si la foto no existe
        """
        photo = crud_classified_ad.get_photo(self.db, photo_id)
        if photo is None:
            raise NotFoundException(self._t("photo_not_found"))
        return photo

    async def _upload(self, file: UploadFile) -> dict:
        """Validar y subir el archivo; el stream se cierra siempre."""
        try:
            stream = file.file
            is_valid, error_msg = self.image_host.validate_image(
                file.filename, _stream_size(stream), self.locale
            )
            if not is_valid:
                raise InvalidFileException(error_msg)

            try:
                return await self.image_host.upload(stream, file.filename, self.transform)
            except ValueError:
                raise InvalidFileException(self._t("invalid_image"))
            except RuntimeError:
                raise ImageHostException(self._t("upload_failed"))
        finally:
            await file.close()

    async def _discard_upload(self, public_id: Optional[str]) -> None:
        """Eliminar del host una imagen que no llegó a registrarse."""
        if not public_id:
            return
        result = await self.image_host.destroy(public_id)
        if result.get("result") != DESTROY_OK:
            logger.error(f"Imagen huérfana en el host: {public_id} ({result.get('result')})")

    async def add_photo(
        self,
        user_id: int,
        current_user_id: int,
        classified_ad_id: int,
        file: UploadFile,
        photo_in: PhotoForCreation
    ) -> Photo:
        """
        Subir una foto y agregarla a un anuncio.

        Si el anuncio no tiene foto principal, la nueva foto lo será.
        Si el commit falla, la imagen ya subida se elimina del host.

        Raises:
            UnauthorizedException: Usuario distinto o anuncio ajeno
            NotFoundException: Anuncio inexistente
            InvalidFileException: Archivo vacío, extensión no permitida o no es imagen
            ImageHostException: Fallo del host al subir
            PersistenceException: No se pudo guardar
        """
        self._authorize(user_id, current_user_id)
        ad = self._get_owned_ad(user_id, classified_ad_id)

        result = await self._upload(file)
        photo_in.url = result["url"]
        photo_in.public_id = result["public_id"]

        photo = Photo(
            url=photo_in.url,
            public_id=photo_in.public_id,
            description=photo_in.description,
            date_added=photo_in.date_added,
            is_main=False,
        )

        if not any(p.is_main for p in ad.photos):
            photo.is_main = True

        ad.photos.append(photo)

        if crud_classified_ad.save_all(self.db):
            self.db.refresh(photo)
            logger.info(f"Foto {photo.id} agregada al anuncio {ad.id} (principal={photo.is_main})")
            return photo

        await self._discard_upload(photo_in.public_id)
        raise PersistenceException(self._t("add_photo_failed"))

    def set_main_photo(
        self,
        user_id: int,
        current_user_id: int,
        classified_ad_id: int,
        photo_id: int
    ) -> None:
        """
        Marcar una foto como principal, desmarcando la anterior en el mismo commit.

        Raises:
            UnauthorizedException: Usuario distinto, anuncio ajeno o foto fuera del anuncio
            InvalidStateException: La foto ya es la principal
            PersistenceException: El anuncio no tiene foto principal o no se pudo guardar
        """
        self._authorize(user_id, current_user_id)
        ad = self._get_owned_ad(user_id, classified_ad_id)
        photo = self._get_photo_in_ad(ad, photo_id)

        if photo.is_main:
            raise InvalidStateException(self._t("already_main"))

        current_main = crud_classified_ad.get_main_photo_for_classified_ad(self.db, ad.id)
        if current_main is None:
            logger.error(f"Anuncio {ad.id} tiene fotos pero ninguna principal")
            raise PersistenceException(self._t("no_main_photo"))

        current_main.is_main = False
        photo.is_main = True

        if not crud_classified_ad.save_all(self.db):
            raise PersistenceException(self._t("set_main_failed"))

        logger.info(f"Foto {photo_id} es ahora la principal del anuncio {ad.id}")

    async def delete_photo(
        self,
        user_id: int,
        current_user_id: int,
        classified_ad_id: int,
        photo_id: int
    ) -> None:
        """
        Eliminar una foto que no es la principal.

        Si la foto tiene public_id, primero se elimina del host; el registro
        local solo se borra cuando el host responde "ok".

        Raises:
            UnauthorizedException: Usuario distinto, anuncio ajeno o foto fuera del anuncio
            InvalidStateException: La foto es la principal
            RemoteDeleteFailedException: El host no confirmó la eliminación
            PersistenceException: No se pudo guardar
        """
        self._authorize(user_id, current_user_id)
        ad = self._get_owned_ad(user_id, classified_ad_id)
        photo = self._get_photo_in_ad(ad, photo_id)

        if photo.is_main:
            raise InvalidStateException(self._t("cannot_delete_main"))

        if photo.public_id is not None:
            result = await self.image_host.destroy(photo.public_id)
            if result.get("result") != DESTROY_OK:
                logger.warning(
                    f"El host no eliminó {photo.public_id}: {result.get('result')}"
                )
                raise RemoteDeleteFailedException(self._t("remote_delete_failed"))

        crud_classified_ad.delete(self.db, photo)

        if not crud_classified_ad.save_all(self.db):
            logger.error(f"No se pudo eliminar la foto {photo_id} de la base")
            raise PersistenceException(self._t("delete_failed"))

        logger.info(f"Foto {photo_id} eliminada del anuncio {ad.id}")
