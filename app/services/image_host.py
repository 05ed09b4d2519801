"""
Cliente del host de imágenes.
Soporta almacenamiento local (desarrollo) y Cloudflare R2 (producción).

Se construye una sola vez al iniciar la aplicación (ver app.main) y se
inyecta en los endpoints con la dependencia get_image_host.

Uso:
    host = build_image_host(get_settings())

    result = await host.upload(stream, "foto.jpg", ImageTransform(500, 500))
    # result = {"url": "https://...", "public_id": "classified-ads/abc123.jpg", "size": 12345}

    result = await host.destroy("classified-ads/abc123.jpg")
    # result = {"result": "ok"}
"""
import io
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional

import aioboto3
from PIL import Image, ImageOps, UnidentifiedImageError

from app.config import Settings
from app.core.messages import translate

logger = logging.getLogger(__name__)

DESTROY_OK = "ok"
DESTROY_NOT_FOUND = "not found"
DESTROY_ERROR = "error"


class StorageFolder(str, Enum):
    """Carpetas disponibles para almacenamiento."""
    CLASSIFIED_ADS = "classified-ads"


@dataclass(frozen=True)
class ImageTransform:
    """Caja máxima (ancho x alto) a la que se ajusta cada imagen."""
    width: int
    height: int


# Formatos que se conservan; el resto se guarda como JPEG
_KEEP_FORMATS = {"JPEG": "jpg", "PNG": "png", "GIF": "gif", "WEBP": "webp"}


def apply_transform(content: bytes, transform: ImageTransform) -> tuple[bytes, str]:
    """
    Ajustar una imagen a la caja del transform conservando la proporción.

    Las imágenes más pequeñas que la caja no se amplían. Se respeta la
    orientación EXIF y se rechazan imágenes con demasiados píxeles.

    Returns:
        (bytes_transformados, extensión)

    Raises:
        ValueError: Si el contenido no es una imagen reconocible
    """
    try:
        img = Image.open(io.BytesIO(content))
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ValueError(f"Contenido no reconocido como imagen: {e}")

    fmt = (img.format or "JPEG").upper()
    if fmt not in _KEEP_FORMATS:
        fmt = "JPEG"

    # Orientación EXIF antes de ajustar la caja
    img = ImageOps.exif_transpose(img)
    img.thumbnail((transform.width, transform.height))

    if fmt == "JPEG" and img.mode not in ("RGB", "L"):
        img = img.convert("RGB")

    buf = io.BytesIO()
    img.save(buf, fmt)
    return buf.getvalue(), _KEEP_FORMATS[fmt]


class ImageHost:
    """
    Host de imágenes: sube, transforma y elimina imágenes.
    Soporta almacenamiento local y Cloudflare R2.
    """

    ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

    def __init__(self, settings: Settings):
        self.r2_enabled = settings.R2_ENABLED
        self.upload_dir = Path(settings.UPLOAD_DIR)
        self.max_file_size = settings.MAX_FILE_SIZE

        # URL base de la API (para almacenamiento local)
        self.api_base_url = settings.API_BASE_URL.rstrip("/")

        # Configuración R2
        self.r2_account_id = settings.R2_ACCOUNT_ID
        self.r2_access_key = settings.R2_ACCESS_KEY_ID
        self.r2_secret_key = settings.R2_SECRET_ACCESS_KEY
        self.r2_bucket = settings.R2_BUCKET_NAME
        self.r2_public_url = settings.R2_PUBLIC_URL.rstrip("/")

        # Endpoint de Cloudflare R2
        self.r2_endpoint = f"https://{self.r2_account_id}.r2.cloudflarestorage.com"

        if not self.r2_enabled:
            self.upload_dir.mkdir(parents=True, exist_ok=True)

        mode = "R2" if self.r2_enabled else "Local"
        logger.info(f"ImageHost inicializado en modo: {mode}")

    def is_configured(self) -> bool:
        """Verifica si el host está correctamente configurado."""
        if not self.r2_enabled:
            return True  # Local siempre está disponible

        return bool(
            self.r2_account_id and
            self.r2_access_key and
            self.r2_secret_key and
            self.r2_bucket
        )

    def _get_extension(self, filename: str) -> str:
        """Obtener extensión del archivo."""
        return Path(filename).suffix.lower()

    def _generate_public_id(self, folder: StorageFolder, ext: str) -> str:
        """Generar identificador único para la imagen."""
        return f"{folder.value}/{uuid.uuid4().hex[:12]}.{ext}"

    def validate_image(self, filename: str, size: int, locale: Optional[str] = None) -> tuple[bool, str]:
        """
        Validar imagen antes de subirla.

        Returns:
            (is_valid, error_message)
        """
        if not filename or size == 0:
            return False, translate("empty_file", locale)

        ext = self._get_extension(filename)

        if ext not in self.ALLOWED_IMAGE_EXTENSIONS:
            allowed = ", ".join(sorted(self.ALLOWED_IMAGE_EXTENSIONS))
            return False, translate("invalid_extension", locale, allowed=allowed)

        if size > self.max_file_size:
            max_mb = self.max_file_size / (1024 * 1024)
            return False, translate("file_too_large", locale, max_mb=max_mb)

        return True, ""

    def _get_content_type(self, ext: str) -> str:
        """Obtener Content-Type basado en extensión."""
        content_types = {
            "jpg": "image/jpeg",
            "png": "image/png",
            "gif": "image/gif",
            "webp": "image/webp",
        }
        return content_types.get(ext, "application/octet-stream")

    async def upload(
        self,
        stream: BinaryIO,
        filename: str,
        transform: ImageTransform,
        folder: StorageFolder = StorageFolder.CLASSIFIED_ADS
    ) -> dict:
        """
        Subir una imagen aplicando el transform.

        Args:
            stream: Stream abierto con el contenido original
            filename: Nombre original del archivo
            transform: Caja máxima a aplicar
            folder: Carpeta destino

        Returns:
            {
                "url": "https://cdn.example.com/classified-ads/abc123.jpg",
                "public_id": "classified-ads/abc123.jpg",
                "size": 123456
            }

        Raises:
            ValueError: Si el contenido no es una imagen
            RuntimeError: Si falla el almacenamiento
        """
        content, ext = apply_transform(stream.read(), transform)
        public_id = self._generate_public_id(folder, ext)

        if self.r2_enabled:
            return await self._upload_to_r2(content, public_id, ext)
        return await self._upload_to_local(content, public_id)

    async def _upload_to_r2(self, content: bytes, public_id: str, ext: str) -> dict:
        """Subir imagen a Cloudflare R2."""
        try:
            session = aioboto3.Session()

            async with session.client(
                "s3",
                endpoint_url=self.r2_endpoint,
                aws_access_key_id=self.r2_access_key,
                aws_secret_access_key=self.r2_secret_key,
                region_name="auto"
            ) as s3:
                await s3.put_object(
                    Bucket=self.r2_bucket,
                    Key=public_id,
                    Body=content,
                    ContentType=self._get_content_type(ext)
                )

            logger.info(f"Imagen subida a R2: {public_id}")

            return {
                "url": f"{self.r2_public_url}/{public_id}",
                "public_id": public_id,
                "size": len(content),
            }

        except Exception as e:
            logger.error(f"Error subiendo a R2: {e}")
            raise RuntimeError(f"Error al subir imagen a R2: {e}")

    async def _upload_to_local(self, content: bytes, public_id: str) -> dict:
        """Guardar imagen en almacenamiento local."""
        try:
            file_path = self.upload_dir / public_id
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(content)

            logger.info(f"Imagen guardada localmente: {file_path}")

            return {
                "url": f"{self.api_base_url}/uploads/{public_id}",
                "public_id": public_id,
                "size": len(content),
            }

        except OSError as e:
            logger.error(f"Error guardando localmente: {e}")
            raise RuntimeError(f"Error al guardar imagen: {e}")

    async def destroy(self, public_id: str) -> dict:
        """
        Eliminar una imagen del host.

        Returns:
            {"result": "ok"} si se eliminó; "not found" o "error" en otro caso
        """
        if not public_id:
            return {"result": DESTROY_NOT_FOUND}

        if self.r2_enabled:
            return await self._destroy_from_r2(public_id)
        return await self._destroy_from_local(public_id)

    async def _destroy_from_r2(self, public_id: str) -> dict:
        """Eliminar imagen de Cloudflare R2."""
        try:
            session = aioboto3.Session()

            async with session.client(
                "s3",
                endpoint_url=self.r2_endpoint,
                aws_access_key_id=self.r2_access_key,
                aws_secret_access_key=self.r2_secret_key,
                region_name="auto"
            ) as s3:
                await s3.delete_object(
                    Bucket=self.r2_bucket,
                    Key=public_id
                )

            logger.info(f"Imagen eliminada de R2: {public_id}")
            return {"result": DESTROY_OK}

        except Exception as e:
            logger.error(f"Error eliminando de R2: {e}")
            return {"result": DESTROY_ERROR}

    async def _destroy_from_local(self, public_id: str) -> dict:
        """Eliminar imagen de almacenamiento local."""
        try:
            file_path = self.upload_dir / public_id

            if not file_path.exists():
                logger.warning(f"Imagen no encontrada: {file_path}")
                return {"result": DESTROY_NOT_FOUND}

            file_path.unlink()
            logger.info(f"Imagen eliminada localmente: {file_path}")
            return {"result": DESTROY_OK}

        except OSError as e:
            logger.error(f"Error eliminando localmente: {e}")
            return {"result": DESTROY_ERROR}


def build_image_host(settings: Settings) -> ImageHost:
    """Construir el host de imágenes a partir de la configuración."""
    host = ImageHost(settings)
    if not host.is_configured():
        logger.warning("R2 habilitado pero sin credenciales completas")
    return host
