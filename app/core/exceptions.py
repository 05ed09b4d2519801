"""
Excepciones personalizadas para la aplicación FreeAds.

Cada excepción lleva un mensaje ya localizado; los handlers de
app.main las convierten en respuestas JSON con su código HTTP.
"""


class FreeAdsException(Exception):
    """Excepción base para todas las excepciones de FreeAds."""

    def __init__(self, message: str = "Error en la aplicación"):
        self.message = message
        super().__init__(self.message)


class NotFoundException(FreeAdsException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(self, message: str = "Recurso no encontrado"):
        super().__init__(message)


class UnauthorizedException(FreeAdsException):
    """
    Excepción cuando el usuario no está autorizado.

    También se usa cuando la foto no pertenece al anuncio indicado.
    """

    def __init__(self, message: str = "No autorizado"):
        super().__init__(message)


class BadRequestException(FreeAdsException):
    """Excepción cuando la solicitud es inválida."""

    def __init__(self, message: str = "Solicitud inválida"):
        super().__init__(message)


class InvalidStateException(BadRequestException):
    """La operación violaría la invariante de foto principal."""

    def __init__(self, message: str = "Estado inválido"):
        super().__init__(message)


class PersistenceException(BadRequestException):
    """No se pudieron guardar los cambios en la base de datos."""

    def __init__(self, message: str = "Error al guardar los cambios"):
        super().__init__(message)


class RemoteDeleteFailedException(BadRequestException):
    """El host de imágenes no confirmó la eliminación."""

    def __init__(self, message: str = "Error al eliminar la imagen remota"):
        super().__init__(message)


class InvalidFileException(BadRequestException):
    """El archivo subido está vacío o no es una imagen válida."""

    def __init__(self, message: str = "Archivo inválido"):
        super().__init__(message)


class ImageHostException(BadRequestException):
    """Fallo del host de imágenes al subir un archivo."""

    def __init__(self, message: str = "Error del host de imágenes"):
        super().__init__(message)
