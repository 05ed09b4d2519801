"""
Endpoints para gestión de fotos de anuncios.

Todas las rutas cuelgan de /{user_id}/photos; las de escritura exigen
que el usuario del token sea {user_id}.
"""
from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile, status
from typing import Optional

from app.core.deps import get_current_user_id, get_locale, get_photo_service
from app.core.messages import translate
from app.schemas.common import MessageResponse
from app.schemas.photo import PhotoForCreation, PhotoForReturn
from app.services.photo_service import PhotoService


router = APIRouter()


@router.get("/{user_id}/photos/{id}", response_model=PhotoForReturn, name="get_photo")
def get_photo(
    user_id: int,
    id: int,
    service: PhotoService = Depends(get_photo_service)
):
    """
    Obtener una foto por ID.

    No verifica el dueño del anuncio.
    """
    return PhotoForReturn.model_validate(service.get_photo(id))


@router.post(
    "/{user_id}/photos/{classified_ad_id}",
    response_model=PhotoForReturn,
    status_code=status.HTTP_201_CREATED
)
async def add_photo(
    user_id: int,
    classified_ad_id: int,
    request: Request,
    response: Response,
    file: UploadFile = File(...),
    description: Optional[str] = Form(None, max_length=500),
    current_user_id: int = Depends(get_current_user_id),
    service: PhotoService = Depends(get_photo_service)
):
    """
    Subir una foto y agregarla a un anuncio.

    La imagen se ajusta a 500x500 como máximo.
    Si el anuncio no tiene foto principal, esta pasa a serlo.
    """
    photo = await service.add_photo(
        user_id,
        current_user_id,
        classified_ad_id,
        file,
        PhotoForCreation(description=description),
    )

    response.headers["Location"] = str(
        request.url_for("get_photo", user_id=user_id, id=photo.id)
    )
    return PhotoForReturn.model_validate(photo)


@router.post(
    "/{user_id}/photos/{classified_ad_id}/setMain/{photo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
def set_main_photo(
    user_id: int,
    classified_ad_id: int,
    photo_id: int,
    current_user_id: int = Depends(get_current_user_id),
    service: PhotoService = Depends(get_photo_service)
):
    """Marcar una foto como principal del anuncio."""
    service.set_main_photo(user_id, current_user_id, classified_ad_id, photo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}/photos/{classified_ad_id}/{photo_id}", response_model=MessageResponse)
async def delete_photo(
    user_id: int,
    classified_ad_id: int,
    photo_id: int,
    current_user_id: int = Depends(get_current_user_id),
    locale: str = Depends(get_locale),
    service: PhotoService = Depends(get_photo_service)
):
    """
    Eliminar una foto del anuncio.

    La foto principal no se puede eliminar.
    También elimina la imagen del host.
    """
    await service.delete_photo(user_id, current_user_id, classified_ad_id, photo_id)
    return MessageResponse(message=translate("photo_deleted", locale))
