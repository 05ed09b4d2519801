"""
Endpoints de consulta de anuncios clasificados.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_locale
from app.core.exceptions import NotFoundException
from app.core.messages import translate
from app.crud.classified_ad import classified_ad as crud_classified_ad
from app.schemas.classified_ad import ClassifiedAdDetail, ClassifiedAdForList
from app.schemas.common import PaginatedResponse
from app.schemas.photo import PhotoForReturn

router = APIRouter()


@router.get("", response_model=PaginatedResponse[ClassifiedAdForList])
def list_classified_ads(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db)
):
    """
    Listar anuncios, más recientes primero.

    Endpoint público - no requiere autenticación.
    """
    ads = crud_classified_ad.get_multi_with_photos(db, skip=skip, limit=limit)
    total = crud_classified_ad.get_count(db)

    return PaginatedResponse[ClassifiedAdForList](
        items=[ClassifiedAdForList.model_validate(ad) for ad in ads],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/{classified_ad_id}", response_model=ClassifiedAdDetail)
def get_classified_ad(
    classified_ad_id: int,
    db: Session = Depends(get_db),
    locale: str = Depends(get_locale)
):
    """
    Obtener el detalle de un anuncio con sus fotos.

    La foto principal va primero.
    """
    ad = crud_classified_ad.get_classified_ad_detail(db, classified_ad_id)

    if not ad:
        raise NotFoundException(translate("ad_not_found", locale))

    detail = ClassifiedAdDetail.model_validate(ad)
    detail.photos = sorted(
        (PhotoForReturn.model_validate(photo) for photo in ad.photos),
        key=lambda photo: (not photo.is_main, photo.id),
    )
    return detail
