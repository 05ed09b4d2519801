"""
Repositorio de anuncios clasificados y sus fotos.

Los cambios (altas, bajas, cambios de is_main) quedan pendientes en la
sesión hasta que se llama a save_all(), que los confirma en una sola
transacción.
"""
import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from app.crud.base import CRUDBase
from app.models.classified_ad import ClassifiedAd
from app.models.photo import Photo

logger = logging.getLogger(__name__)


class CRUDClassifiedAd(CRUDBase[ClassifiedAd]):
    """CRUD específico para anuncios y fotos."""

    def get_multi_with_photos(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 20
    ) -> List[ClassifiedAd]:
        """Listar anuncios (más recientes primero) con sus fotos precargadas."""
        return (
            db.query(ClassifiedAd)
            .options(selectinload(ClassifiedAd.photos))
            .order_by(ClassifiedAd.created_at.desc(), ClassifiedAd.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_classified_ad_detail(self, db: Session, classified_ad_id: int) -> Optional[ClassifiedAd]:
        """
        Obtener un anuncio con su colección de fotos.

        Args:
            db: Sesión de base de datos
            classified_ad_id: ID del anuncio

        Returns:
            Anuncio con fotos o None
        """
        return (
            db.query(ClassifiedAd)
            .options(selectinload(ClassifiedAd.photos))
            .filter(ClassifiedAd.id == classified_ad_id)
            .first()
        )

    def get_photo(self, db: Session, photo_id: int) -> Optional[Photo]:
        """Obtener una foto por ID, sin importar el anuncio."""
        return db.query(Photo).filter(Photo.id == photo_id).first()

    def get_main_photo_for_classified_ad(self, db: Session, classified_ad_id: int) -> Optional[Photo]:
        """Obtener la foto principal actual de un anuncio."""
        return (
            db.query(Photo)
            .filter(Photo.classified_ad_id == classified_ad_id, Photo.is_main.is_(True))
            .first()
        )

    def delete(self, db: Session, obj) -> None:
        """Marcar un objeto para eliminación."""
        db.delete(obj)

    def save_all(self, db: Session) -> bool:
        """
        Confirmar todos los cambios pendientes.

        Returns:
            True si el commit fue exitoso, False si falló (la sesión se revierte)
        """
        try:
            db.commit()
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error guardando cambios: {e}")
            return False


classified_ad = CRUDClassifiedAd(ClassifiedAd)
