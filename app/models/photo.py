"""
Modelo ORM para Fotos de anuncios.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base


class Photo(Base):
    """
    Modelo de Fotos de un anuncio.

    Como máximo una foto por anuncio tiene is_main = True, y exactamente
    una cuando el anuncio tiene al menos una foto.
    """

    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, index=True)
    classified_ad_id = Column(Integer, ForeignKey("classified_ads.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String(500))
    description = Column(String(500))
    date_added = Column(DateTime(timezone=True), server_default=func.now())
    is_main = Column(Boolean, default=False, nullable=False)
    public_id = Column(String(500))  # Identificador en el host de imágenes

    # Relationships
    classified_ad = relationship("ClassifiedAd", back_populates="photos")

    def __repr__(self):
        return f"<Photo {self.id} for classified ad {self.classified_ad_id}>"
