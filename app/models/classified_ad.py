"""
Modelo ORM para Anuncios clasificados.
"""
from sqlalchemy import Column, String, Integer, Numeric, DateTime, ForeignKey, CheckConstraint, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base


class ClassifiedAd(Base):
    """Modelo de Anuncios publicados por un usuario."""

    __tablename__ = "classified_ads"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    price = Column(Numeric(12, 2), default=0)
    city = Column(String(100))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Constraints
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_positive'),
    )

    # Relationships
    user = relationship("User", back_populates="classified_ads")
    photos = relationship(
        "Photo",
        back_populates="classified_ad",
        cascade="all, delete-orphan",
        order_by="Photo.id",
    )

    def __repr__(self):
        return f"<ClassifiedAd {self.title} by user {self.user_id}>"

    @property
    def main_photo(self):
        """Foto principal del anuncio, o None si no tiene fotos."""
        return next((photo for photo in self.photos if photo.is_main), None)

    @property
    def main_photo_url(self):
        photo = self.main_photo
        return photo.url if photo else None
