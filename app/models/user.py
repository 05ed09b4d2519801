"""
Modelo ORM para Usuarios.
"""
from sqlalchemy import Column, String, Integer, Date, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base


class User(Base):
    """Modelo de Usuarios (anunciantes) del sistema."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    known_as = Column(String(100))
    gender = Column(String(20))
    date_of_birth = Column(Date)
    city = Column(String(100))
    country = Column(String(100))
    introduction = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_active = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    classified_ads = relationship("ClassifiedAd", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.username}>"
