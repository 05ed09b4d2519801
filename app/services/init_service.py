"""
Servicio de inicialización de la aplicación.
Prepara la base de datos al arrancar.
"""
import logging

from app.config import get_settings
from app.db.base import Base
from app.db.session import engine

# Registrar todos los modelos en Base.metadata
import app.models  # noqa: F401

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configurar el logging raíz según LOG_LEVEL."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_tables() -> None:
    """Crear las tablas que falten."""
    Base.metadata.create_all(bind=engine)
    logger.info("Tablas verificadas/creadas")


def run_initialization() -> None:
    """
    Ejecutar la inicialización completa.

    Solo crea tablas si AUTO_CREATE_TABLES está activo; en producción
    el esquema lo gestionan las migraciones.
    """
    settings = get_settings()

    if settings.AUTO_CREATE_TABLES:
        create_tables()
    else:
        logger.info("AUTO_CREATE_TABLES desactivado, se omite la creación de tablas")
