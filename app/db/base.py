"""
Base declarativa de SQLAlchemy.
Todos los modelos heredan de esta clase base.
"""
from sqlalchemy.orm import declarative_base


# Base declarativa de SQLAlchemy
Base = declarative_base()
