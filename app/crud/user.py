"""
CRUD para usuarios.
"""
from app.crud.base import CRUDBase
from app.models.user import User


class CRUDUser(CRUDBase[User]):
    """CRUD específico para usuarios."""


user = CRUDUser(User)
