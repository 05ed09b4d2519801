"""
Schemas comunes reutilizables.
"""
from pydantic import BaseModel
from typing import Generic, TypeVar, List


T = TypeVar('T')


class PaginatedResponse(BaseModel, Generic[T]):
    """Schema de respuesta paginada."""

    items: List[T]
    total: int
    skip: int
    limit: int
    has_more: bool = False

    model_config = {"from_attributes": True}

    def __init__(self, **data):
        super().__init__(**data)
        # Calcular has_more automáticamente
        self.has_more = (self.skip + self.limit) < self.total


class MessageResponse(BaseModel):
    """Schema de respuesta con mensaje simple."""

    message: str
    success: bool = True

    model_config = {"from_attributes": True}
