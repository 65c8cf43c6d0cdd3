"""Pydantic schemas for API request/response models."""

from sbte_portal.schemas.base import MessageResponse
from sbte_portal.schemas.department import (
    DepartmentDelete,
    DepartmentResponse,
    DepartmentUpdate,
    DepartmentUpdatedResponse,
)
from sbte_portal.schemas.subject import (
    SubjectCreate,
    SubjectCreatedResponse,
    SubjectResponse,
)

__all__ = [
    "DepartmentDelete",
    "DepartmentResponse",
    "DepartmentUpdate",
    "DepartmentUpdatedResponse",
    "MessageResponse",
    "SubjectCreate",
    "SubjectCreatedResponse",
    "SubjectResponse",
]
