"""Data models package."""

from sbte_portal.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    ModelError,
    RecordNotFoundError,
)
from sbte_portal.models.base import BaseModel
from sbte_portal.models.department import College, Department
from sbte_portal.models.subject import Subject
from sbte_portal.models.teacher import Teacher

__all__ = [
    "BaseModel",
    "ModelError",
    "RecordNotFoundError",
    "DatabaseConnectionError",
    "InvalidFilterError",
    "College",
    "Department",
    "Subject",
    "Teacher",
]
