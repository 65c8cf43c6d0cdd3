"""Teacher model representing academic instructors."""

from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from sbte_portal.models.base import BaseModel


class Teacher(BaseModel):
    """Teacher who can be assigned to subjects.

    Multiple teachers can have the same name (no unique constraint).

    Attributes:
        name: Full name of the teacher
        department_id: Department the teacher belongs to, if known
    """

    __tablename__ = "teachers"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    department_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("departments.id"), nullable=True, index=True
    )

    def __repr__(self) -> str:
        """String representation of the teacher."""
        return f"Teacher(id={self.id!r}, name={self.name!r})"
