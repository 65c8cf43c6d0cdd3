"""Department and college models."""

from sqlalchemy import Boolean, ForeignKey, String, true
from sqlalchemy.orm import Mapped, mapped_column

from sbte_portal.models.base import BaseModel


class College(BaseModel):
    """College that owns departments."""

    __tablename__ = "colleges"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)


class Department(BaseModel):
    """Department of a college.

    Attributes:
        name: Department name (e.g., "Computer Science")
        is_active: Whether the department currently accepts subjects
        college_id: Owning college
    """

    __tablename__ = "departments"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )
    college_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("colleges.id"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        """String representation of the department."""
        return (
            f"Department(id={self.id!r}, name={self.name!r}, "
            f"is_active={self.is_active}, college_id={self.college_id!r})"
        )
