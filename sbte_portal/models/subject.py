"""Subject model representing academic subjects."""

from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from sbte_portal.models.base import BaseModel


class Subject(BaseModel):
    """Subject taught in a department during a given semester.

    Each combination of name, code and department must be unique.

    Attributes:
        name: Name of the subject (e.g., "Algorithms")
        code: Course code (e.g., "CS201")
        semester: Semester number when the subject is taught
        credit_score: Credit weight of the subject
        department_id: Owning department
        teacher_id: Assigned teacher, if any
    """

    __tablename__ = "subjects"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    semester: Mapped[int] = mapped_column(Integer, nullable=False)
    credit_score: Mapped[float] = mapped_column(Float, nullable=False)
    department_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("departments.id"), nullable=False, index=True
    )
    teacher_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("teachers.id"), nullable=True, index=True
    )

    __table_args__ = (
        UniqueConstraint(
            "name", "code", "department_id", name="uq_subject_name_code_department"
        ),
    )

    def __repr__(self) -> str:
        """String representation of the subject."""
        return (
            f"Subject(id={self.id!r}, name={self.name!r}, code={self.code!r}, "
            f"department_id={self.department_id!r})"
        )
