"""Subject schemas for API request/response models."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from sbte_portal.schemas.base import CamelModel


class SubjectCreate(CamelModel):
    """Schema for creating a subject.

    ``credit_score`` is kept raw here; the service parses it so that a
    malformed value is reported after authorization, like the other
    business checks.

    Attributes:
        name: Name of the subject.
        code: Subject code.
        semester: Semester number.
        credit_score: Credit weight, number or numeric string.
        department_id: Department the subject belongs to.
        teacher_id: Optional teacher to associate.
    """

    name: str = Field(..., min_length=1, max_length=255)
    code: str = Field(..., min_length=1, max_length=50)
    semester: int = Field(..., ge=1)
    credit_score: Any = Field(...)
    department_id: str = Field(..., min_length=1, max_length=36)
    teacher_id: Optional[str] = Field(default=None, max_length=36)


class SubjectResponse(CamelModel):
    """Response schema for subject."""

    id: str
    name: str
    code: str
    semester: int
    credit_score: float
    department_id: str
    teacher_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SubjectCreatedResponse(CamelModel):
    """Response returned after a subject is created."""

    message: str
    subject: SubjectResponse
