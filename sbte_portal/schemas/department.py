"""Department schemas for API request/response models."""

from datetime import datetime

from pydantic import Field

from sbte_portal.schemas.base import CamelModel


class DepartmentUpdate(CamelModel):
    """Schema for updating a department. ``is_active`` may be false."""

    department_id: str = Field(..., min_length=1, max_length=36)
    name: str = Field(..., min_length=1, max_length=255)
    is_active: bool
    college_id: str = Field(..., min_length=1, max_length=36)


class DepartmentDelete(CamelModel):
    """Schema for deleting a department."""

    department_id: str = Field(..., min_length=1, max_length=36)


class DepartmentResponse(CamelModel):
    """Response schema for department."""

    id: str
    name: str
    is_active: bool
    college_id: str
    created_at: datetime
    updated_at: datetime


class DepartmentUpdatedResponse(CamelModel):
    """Response returned after a department is updated."""

    message: str
    department: DepartmentResponse
