"""Subject and department endpoints mounted under /api/subjects.

POST creates a subject (HOD of the target department). PUT, DELETE and GET
manage department records (SBTE_ADMIN only).
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi import status as http_status

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
from sbte_portal.services.department_service import DepartmentService
from sbte_portal.services.subject_service import SubjectService
from sbte_portal.utils.dependencies import dependencies
from sbte_portal.utils.permissions import require_department, require_role
from sbte_portal.utils.session import SessionUser, UserRole, get_session_user


router = APIRouter(
    prefix="/subjects",
    tags=["Subjects"],
)


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_subject(
    data: SubjectCreate,
    principal: Optional[SessionUser] = Depends(get_session_user),
    service: SubjectService = Depends(dependencies.subject),
) -> SubjectCreatedResponse:
    """Create a subject in the caller's department.

    Args:
        data: Subject creation data.
        principal: Caller's session, if any.
        service: SubjectService instance.

    Returns:
        Confirmation message and the created subject.

    Raises:
        PermissionDeniedError: If the caller is not the HOD of the department.
        RecordNotFoundError: If teacherId does not resolve.
        ValidationError: If creditScore is not numeric.
        DuplicateRecordError: If the subject already exists in the department.
    """
    principal = require_role(
        principal, UserRole.HOD, "Unauthorized: Only HOD can create subjects"
    )
    require_department(
        principal,
        data.department_id,
        "Unauthorized: You are not authorized to create subjects in this department",
    )

    subject = await service.create_subject(
        name=data.name,
        code=data.code,
        semester=data.semester,
        credit_score=data.credit_score,
        department_id=data.department_id,
        teacher_id=data.teacher_id,
    )
    return SubjectCreatedResponse(
        message="Subject Created Successfully",
        subject=SubjectResponse.model_validate(subject),
    )


@router.put("")
async def update_department(
    data: DepartmentUpdate,
    principal: Optional[SessionUser] = Depends(get_session_user),
    service: DepartmentService = Depends(dependencies.department),
) -> DepartmentUpdatedResponse:
    """Update a department's name, active flag and college.

    Raises:
        PermissionDeniedError: If the caller is not SBTE_ADMIN.
        RecordNotFoundError: If the department does not exist.
    """
    require_role(principal, UserRole.SBTE_ADMIN)

    department = await service.update_department(
        data.department_id,
        name=data.name,
        is_active=data.is_active,
        college_id=data.college_id,
    )
    return DepartmentUpdatedResponse(
        message="Department updated successfully",
        department=DepartmentResponse.model_validate(department),
    )


@router.delete("")
async def delete_department(
    data: DepartmentDelete = Body(...),
    principal: Optional[SessionUser] = Depends(get_session_user),
    service: DepartmentService = Depends(dependencies.department),
) -> MessageResponse:
    """Delete a department.

    Raises:
        PermissionDeniedError: If the caller is not SBTE_ADMIN.
        RecordNotFoundError: If the department does not exist.
    """
    require_role(principal, UserRole.SBTE_ADMIN)

    await service.delete_department(data.department_id)
    return MessageResponse(message="Department deleted successfully")


@router.get("")
async def list_departments(
    principal: Optional[SessionUser] = Depends(get_session_user),
    service: DepartmentService = Depends(dependencies.department),
) -> list[DepartmentResponse]:
    """List every department. SBTE_ADMIN only."""
    require_role(principal, UserRole.SBTE_ADMIN)

    departments = await service.list_departments()
    return [DepartmentResponse.model_validate(d) for d in departments]
