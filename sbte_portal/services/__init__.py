"""Business logic services package."""

from sbte_portal.services.base import BaseService
from sbte_portal.services.department_service import DepartmentService
from sbte_portal.services.subject_service import SubjectService
from sbte_portal.services.teacher_service import TeacherService

__all__ = ["BaseService", "DepartmentService", "SubjectService", "TeacherService"]
