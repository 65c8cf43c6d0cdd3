"""Teacher service providing lookups for Teacher model operations."""

from sbte_portal.models.teacher import Teacher
from sbte_portal.services.base import BaseService


class TeacherService(BaseService[Teacher]):
    """Service for managing Teacher entities.

    Subjects only reference teachers, so the inherited get_by_id() is the
    main entry point.
    """

    model = Teacher
