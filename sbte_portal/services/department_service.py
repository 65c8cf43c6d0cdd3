"""Department service providing business logic for Department model operations."""

import logging
from typing import List

from sbte_portal.models.department import Department
from sbte_portal.services.base import BaseService

logger = logging.getLogger(__name__)


class DepartmentService(BaseService[Department]):
    """Service for managing Department entities.

    Usage:
        service = DepartmentService(db_session)
        department = await service.update_department(
            "d1", name="Computer Science", is_active=False, college_id="c1"
        )

    Attributes:
        model: Department model class
        db: Database session for operations
    """

    model = Department

    async def list_departments(self) -> List[Department]:
        """Return every department ordered by creation time."""
        return await self.get_all()

    async def update_department(
        self, department_id: str, *, name: str, is_active: bool, college_id: str
    ) -> Department:
        """Replace a department's name, active flag and college.

        Raises:
            RecordNotFoundError: If the department does not exist.
            DatabaseConnectionError: If database operation fails.
        """
        department = await self.update(
            department_id, name=name, is_active=is_active, college_id=college_id
        )
        logger.info(
            "Department updated",
            extra={"department_id": department_id, "is_active": is_active},
        )
        return department

    async def delete_department(self, department_id: str) -> None:
        """Delete a department.

        Raises:
            RecordNotFoundError: If the department does not exist.
            DatabaseConnectionError: If database operation fails.
        """
        await self.delete(department_id)
        logger.info("Department deleted", extra={"department_id": department_id})
