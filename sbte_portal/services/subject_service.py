"""Subject service providing business logic for Subject model operations.

Creation goes through ``create_subject`` which links the owning department,
optionally a teacher, and enforces the (name, code, department) uniqueness
rule before inserting.
"""

import logging
import math
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError

from sbte_portal.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    RecordNotFoundError,
    ValidationError,
)
from sbte_portal.models.subject import Subject
from sbte_portal.services.base import BaseService
from sbte_portal.services.teacher_service import TeacherService

logger = logging.getLogger(__name__)


def parse_credit_score(value: Any) -> float:
    """Convert a client supplied credit score to a float.

    Accepts ints, floats and numeric strings (``"4"``, ``" 3.5 "``).
    Booleans, non-numeric strings and non-finite values are rejected.

    Raises:
        ValidationError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValidationError("Invalid credit score value")
    try:
        score = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid credit score value") from None
    if not math.isfinite(score):
        raise ValidationError("Invalid credit score value")
    return score


class SubjectService(BaseService[Subject]):
    """Service for managing Subject entities.

    Usage:
        service = SubjectService(db_session)
        subject = await service.create_subject(
            name="Algorithms",
            code="CS201",
            semester=3,
            credit_score="4",
            department_id="d1",
        )

    Attributes:
        model: Subject model class
        db: Database session for operations
    """

    model = Subject

    async def create_subject(
        self,
        *,
        name: str,
        code: str,
        semester: int,
        credit_score: Any,
        department_id: str,
        teacher_id: Optional[str] = None,
    ) -> Subject:
        """Create a subject in a department.

        Args:
            name: Subject name.
            code: Subject code.
            semester: Semester number.
            credit_score: Raw credit score, parsed with ``parse_credit_score``.
            department_id: Owning department.
            teacher_id: Teacher to associate, if any.

        Returns:
            Created subject.

        Raises:
            RecordNotFoundError: If teacher_id does not resolve.
            ValidationError: If credit_score is not numeric.
            DuplicateRecordError: If the (name, code, department) triple exists.
            DatabaseConnectionError: If database operation fails.
        """
        if teacher_id:
            teacher = await TeacherService(self.db).get_by_id(teacher_id)
            if teacher is None:
                raise RecordNotFoundError("Teacher", teacher_id)

        score = parse_credit_score(credit_score)

        existing = await self.find(name=name, code=code, department_id=department_id)
        if existing:
            raise DuplicateRecordError(
                model_name="Subject",
                detail="Subject with the same name and code already exists "
                "in this department",
            )

        data: dict[str, Any] = {
            "name": name,
            "code": code,
            "semester": semester,
            "credit_score": score,
            "department_id": department_id,
        }
        if teacher_id:
            data["teacher_id"] = teacher_id

        try:
            subject = await self.create(**data)
        except DatabaseConnectionError as e:
            if not isinstance(e.__cause__, IntegrityError):
                raise
            # Lost a race with a concurrent insert of the same triple; any
            # other integrity failure (e.g. unknown department) stays a 500
            if not await self.find(name=name, code=code, department_id=department_id):
                raise
            raise DuplicateRecordError(
                model_name="Subject",
                detail="Subject with the same name and code already exists "
                "in this department",
            ) from e

        logger.info(
            "Subject created",
            extra={
                "subject_id": subject.id,
                "department_id": department_id,
                "teacher_id": teacher_id,
            },
        )
        return subject
