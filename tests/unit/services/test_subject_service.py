"""Unit tests for SubjectService and credit score parsing."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sbte_portal.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    RecordNotFoundError,
    ValidationError,
)
from sbte_portal.models import Department, Teacher
from sbte_portal.services.subject_service import SubjectService, parse_credit_score


class TestParseCreditScore:
    """parse_credit_score accepts numbers and numeric strings only."""

    @pytest.mark.parametrize(
        "raw, expected",
        [(4, 4.0), (3.5, 3.5), ("4", 4.0), (" 2.5 ", 2.5), ("0", 0.0)],
    )
    def test_numeric_values(self, raw, expected):
        assert parse_credit_score(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["four", "", None, True, "nan", "inf", [4], {"value": 4}]
    )
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(ValidationError, match="Invalid credit score value"):
            parse_credit_score(raw)


def _subject_kwargs(**overrides):
    data = {
        "name": "Algorithms",
        "code": "CS201",
        "semester": 3,
        "credit_score": "4",
        "department_id": "d1",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_create_subject_without_teacher(
    db_session: AsyncSession, department: Department
):
    """Subject is stored with a float credit score and no teacher."""
    service = SubjectService(db_session)

    subject = await service.create_subject(**_subject_kwargs())

    assert subject.id is not None
    assert subject.credit_score == 4.0
    assert subject.teacher_id is None
    assert subject.department_id == "d1"
    assert subject.created_at is not None

    found = await service.get_by_id(subject.id)
    assert found is not None
    assert found.code == "CS201"


@pytest.mark.asyncio
async def test_create_subject_with_teacher(
    db_session: AsyncSession, department: Department
):
    """A valid teacher id is linked to the new subject."""
    db_session.add(Teacher(id="t1", name="Dr. Rao", department_id="d1"))
    await db_session.commit()
    service = SubjectService(db_session)

    subject = await service.create_subject(**_subject_kwargs(teacher_id="t1"))

    assert subject.teacher_id == "t1"


@pytest.mark.asyncio
async def test_create_subject_unknown_teacher_creates_nothing(
    db_session: AsyncSession, department: Department
):
    """An unresolvable teacher id raises 404-kind error before insert."""
    service = SubjectService(db_session)

    with pytest.raises(RecordNotFoundError) as exc_info:
        await service.create_subject(**_subject_kwargs(teacher_id="t404"))

    assert exc_info.value.model_name == "Teacher"
    assert exc_info.value.record_id == "t404"
    assert await service.find(department_id="d1") == []


@pytest.mark.asyncio
async def test_create_subject_invalid_credit_score_creates_nothing(
    db_session: AsyncSession, department: Department
):
    service = SubjectService(db_session)

    with pytest.raises(ValidationError):
        await service.create_subject(**_subject_kwargs(credit_score="abc"))

    assert await service.find(department_id="d1") == []


@pytest.mark.asyncio
async def test_create_duplicate_subject_in_same_department_fails(
    db_session: AsyncSession, department: Department
):
    """Same (name, code, department) cannot be created twice."""
    service = SubjectService(db_session)
    await service.create_subject(**_subject_kwargs())

    with pytest.raises(DuplicateRecordError):
        await service.create_subject(**_subject_kwargs(credit_score=3))

    subjects = await service.find(name="Algorithms", code="CS201", department_id="d1")
    assert len(subjects) == 1


@pytest.mark.asyncio
async def test_same_subject_in_other_department_is_allowed(
    db_session: AsyncSession, department: Department
):
    db_session.add(Department(id="d2", name="Electronics", college_id="c1"))
    await db_session.commit()
    service = SubjectService(db_session)

    first = await service.create_subject(**_subject_kwargs())
    second = await service.create_subject(**_subject_kwargs(department_id="d2"))

    assert first.id != second.id


@pytest.mark.asyncio
async def test_concurrent_duplicate_caught_by_unique_constraint(
    db_session: AsyncSession, department: Department
):
    """If the pre-check misses a duplicate, the table constraint still holds."""
    service = SubjectService(db_session)
    await service.create_subject(**_subject_kwargs())

    real_find = service.find
    service.find = AsyncMock(side_effect=[[], await real_find(code="CS201")])
    with pytest.raises(DuplicateRecordError) as exc_info:
        await service.create_subject(**_subject_kwargs())

    assert isinstance(exc_info.value.__cause__, DatabaseConnectionError)
    assert service.find.await_count == 2
    assert len(await real_find(code="CS201")) == 1


@pytest.mark.asyncio
async def test_unknown_department_is_a_database_error_not_a_duplicate(
    db_session: AsyncSession, department: Department
):
    """A foreign key failure on insert must not be reported as a duplicate."""
    service = SubjectService(db_session)

    with pytest.raises(DatabaseConnectionError) as exc_info:
        await service.create_subject(**_subject_kwargs(department_id="nope"))

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert await service.find(code="CS201") == []
