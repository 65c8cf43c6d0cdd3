"""create_colleges_departments_teachers_subjects

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-18 09:12:44.512930

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "colleges",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_colleges_name", "colleges", ["name"])

    op.create_table(
        "departments",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), server_default=sa.true(), nullable=False
        ),
        sa.Column("college_id", sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["college_id"], ["colleges.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_departments_name", "departments", ["name"])
    op.create_index("ix_departments_college_id", "departments", ["college_id"])

    op.create_table(
        "teachers",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_teachers_name", "teachers", ["name"])
    op.create_index("ix_teachers_department_id", "teachers", ["department_id"])

    op.create_table(
        "subjects",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("semester", sa.Integer(), nullable=False),
        sa.Column("credit_score", sa.Float(), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=False),
        sa.Column("teacher_id", sa.String(length=36), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"]),
        sa.ForeignKeyConstraint(["teacher_id"], ["teachers.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "name", "code", "department_id", name="uq_subject_name_code_department"
        ),
    )
    op.create_index("ix_subjects_name", "subjects", ["name"])
    op.create_index("ix_subjects_code", "subjects", ["code"])
    op.create_index("ix_subjects_department_id", "subjects", ["department_id"])
    op.create_index("ix_subjects_teacher_id", "subjects", ["teacher_id"])


def downgrade() -> None:
    op.drop_index("ix_subjects_teacher_id", table_name="subjects")
    op.drop_index("ix_subjects_department_id", table_name="subjects")
    op.drop_index("ix_subjects_code", table_name="subjects")
    op.drop_index("ix_subjects_name", table_name="subjects")
    op.drop_table("subjects")

    op.drop_index("ix_teachers_department_id", table_name="teachers")
    op.drop_index("ix_teachers_name", table_name="teachers")
    op.drop_table("teachers")

    op.drop_index("ix_departments_college_id", table_name="departments")
    op.drop_index("ix_departments_name", table_name="departments")
    op.drop_table("departments")

    op.drop_index("ix_colleges_name", table_name="colleges")
    op.drop_table("colleges")
