"""create schedule tables

Revision ID: 3c1f0b7a9d21
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0b7a9d21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum("client", "cleaner", "company_admin", "global_admin", name="user_role")
cleaner_status = sa.Enum("invited", "pending", "active", "suspended", "inactive", name="cleaner_status")
assignment_status = sa.Enum(
    "pending", "assigned", "confirmed", "in_progress", "completed",
    "cancelled", "cancelled_by_client", "cancelled_by_company", "cancelled_by_admin",
    name="assignment_status",
)


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("timezone", sa.String(64), nullable=False),
    )
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_users_company_id", "users", ["company_id"])

    op.create_table(
        "cleaners",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("status", cleaner_status, nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
    )
    op.create_index("ix_cleaners_company_id", "cleaners", ["company_id"])
    op.create_index("ix_cleaners_user_id", "cleaners", ["user_id"], unique=True)

    op.create_table(
        "cleaner_availability",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("cleaner_id", sa.Integer(), sa.ForeignKey("cleaners.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False),
        sa.CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_cleaner_availability_dow"),
        sa.UniqueConstraint("cleaner_id", "day_of_week", name="uq_cleaner_availability_day"),
    )
    op.create_index("ix_cleaner_availability_cleaner_id", "cleaner_availability", ["cleaner_id"])

    op.create_table(
        "company_work_schedule",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("is_work_day", sa.Boolean(), nullable=False),
        sa.CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_company_work_schedule_dow"),
        sa.UniqueConstraint("company_id", "day_of_week", name="uq_company_work_schedule_day"),
    )
    op.create_index("ix_company_work_schedule_company_id", "company_work_schedule", ["company_id"])

    op.create_table(
        "cleaner_date_overrides",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("cleaner_id", sa.Integer(), sa.ForeignKey("cleaners.id", ondelete="CASCADE"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("updated_by", sa.Integer(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("cleaner_id", "date", name="uq_cleaner_date_override"),
    )
    op.create_index("ix_cleaner_date_overrides_cleaner_id", "cleaner_date_overrides", ["cleaner_id"])

    op.create_table(
        "job_assignments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        sa.Column("cleaner_id", sa.Integer(), sa.ForeignKey("cleaners.id", ondelete="SET NULL"), nullable=True),
        sa.Column("reference_code", sa.String(32), nullable=True),
        sa.Column("scheduled_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("duration_hours", sa.Float(), nullable=False),
        sa.Column("status", assignment_status, nullable=False),
    )
    op.create_index("ix_job_assignments_company_id", "job_assignments", ["company_id"])
    op.create_index("ix_job_assignments_cleaner_date", "job_assignments", ["cleaner_id", "scheduled_date"])


def downgrade() -> None:
    op.drop_table("job_assignments")
    op.drop_table("cleaner_date_overrides")
    op.drop_table("company_work_schedule")
    op.drop_table("cleaner_availability")
    op.drop_table("cleaners")
    op.drop_table("users")
    op.drop_table("companies")
    assignment_status.drop(op.get_bind(), checkfirst=True)
    cleaner_status.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
