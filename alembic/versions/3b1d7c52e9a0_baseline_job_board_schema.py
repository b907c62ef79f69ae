"""baseline_job_board_schema

Revision ID: 3b1d7c52e9a0
Revises:
Create Date: 2026-10-19 10:12:41.118204

Creates every job board table. Tables that already exist are left alone so the
migration can be applied to a database bootstrapped with init_db().
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3b1d7c52e9a0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

NOW = sa.text('(CURRENT_TIMESTAMP)')


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    # Create users table
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('password_hash', sa.String(length=255), nullable=False),
            sa.Column('role', sa.String(length=20), nullable=False),
            sa.Column('is_paid', sa.Boolean(), nullable=False),
            sa.Column('email_verified', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
        op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    # Create job_seeker_profiles table
    if not table_exists('job_seeker_profiles'):
        op.create_table('job_seeker_profiles',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('location', sa.String(length=255), nullable=True),
            sa.Column('education', sa.Text(), nullable=True),
            sa.Column('phone_number', sa.String(length=50), nullable=True),
            sa.Column('job_preferences', sa.JSON(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_job_seeker_profiles_id'), 'job_seeker_profiles', ['id'], unique=False)
        op.create_index(op.f('ix_job_seeker_profiles_user_id'), 'job_seeker_profiles', ['user_id'], unique=True)

    # Create employer_profiles table
    if not table_exists('employer_profiles'):
        op.create_table('employer_profiles',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('company_name', sa.String(length=255), nullable=False),
            sa.Column('website', sa.String(length=255), nullable=True),
            sa.Column('logo_url', sa.String(length=500), nullable=True),
            sa.Column('location', sa.String(length=255), nullable=True),
            sa.Column('industry', sa.String(length=255), nullable=True),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_employer_profiles_id'), 'employer_profiles', ['id'], unique=False)
        op.create_index(op.f('ix_employer_profiles_user_id'), 'employer_profiles', ['user_id'], unique=True)
        op.create_index(op.f('ix_employer_profiles_company_name'), 'employer_profiles', ['company_name'], unique=False)

    # Create jobs table
    if not table_exists('jobs'):
        op.create_table('jobs',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('employer_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('contact_email', sa.String(length=255), nullable=False),
            sa.Column('experience_required', sa.String(length=100), nullable=True),
            sa.Column('salary', sa.String(length=100), nullable=True),
            sa.Column('location', sa.String(length=255), nullable=True),
            sa.Column('country', sa.String(length=100), nullable=True),
            sa.Column('is_remote', sa.Boolean(), nullable=False),
            sa.Column('job_type', sa.String(length=50), nullable=True),
            sa.Column('domain', sa.String(length=100), nullable=True),
            sa.Column('is_open', sa.Boolean(), nullable=False),
            sa.Column('posted_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['employer_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_jobs_employer_posted', 'jobs', ['employer_id', 'posted_at'], unique=False)
        op.create_index(op.f('ix_jobs_id'), 'jobs', ['id'], unique=False)
        op.create_index(op.f('ix_jobs_employer_id'), 'jobs', ['employer_id'], unique=False)
        op.create_index(op.f('ix_jobs_title'), 'jobs', ['title'], unique=False)
        op.create_index(op.f('ix_jobs_is_open'), 'jobs', ['is_open'], unique=False)
        op.create_index(op.f('ix_jobs_posted_at'), 'jobs', ['posted_at'], unique=False)

    # Create job_questions table
    if not table_exists('job_questions'):
        op.create_table('job_questions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('job_id', sa.Integer(), nullable=False),
            sa.Column('question_text', sa.Text(), nullable=False),
            sa.Column('is_required', sa.Boolean(), nullable=False),
            sa.Column('question_order', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_job_questions_id'), 'job_questions', ['id'], unique=False)
        op.create_index(op.f('ix_job_questions_job_id'), 'job_questions', ['job_id'], unique=False)

    # Create resumes table
    if not table_exists('resumes'):
        op.create_table('resumes',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('file_url', sa.Text(), nullable=False),
            sa.Column('file_name', sa.String(length=255), nullable=False),
            sa.Column('file_size', sa.Integer(), nullable=True),
            sa.Column('is_default', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_resumes_user_default', 'resumes', ['user_id', 'is_default'], unique=False)
        op.create_index(op.f('ix_resumes_id'), 'resumes', ['id'], unique=False)
        op.create_index(op.f('ix_resumes_user_id'), 'resumes', ['user_id'], unique=False)

    # Create applications table
    if not table_exists('applications'):
        op.create_table('applications',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('job_id', sa.Integer(), nullable=False),
            sa.Column('seeker_id', sa.Integer(), nullable=False),
            sa.Column('resume_id', sa.Integer(), nullable=True),
            sa.Column('status', sa.String(length=20), nullable=False),
            sa.Column('employer_notes', sa.Text(), nullable=True),
            sa.Column('application_date', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.Column('status_updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['seeker_id'], ['users.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['resume_id'], ['resumes.id'], ondelete='SET NULL'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('job_id', 'seeker_id', name='uq_applications_job_seeker')
        )
        op.create_index(op.f('ix_applications_id'), 'applications', ['id'], unique=False)
        op.create_index(op.f('ix_applications_job_id'), 'applications', ['job_id'], unique=False)
        op.create_index(op.f('ix_applications_seeker_id'), 'applications', ['seeker_id'], unique=False)
        op.create_index(op.f('ix_applications_status'), 'applications', ['status'], unique=False)
        op.create_index(op.f('ix_applications_application_date'), 'applications', ['application_date'], unique=False)

    # Create application_answers table
    if not table_exists('application_answers'):
        op.create_table('application_answers',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('application_id', sa.Integer(), nullable=False),
            sa.Column('question_id', sa.Integer(), nullable=False),
            sa.Column('answer_text', sa.Text(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['application_id'], ['applications.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['question_id'], ['job_questions.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_application_answers_id'), 'application_answers', ['id'], unique=False)
        op.create_index(op.f('ix_application_answers_application_id'), 'application_answers', ['application_id'], unique=False)

    # Create employer_questions table
    if not table_exists('employer_questions'):
        op.create_table('employer_questions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('application_id', sa.Integer(), nullable=False),
            sa.Column('employer_id', sa.Integer(), nullable=False),
            sa.Column('question_text', sa.Text(), nullable=False),
            sa.Column('asked_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['application_id'], ['applications.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['employer_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_employer_questions_id'), 'employer_questions', ['id'], unique=False)
        op.create_index(op.f('ix_employer_questions_application_id'), 'employer_questions', ['application_id'], unique=False)

    # Create seeker_answers table
    if not table_exists('seeker_answers'):
        op.create_table('seeker_answers',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('question_id', sa.Integer(), nullable=False),
            sa.Column('seeker_id', sa.Integer(), nullable=False),
            sa.Column('answer_text', sa.Text(), nullable=False),
            sa.Column('answered_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['question_id'], ['employer_questions.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['seeker_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('question_id', 'seeker_id', name='uq_seeker_answers_question_seeker')
        )
        op.create_index('idx_seeker_answers_seeker', 'seeker_answers', ['seeker_id'], unique=False)
        op.create_index(op.f('ix_seeker_answers_id'), 'seeker_answers', ['id'], unique=False)
        op.create_index(op.f('ix_seeker_answers_question_id'), 'seeker_answers', ['question_id'], unique=False)

    # Create notifications table
    if not table_exists('notifications'):
        op.create_table('notifications',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('message', sa.Text(), nullable=False),
            sa.Column('type', sa.String(length=50), nullable=False),
            sa.Column('is_read', sa.Boolean(), nullable=False),
            sa.Column('related_application_id', sa.Integer(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['related_application_id'], ['applications.id'], ondelete='SET NULL'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_notifications_user_read', 'notifications', ['user_id', 'is_read'], unique=False)
        op.create_index(op.f('ix_notifications_id'), 'notifications', ['id'], unique=False)
        op.create_index(op.f('ix_notifications_user_id'), 'notifications', ['user_id'], unique=False)
        op.create_index(op.f('ix_notifications_created_at'), 'notifications', ['created_at'], unique=False)

    # Create payments table
    if not table_exists('payments'):
        op.create_table('payments',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('gateway_order_id', sa.String(length=255), nullable=False),
            sa.Column('gateway_payment_id', sa.String(length=255), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False),
            sa.Column('amount', sa.Integer(), nullable=False),
            sa.Column('currency', sa.String(length=10), nullable=False),
            sa.Column('paid_at', sa.DateTime(timezone=True), server_default=NOW, nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('gateway_payment_id')
        )
        op.create_index(op.f('ix_payments_id'), 'payments', ['id'], unique=False)
        op.create_index(op.f('ix_payments_user_id'), 'payments', ['user_id'], unique=False)


def downgrade() -> None:
    """Drop every job board table, dependents first."""
    for table_name in (
        'payments',
        'notifications',
        'seeker_answers',
        'employer_questions',
        'application_answers',
        'applications',
        'resumes',
        'job_questions',
        'jobs',
        'employer_profiles',
        'job_seeker_profiles',
        'users',
    ):
        if table_exists(table_name):
            op.drop_table(table_name)
