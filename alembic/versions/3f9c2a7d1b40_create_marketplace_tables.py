"""create marketplace tables

Revision ID: 3f9c2a7d1b40
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _address_columns():
    return [
        sa.Column('street_number', sa.String(length=20), nullable=True),
        sa.Column('street', sa.String(length=255), nullable=True),
        sa.Column('complement_street', sa.String(length=255), nullable=True),
        sa.Column('postal_code', sa.String(length=20), nullable=True),
        sa.Column('city', sa.String(length=255), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('login', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=True),
        sa.Column('last_name', sa.String(length=50), nullable=True),
        sa.Column('activated', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_login', 'users', ['login'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'activities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_index('ix_activities_id', 'activities', ['id'])

    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), unique=True, nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        *_address_columns(),
    )
    op.create_index('ix_customers_id', 'customers', ['id'])

    op.create_table(
        'providers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), unique=True, nullable=True),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column('siret', sa.String(length=14), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        *_address_columns(),
    )
    op.create_index('ix_providers_id', 'providers', ['id'])

    op.create_table(
        'provider_activities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('provider_id', sa.Integer(), sa.ForeignKey('providers.id', ondelete='CASCADE'), nullable=True),
        sa.Column('activity_id', sa.Integer(), sa.ForeignKey('activities.id'), nullable=True),
    )
    op.create_index('ix_provider_activities_id', 'provider_activities', ['id'])

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('date_send', sa.Date(), nullable=False),
        *_address_columns(),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('customers.id'), nullable=True),
    )
    op.create_index('ix_projects_id', 'projects', ['id'])
    op.create_index('ix_projects_customer_id', 'projects', ['customer_id'])

    op.create_table(
        'project_pics',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('link', sa.String(length=512), nullable=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=True),
    )
    op.create_index('ix_project_pics_id', 'project_pics', ['id'])
    op.create_index('ix_project_pics_project_id', 'project_pics', ['project_id'])

    op.create_table(
        'project_activities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=True),
        sa.Column('activity_id', sa.Integer(), sa.ForeignKey('activities.id'), nullable=True),
    )
    op.create_index('ix_project_activities_id', 'project_activities', ['id'])
    op.create_index('ix_project_activities_project_id', 'project_activities', ['project_id'])
    op.create_index('ix_project_activities_activity_id', 'project_activities', ['activity_id'])

    op.create_table(
        'provider_eligibilities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('provider_id', sa.Integer(), sa.ForeignKey('providers.id'), nullable=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id'), nullable=True),
    )
    op.create_index('ix_provider_eligibilities_id', 'provider_eligibilities', ['id'])


def downgrade() -> None:
    op.drop_table('provider_eligibilities')
    op.drop_table('project_activities')
    op.drop_table('project_pics')
    op.drop_table('projects')
    op.drop_table('provider_activities')
    op.drop_table('providers')
    op.drop_table('customers')
    op.drop_table('activities')
    op.drop_table('users')
