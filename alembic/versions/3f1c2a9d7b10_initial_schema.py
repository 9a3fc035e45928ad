"""initial schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:44.310522

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None


def _schedule_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('schedule_type', sa.String(20), nullable=False),
        sa.Column('interval_hours', sa.Integer()),
        sa.Column('times_per_day', sa.Integer()),
        sa.Column('notes', sa.Text()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    ]


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(50), nullable=False, unique=True),
        sa.Column('email', sa.String(100), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'drugs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('unit_type', sa.String(20), nullable=False),
        sa.Column('default_dosage', sa.Numeric(10, 2)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.CheckConstraint("unit_type IN ('pills', 'mg')", name='ck_drugs_unit_type'),
    )

    op.create_table(
        'drug_consumptions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('drug_id', sa.Integer(), sa.ForeignKey('drugs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('consumption_date', sa.Date(), nullable=False),
        sa.Column('consumed_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('quantity', sa.Numeric(10, 2), nullable=False),
        sa.Column('unit_type', sa.String(20), nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.CheckConstraint("unit_type IN ('pills', 'mg')", name='ck_drug_consumptions_unit_type'),
    )
    op.create_index('idx_drug_consumptions_user_date', 'drug_consumptions', ['user_id', 'consumption_date'])

    op.create_table(
        'medical_procedures',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'procedure_records',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('procedure_id', sa.Integer(), sa.ForeignKey('medical_procedures.id', ondelete='CASCADE'), nullable=False),
        sa.Column('procedure_date', sa.Date(), nullable=False),
        sa.Column('performed_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('idx_procedure_records_user_date', 'procedure_records', ['user_id', 'procedure_date'])

    op.create_table(
        'drug_schedules',
        *_schedule_columns(),
        sa.Column('drug_id', sa.Integer(), sa.ForeignKey('drugs.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('user_id', 'drug_id', name='uq_drug_schedules_user_drug'),
        sa.CheckConstraint("schedule_type IN ('interval', 'per_day')", name='ck_drug_schedules_type'),
    )

    op.create_table(
        'procedure_schedules',
        *_schedule_columns(),
        sa.Column('procedure_id', sa.Integer(), sa.ForeignKey('medical_procedures.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('user_id', 'procedure_id', name='uq_procedure_schedules_user_procedure'),
        sa.CheckConstraint("schedule_type IN ('interval', 'per_day')", name='ck_procedure_schedules_type'),
    )


def downgrade():
    op.drop_table('procedure_schedules')
    op.drop_table('drug_schedules')
    op.drop_index('idx_procedure_records_user_date', table_name='procedure_records')
    op.drop_table('procedure_records')
    op.drop_table('medical_procedures')
    op.drop_index('idx_drug_consumptions_user_date', table_name='drug_consumptions')
    op.drop_table('drug_consumptions')
    op.drop_table('drugs')
    op.drop_table('users')
