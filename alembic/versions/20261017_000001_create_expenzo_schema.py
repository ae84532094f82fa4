"""Create the Expenzo schema

Revision ID: 20261017_000001
Revises: None
Create Date: 2026-10-17

Creates admins, properties, units, residents, contracts, rents, expense
categories, expenses, monthly expense summaries, expense allocations,
index values (ICL/IPC) and personal transactions.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261017_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create every table."""
    op.create_table(
        'admins',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=200), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admins_user_id', 'admins', ['user_id'], unique=True)

    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('street_address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id'], name='fk_properties_admin_id', ondelete='CASCADE'),
    )
    op.create_index('ix_properties_admin_id', 'properties', ['admin_id'])

    op.create_table(
        'units',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('unit_number', sa.String(length=50), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='vacant'),
        sa.Column('expense_percentage', sa.Numeric(precision=5, scale=2), nullable=False, server_default='0'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_units_property_id', ondelete='CASCADE'),
        sa.CheckConstraint(
            'expense_percentage >= 0 AND expense_percentage <= 100',
            name='ck_units_expense_percentage'
        ),
    )
    op.create_index('ix_units_property_id', 'units', ['property_id'])

    op.create_table(
        'residents',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=True),
        sa.Column('unit_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('role', sa.String(length=10), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id'], name='fk_residents_admin_id', ondelete='CASCADE'),
        # MSSQL rejects a second cascade path to residents; the API clears these links
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_residents_property_id', ondelete='NO ACTION'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_residents_unit_id', ondelete='NO ACTION'),
        sa.CheckConstraint("role IN ('owner', 'tenant')", name='ck_residents_role'),
    )
    op.create_index('ix_residents_admin_id', 'residents', ['admin_id'])
    op.create_index('ix_residents_property_id', 'residents', ['property_id'])
    op.create_index('ix_residents_unit_id', 'residents', ['unit_id'])
    op.create_index('ix_residents_name', 'residents', ['name'])

    op.create_table(
        'contracts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('initial_rent_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=10), nullable=True),
        sa.Column('rent_increase_frequency', sa.String(length=20), nullable=False, server_default='quarterly'),
        sa.Column('rent_increase_index', sa.String(length=10), nullable=False, server_default='ICL'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_contracts_unit_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tenant_id'], ['residents.id'], name='fk_contracts_tenant_id', ondelete='NO ACTION'),
        sa.CheckConstraint('end_date >= start_date', name='ck_contracts_dates'),
    )
    op.create_index('ix_contracts_unit_id', 'contracts', ['unit_id'])
    op.create_index('ix_contracts_tenant_id', 'contracts', ['tenant_id'])

    op.create_table(
        'rents',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('contract_id', sa.Integer(), nullable=False),
        sa.Column('period_year', sa.Integer(), nullable=False),
        sa.Column('period_month', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('amount_paid', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('balance', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('base_amount', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('adjustment_factor', sa.Numeric(precision=12, scale=6), nullable=True),
        sa.Column('base_index_value', sa.Numeric(precision=12, scale=4), nullable=True),
        sa.Column('adjustment_index_value', sa.Numeric(precision=12, scale=4), nullable=True),
        sa.Column('is_adjusted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('adjustment_period_year', sa.Integer(), nullable=True),
        sa.Column('adjustment_period_month', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['contract_id'], ['contracts.id'], name='fk_rents_contract_id', ondelete='CASCADE'),
        sa.UniqueConstraint('contract_id', 'period_year', 'period_month', name='uq_rents_contract_period'),
    )
    op.create_index('ix_rents_contract_id', 'rents', ['contract_id'])

    op.create_table(
        'expense_categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id'], name='fk_expense_categories_admin_id', ondelete='CASCADE'),
        sa.UniqueConstraint('admin_id', 'name', name='uq_expense_categories_admin_name'),
    )
    op.create_index('ix_expense_categories_admin_id', 'expense_categories', ['admin_id'])

    op.create_table(
        'monthly_expense_summaries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('period_year', sa.Integer(), nullable=False),
        sa.Column('period_month', sa.Integer(), nullable=False),
        sa.Column('total_expenses', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_monthly_expense_summaries_property_id',
            ondelete='CASCADE'
        ),
        sa.UniqueConstraint('property_id', 'period_year', 'period_month', name='uq_monthly_expense_summaries_period'),
        sa.CheckConstraint('period_month >= 1 AND period_month <= 12', name='ck_monthly_expense_summaries_month'),
        sa.CheckConstraint('total_expenses >= 0', name='ck_monthly_expense_summaries_total'),
    )
    op.create_index('ix_monthly_expense_summaries_property_id', 'monthly_expense_summaries', ['property_id'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('monthly_expense_summary_id', sa.Integer(), nullable=True),
        sa.Column('expense_type', sa.String(length=100), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_expenses_property_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['monthly_expense_summary_id'],
            ['monthly_expense_summaries.id'],
            name='fk_expenses_monthly_expense_summary_id',
            ondelete='NO ACTION'
        ),
        sa.CheckConstraint('amount > 0', name='ck_expenses_amount_positive'),
    )
    op.create_index('ix_expenses_property_id', 'expenses', ['property_id'])
    op.create_index('ix_expenses_monthly_expense_summary_id', 'expenses', ['monthly_expense_summary_id'])
    op.create_index('ix_expenses_expense_type', 'expenses', ['expense_type'])
    op.create_index('ix_expenses_date', 'expenses', ['date'])

    op.create_table(
        'expense_allocations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('monthly_expense_summary_id', sa.Integer(), nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('allocated_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('allocation_percentage', sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column('amount_paid', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['monthly_expense_summary_id'],
            ['monthly_expense_summaries.id'],
            name='fk_expense_allocations_summary_id',
            ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_expense_allocations_unit_id', ondelete='NO ACTION'),
        sa.UniqueConstraint('monthly_expense_summary_id', 'unit_id', name='uq_expense_allocations_summary_unit'),
    )
    op.create_index('ix_expense_allocations_monthly_expense_summary_id', 'expense_allocations', ['monthly_expense_summary_id'])
    op.create_index('ix_expense_allocations_unit_id', 'expense_allocations', ['unit_id'])

    op.create_table(
        'index_values',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('index_type', sa.String(length=10), nullable=False),
        sa.Column('period_year', sa.Integer(), nullable=False),
        sa.Column('period_month', sa.Integer(), nullable=False),
        sa.Column('value', sa.Numeric(precision=12, scale=4), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('index_type', 'period_year', 'period_month', name='uq_index_values_period'),
        sa.CheckConstraint('period_month >= 1 AND period_month <= 12', name='ck_index_values_month'),
    )
    op.create_index('ix_index_values_index_type', 'index_values', ['index_type'])

    op.create_table(
        'personal_transactions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=True),
        sa.Column('transaction_date', sa.Date(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id'], name='fk_personal_transactions_admin_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_personal_transactions_property_id',
            ondelete='NO ACTION'
        ),
    )
    op.create_index('ix_personal_transactions_admin_id', 'personal_transactions', ['admin_id'])
    op.create_index('ix_personal_transactions_transaction_date', 'personal_transactions', ['transaction_date'])


def downgrade() -> None:
    """Drop every table, children first."""
    op.drop_table('personal_transactions')
    op.drop_table('index_values')
    op.drop_table('expense_allocations')
    op.drop_table('expenses')
    op.drop_table('monthly_expense_summaries')
    op.drop_table('expense_categories')
    op.drop_table('rents')
    op.drop_table('contracts')
    op.drop_table('residents')
    op.drop_table('units')
    op.drop_table('properties')
    op.drop_table('admins')
