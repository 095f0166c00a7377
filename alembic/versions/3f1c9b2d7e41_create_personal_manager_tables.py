"""create users, accounts, transactions and planning tables

Revision ID: 3f1c9b2d7e41
Revises:
Create Date: 2026-10-18 09:12:44.108532

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9b2d7e41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'categories',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('category_type', sa.String(20), nullable=False),  # "income" or "expense"
        sa.Column('icon', sa.String(32), nullable=False),
        sa.Column('color', sa.String(16), nullable=False),
        sa.Column('is_default', sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('idx_categories_default_created', 'categories', ['is_default', 'created_at'])

    op.create_table(
        'accounts',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('account_type', sa.String(32), nullable=False),
        sa.Column('balance', sa.Float, nullable=False),
        sa.Column('currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('credit_limit', sa.Float, nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_accounts_user_created', 'accounts', ['user_id', 'created_at'])

    op.create_table(
        'transactions',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('account_id', sa.String(64), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('transaction_type', sa.String(20), nullable=False),  # income / expense / transfer
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('date', sa.DateTime, nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_transactions_user_date', 'transactions', ['user_id', 'date'])
    op.create_index('idx_transactions_user_account', 'transactions', ['user_id', 'account_id'])

    op.create_table(
        'budgets',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('period', sa.String(20), nullable=False, server_default='monthly'),
        *_timestamps(),
    )
    op.create_index('idx_budgets_user_created', 'budgets', ['user_id', 'created_at'])

    op.create_table(
        'liabilities',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('account_id', sa.String(64), sa.ForeignKey('accounts.id', ondelete='SET NULL'), nullable=True),
        sa.Column('transaction_id', sa.String(64), nullable=True),
        sa.Column('person_name', sa.String(255), nullable=False),
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('due_date', sa.DateTime, nullable=False),
        sa.Column('is_paid', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('is_historical_entry', sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('idx_liabilities_user_due', 'liabilities', ['user_id', 'due_date'])

    op.create_table(
        'loans',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('account_id', sa.String(64), sa.ForeignKey('accounts.id', ondelete='SET NULL'), nullable=True),
        sa.Column('transaction_id', sa.String(64), nullable=True),
        sa.Column('person_name', sa.String(255), nullable=False),
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('loan_date', sa.DateTime, nullable=False),
        sa.Column('return_date', sa.DateTime, nullable=True),
        sa.Column('is_returned', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('is_historical_entry', sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('idx_loans_user_date', 'loans', ['user_id', 'loan_date'])

    op.create_table(
        'savings_goals',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('account_id', sa.String(64), sa.ForeignKey('accounts.id', ondelete='SET NULL'), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('target_amount', sa.Float, nullable=False),
        sa.Column('current_amount', sa.Float, nullable=False, server_default='0'),
        sa.Column('currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('target_date', sa.DateTime, nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('priority', sa.String(20), nullable=False, server_default='medium'),
        sa.Column('is_completed', sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('idx_savings_goals_user_target', 'savings_goals', ['user_id', 'target_date'])

    op.create_table(
        'recurring_transactions',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('account_id', sa.String(64), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('savings_goal_id', sa.String(64), sa.ForeignKey('savings_goals.id', ondelete='SET NULL'), nullable=True),
        sa.Column('transaction_type', sa.String(20), nullable=False),
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('frequency', sa.String(20), nullable=False, server_default='monthly'),
        sa.Column('start_date', sa.DateTime, nullable=False),
        sa.Column('end_date', sa.DateTime, nullable=True),
        sa.Column('next_due_date', sa.DateTime, nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('idx_recurring_user_created', 'recurring_transactions', ['user_id', 'created_at'])

    op.create_table(
        'user_preferences',
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('display_currency', sa.String(10), nullable=False, server_default='BDT'),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('user_preferences')
    op.drop_index('idx_recurring_user_created', table_name='recurring_transactions')
    op.drop_table('recurring_transactions')
    op.drop_index('idx_savings_goals_user_target', table_name='savings_goals')
    op.drop_table('savings_goals')
    op.drop_index('idx_loans_user_date', table_name='loans')
    op.drop_table('loans')
    op.drop_index('idx_liabilities_user_due', table_name='liabilities')
    op.drop_table('liabilities')
    op.drop_index('idx_budgets_user_created', table_name='budgets')
    op.drop_table('budgets')
    op.drop_index('idx_transactions_user_account', table_name='transactions')
    op.drop_index('idx_transactions_user_date', table_name='transactions')
    op.drop_table('transactions')
    op.drop_index('idx_accounts_user_created', table_name='accounts')
    op.drop_table('accounts')
    op.drop_index('idx_categories_default_created', table_name='categories')
    op.drop_table('categories')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_table('users')
