"""create user, admin_config, play_session, pool_table, ledger_state, token_balance

Revision ID: 4b7d2e91c0a3
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4b7d2e91c0a3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('password_hash', sa.String(length=256), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_user_username', 'user', ['username'], unique=True)

    if 'admin_config' not in existing_tables:
        op.create_table(
            'admin_config',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('admin', sa.String(length=64), nullable=False),
            sa.Column('payment_token', sa.String(length=64), nullable=False),
            sa.Column('payment_amount', sa.BigInteger(), nullable=False),
            sa.Column('reward_token', sa.String(length=64), nullable=False),
            sa.Column('reward_amount', sa.BigInteger(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )

    if 'play_session' not in existing_tables:
        op.create_table(
            'play_session',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('player_id', sa.Integer(), nullable=False),
            sa.Column('ledger_time', sa.BigInteger(), nullable=False),
            sa.ForeignKeyConstraint(['player_id'], ['user.id']),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('player_id'),
        )

    if 'pool_table' not in existing_tables:
        op.create_table(
            'pool_table',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('player_id', sa.Integer(), nullable=False),
            sa.Column('balls', sa.Text(), nullable=False),
            sa.Column('pockets', sa.Text(), nullable=False),
            sa.Column('ledger_time', sa.BigInteger(), nullable=False),
            sa.Column('sequence', sa.BigInteger(), nullable=False),
            sa.ForeignKeyConstraint(['player_id'], ['user.id']),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('player_id'),
        )

    if 'ledger_state' not in existing_tables:
        op.create_table(
            'ledger_state',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('sequence', sa.BigInteger(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )

    if 'token_balance' not in existing_tables:
        op.create_table(
            'token_balance',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('token', sa.String(length=64), nullable=False),
            sa.Column('account', sa.String(length=64), nullable=False),
            sa.Column('amount', sa.BigInteger(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('token', 'account', name='uq_token_account'),
        )
        op.create_index('ix_token_balance_token', 'token_balance', ['token'], unique=False)
        op.create_index('ix_token_balance_account', 'token_balance', ['account'], unique=False)


def downgrade():
    op.drop_index('ix_token_balance_account', table_name='token_balance')
    op.drop_index('ix_token_balance_token', table_name='token_balance')
    op.drop_table('token_balance')
    op.drop_table('ledger_state')
    op.drop_table('pool_table')
    op.drop_table('play_session')
    op.drop_table('admin_config')
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
