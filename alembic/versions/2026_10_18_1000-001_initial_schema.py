"""Initial schema: users, sessions, passport, health profiles, air quality history

Revision ID: 001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('password_hash', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('auth_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('token', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('expires_at', sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_auth_sessions_user_id'), 'auth_sessions', ['user_id'], unique=False)
    op.create_index(op.f('ix_auth_sessions_token'), 'auth_sessions', ['token'], unique=True)

    op.create_table('profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_key', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('nickname', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('home_city', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('points', sa.Integer(), nullable=False),
        sa.Column('streak', sa.Integer(), nullable=False),
        sa.Column('best_streak', sa.Integer(), nullable=False),
        sa.Column('last_active_date', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_profiles_user_key'), 'profiles', ['user_key'], unique=True)
    op.create_index(op.f('ix_profiles_user_id'), 'profiles', ['user_id'], unique=False)

    op.create_table('exposures', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lon', sa.Float(), nullable=False),
        sa.Column('location_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('timestamp', sa.BigInteger(), nullable=False),
        sa.Column('pm25', sa.Float(), nullable=True),
        sa.Column('no2', sa.Float(), nullable=True),
        sa.Column('co', sa.Float(), nullable=True),
        sa.Column('mode', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('risk_level', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('tips', sa.JSON(), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exposures_profile_id'), 'exposures', ['profile_id'], unique=False)
    op.create_index(op.f('ix_exposures_timestamp'), 'exposures', ['timestamp'], unique=False)

    op.create_table('health_profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_key', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('age', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('gender', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('has_respiratory_condition', sa.Boolean(), nullable=False),
        sa.Column('conditions', sa.JSON(), nullable=False),
        sa.Column('condition_severity', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('activity_level', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('outdoor_exposure', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('smoking_status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('lives_near_traffic', sa.Boolean(), nullable=True),
        sa.Column('has_air_purifier', sa.Boolean(), nullable=True),
        sa.Column('is_pregnant', sa.Boolean(), nullable=True),
        sa.Column('has_heart_condition', sa.Boolean(), nullable=True),
        sa.Column('medications', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=False),
        sa.Column('is_complete', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_health_profiles_user_key'), 'health_profiles', ['user_key'], unique=True)

    op.create_table('air_quality_history', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_key', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lng', sa.Float(), nullable=False),
        sa.Column('location_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('aqi', sa.Float(), nullable=False),
        sa.Column('pm25', sa.Float(), nullable=True),
        sa.Column('pm10', sa.Float(), nullable=True),
        sa.Column('no2', sa.Float(), nullable=True),
        sa.Column('co', sa.Float(), nullable=True),
        sa.Column('o3', sa.Float(), nullable=True),
        sa.Column('so2', sa.Float(), nullable=True),
        sa.Column('source', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('risk_level', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('timestamp', sa.BigInteger(), nullable=False),
        sa.Column('date', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_air_quality_history_user_key'), 'air_quality_history', ['user_key'], unique=False)
    op.create_index('ix_air_quality_history_user_key_location', 'air_quality_history',
                    ['user_key', 'location_name'], unique=False)
    op.create_index(op.f('ix_air_quality_history_date'), 'air_quality_history', ['date'], unique=False)
    op.create_index(op.f('ix_air_quality_history_timestamp'), 'air_quality_history', ['timestamp'], unique=False)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_air_quality_history_timestamp'), table_name='air_quality_history')
    op.drop_index(op.f('ix_air_quality_history_date'), table_name='air_quality_history')
    op.drop_index('ix_air_quality_history_user_key_location', table_name='air_quality_history')
    op.drop_index(op.f('ix_air_quality_history_user_key'), table_name='air_quality_history')
    op.drop_table('air_quality_history')
    op.drop_index(op.f('ix_health_profiles_user_key'), table_name='health_profiles')
    op.drop_table('health_profiles')
    op.drop_index(op.f('ix_exposures_timestamp'), table_name='exposures')
    op.drop_index(op.f('ix_exposures_profile_id'), table_name='exposures')
    op.drop_table('exposures')
    op.drop_index(op.f('ix_profiles_user_id'), table_name='profiles')
    op.drop_index(op.f('ix_profiles_user_key'), table_name='profiles')
    op.drop_table('profiles')
    op.drop_index(op.f('ix_auth_sessions_token'), table_name='auth_sessions')
    op.drop_index(op.f('ix_auth_sessions_user_id'), table_name='auth_sessions')
    op.drop_table('auth_sessions')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
