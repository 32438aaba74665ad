"""Create users, venues, venue_claims and reviews tables

Revision ID: p001_create_venue_core
Revises:
Create Date: 2026-10-19

- users: identity, role and account status used by the permission gate
- venues: listings with the cached rating summary
- venue_claims: ownership requests, one open claim per (venue, user)
- reviews: one review per (user, venue), rating 1..5
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'p001_create_venue_core'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('role', sa.String(32), nullable=False, server_default='user'),
        sa.Column('status', sa.String(32), nullable=False, server_default='active'),
        sa.Column('avatar_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_check_constraint(
        'check_user_role',
        'users',
        "role IN ('user', 'business_owner', 'admin', 'paws_safer')"
    )

    op.create_table(
        'venues',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('owner_user_id', sa.String(), sa.ForeignKey('users.id', ondelete='RESTRICT'), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(32), nullable=False, server_default='pending_approval'),
        sa.Column('average_rating', sa.Numeric(3, 2), nullable=False, server_default=sa.text('0')),
        sa.Column('review_count', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    op.create_index('ix_venues_owner_user_id', 'venues', ['owner_user_id'])
    op.create_check_constraint(
        'check_venue_status',
        'venues',
        "status IN ('pending_approval', 'active', 'rejected', 'closed')"
    )

    op.create_table(
        'venue_claims',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('venue_id', sa.String(), sa.ForeignKey('venues.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('claim_message', sa.Text(), nullable=True),
        sa.Column('admin_notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    op.create_check_constraint(
        'check_claim_status',
        'venue_claims',
        "status IN ('pending', 'approved', 'rejected', 'cancelled')"
    )
    op.create_index('ix_venue_claims_venue_id', 'venue_claims', ['venue_id'])
    op.create_index('ix_venue_claims_user_id', 'venue_claims', ['user_id'])
    op.create_index('idx_venue_claims_venue_status', 'venue_claims', ['venue_id', 'status'])
    # Only one open claim per user per venue; closed claims are unrestricted.
    op.create_index(
        'uq_venue_claims_pending_per_user',
        'venue_claims',
        ['venue_id', 'user_id'],
        unique=True,
        postgresql_where=sa.text("status = 'pending'")
    )

    op.create_table(
        'reviews',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('venue_id', sa.String(), sa.ForeignKey('venues.id', ondelete='CASCADE'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('visit_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.UniqueConstraint('user_id', 'venue_id', name='unique_review_user_venue'),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name='check_review_rating_range'),
    )
    op.create_index('ix_reviews_user_id', 'reviews', ['user_id'])
    op.create_index('ix_reviews_venue_id', 'reviews', ['venue_id'])


def downgrade() -> None:
    op.drop_table('reviews')
    op.drop_index('uq_venue_claims_pending_per_user', table_name='venue_claims')
    op.drop_table('venue_claims')
    op.drop_table('venues')
    op.drop_table('users')
