"""championships, video gallery and sparring requests

Revision ID: 0002_championships_videos_sparring
Revises: 0001_initial
Create Date: 2025-02-10 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0002_championships_videos_sparring'
down_revision = '0001_initial'
branch_labels = None
depends_on = None

def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]

def upgrade() -> None:
    # Create championships table
    op.create_table(
        'championships',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('championship_name', sa.String(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('is_champion', sa.Boolean(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=True),
        sa.Column('opponent_name', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_championships_id', 'championships', ['id'])
    op.create_index('ix_championships_user_id', 'championships', ['user_id'])

    # Create videos table
    op.create_table(
        'videos',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('video_url', sa.String(), nullable=False),
        sa.Column('thumbnail_url', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_videos_id', 'videos', ['id'])
    op.create_index('ix_videos_user_id', 'videos', ['user_id'])
    op.create_index('ix_videos_created_at', 'videos', ['created_at'])

    # Create sparring_requests table
    op.create_table(
        'sparring_requests',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('requester_id', sa.String(), nullable=False),
        sa.Column('requested_id', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['requester_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['requested_id'], ['users.id'], ),
        sa.CheckConstraint('requester_id != requested_id', name='no_self_sparring'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sparring_requests_id', 'sparring_requests', ['id'])
    op.create_index('ix_sparring_requests_requester_id', 'sparring_requests', ['requester_id'])
    op.create_index('ix_sparring_requests_requested_id', 'sparring_requests', ['requested_id'])

    # Notifications can point at a sparring request
    op.add_column('notifications', sa.Column('related_sparring_id', sa.String(), nullable=True))

def downgrade() -> None:
    with op.batch_alter_table('notifications') as batch_op:
        batch_op.drop_column('related_sparring_id')
    op.drop_table('sparring_requests')
    op.drop_table('videos')
    op.drop_table('championships')
