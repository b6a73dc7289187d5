"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2025-01-15 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]

def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('avatar_url', sa.String(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('user_type', sa.String(), nullable=True),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('amateur_fights', sa.Integer(), nullable=True),
        sa.Column('professional_fights', sa.Integer(), nullable=True),
        sa.Column('experience_level', sa.String(), nullable=True),
        sa.Column('athlete_status', sa.String(), nullable=True),
        sa.Column('gender', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # Create revoked_tokens table
    op.create_table(
        'revoked_tokens',
        sa.Column('jti', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('revoked_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('jti'),
    )
    op.create_index('ix_revoked_tokens_jti', 'revoked_tokens', ['jti'])

    # Create gyms table
    op.create_table(
        'gyms',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('owner_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('logo_url', sa.String(), nullable=True),
        sa.Column('monthly_fee', sa.Float(), nullable=True),
        sa.Column('private_class_fee', sa.Float(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_gyms_id', 'gyms', ['id'])
    op.create_index('ix_gyms_owner_id', 'gyms', ['owner_id'])

    # Create gym_followers table
    op.create_table(
        'gym_followers',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('gym_id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('followed_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['gym_id'], ['gyms.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('gym_id', 'user_id', name='unique_gym_follower'),
    )
    op.create_index('ix_gym_followers_id', 'gym_followers', ['id'])
    op.create_index('ix_gym_followers_gym_id', 'gym_followers', ['gym_id'])

    # Create posts table
    op.create_table(
        'posts',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('author_id', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('caption', sa.Text(), nullable=True),
        sa.Column('post_type', sa.String(), nullable=True),
        sa.Column('media_url', sa.String(), nullable=True),
        sa.Column('media_type', sa.String(), nullable=True),
        sa.Column('link_url', sa.String(), nullable=True),
        sa.Column('link_preview', sa.JSON(), nullable=True),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('video_url', sa.String(), nullable=True),
        sa.Column('shared_from_post_id', sa.String(), nullable=True),
        sa.Column('gym_id', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['gym_id'], ['gyms.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_posts_id', 'posts', ['id'])
    op.create_index('ix_posts_author_id', 'posts', ['author_id'])
    op.create_index('ix_posts_shared_from_post_id', 'posts', ['shared_from_post_id'])
    op.create_index('ix_posts_created_at', 'posts', ['created_at'])

    # Create comments table
    op.create_table(
        'comments',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author_id', sa.String(), nullable=False),
        sa.Column('post_id', sa.String(), nullable=False),
        sa.Column('parent_id', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ),
        sa.ForeignKeyConstraint(['parent_id'], ['comments.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_comments_id', 'comments', ['id'])
    op.create_index('ix_comments_post_id', 'comments', ['post_id'])
    op.create_index('ix_comments_created_at', 'comments', ['created_at'])

    # Create comment_likes table
    op.create_table(
        'comment_likes',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('comment_id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['comment_id'], ['comments.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('comment_id', 'user_id', name='unique_comment_like'),
    )
    op.create_index('ix_comment_likes_id', 'comment_likes', ['id'])
    op.create_index('ix_comment_likes_comment_id', 'comment_likes', ['comment_id'])

    # Create reactions table
    op.create_table(
        'reactions',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('reaction_type', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('post_id', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('post_id', 'user_id', name='unique_post_reaction'),
    )
    op.create_index('ix_reactions_id', 'reactions', ['id'])
    op.create_index('ix_reactions_post_id', 'reactions', ['post_id'])

    # Create follows table
    op.create_table(
        'follows',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('follower_id', sa.String(), nullable=False),
        sa.Column('followed_id', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['follower_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['followed_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('follower_id', 'followed_id', name='unique_follow'),
        sa.CheckConstraint('follower_id != followed_id', name='no_self_follow'),
    )
    op.create_index('ix_follows_id', 'follows', ['id'])
    op.create_index('ix_follows_follower_id', 'follows', ['follower_id'])
    op.create_index('ix_follows_followed_id', 'follows', ['followed_id'])

    # Create notifications table
    op.create_table(
        'notifications',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('actor_id', sa.String(), nullable=True),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('related_post_id', sa.String(), nullable=True),
        sa.Column('related_comment_id', sa.String(), nullable=True),
        sa.Column('related_user_id', sa.String(), nullable=True),
        sa.Column('related_booking_id', sa.String(), nullable=True),
        sa.Column('read', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['actor_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])

    # Create chat_messages table
    op.create_table(
        'chat_messages',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('sender_id', sa.String(), nullable=False),
        sa.Column('receiver_id', sa.String(), nullable=False),
        sa.Column('gym_id', sa.String(), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('read_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['sender_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['receiver_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['gym_id'], ['gyms.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_chat_messages_id', 'chat_messages', ['id'])
    op.create_index('ix_chat_messages_sender_id', 'chat_messages', ['sender_id'])
    op.create_index('ix_chat_messages_receiver_id', 'chat_messages', ['receiver_id'])
    op.create_index('ix_chat_messages_created_at', 'chat_messages', ['created_at'])

    # Create training_logs table
    op.create_table(
        'training_logs',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('gym_id', sa.String(), nullable=True),
        sa.Column('training_date', sa.Date(), nullable=False),
        sa.Column('duration_hours', sa.Float(), nullable=False),
        sa.Column('did_sparring', sa.Boolean(), nullable=True),
        sa.Column('did_sparring_light', sa.Boolean(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['gym_id'], ['gyms.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_training_logs_id', 'training_logs', ['id'])
    op.create_index('ix_training_logs_user_id', 'training_logs', ['user_id'])

    # Create mentorship_sessions table
    op.create_table(
        'mentorship_sessions',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('coach_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('session_type', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['coach_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_mentorship_sessions_id', 'mentorship_sessions', ['id'])
    op.create_index('ix_mentorship_sessions_coach_id', 'mentorship_sessions', ['coach_id'])

    # Create bookings table
    op.create_table(
        'bookings',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('session_id', sa.String(), nullable=False),
        sa.Column('coach_id', sa.String(), nullable=False),
        sa.Column('athlete_id', sa.String(), nullable=False),
        sa.Column('scheduled_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['session_id'], ['mentorship_sessions.id'], ),
        sa.ForeignKeyConstraint(['coach_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['athlete_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_bookings_id', 'bookings', ['id'])
    op.create_index('ix_bookings_session_id', 'bookings', ['session_id'])
    op.create_index('ix_bookings_coach_id', 'bookings', ['coach_id'])
    op.create_index('ix_bookings_athlete_id', 'bookings', ['athlete_id'])

def downgrade() -> None:
    op.drop_table('bookings')
    op.drop_table('mentorship_sessions')
    op.drop_table('training_logs')
    op.drop_table('chat_messages')
    op.drop_table('notifications')
    op.drop_table('follows')
    op.drop_table('reactions')
    op.drop_table('comment_likes')
    op.drop_table('comments')
    op.drop_table('posts')
    op.drop_table('gym_followers')
    op.drop_table('gyms')
    op.drop_table('revoked_tokens')
    op.drop_table('users')
