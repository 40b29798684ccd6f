"""Initial schema for the conference website.

Revision ID: 001_initial
Revises:
Create Date: 2025-01-10 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "media_type_enum": ("image", "video"),
    "display_style_enum": ("16:9", "4:3", "1:1", "3:4", "9:16", "2:3", "circle"),
    "highlight_icon_enum": (
        "Calendar", "MapPin", "Users", "Globe", "Award", "Trophy", "Mic",
        "BookOpen", "Clock", "Star", "Landmark", "Handshake", "Gavel", "HelpCircle",
    ),
    "country_status_enum": ("Available", "Assigned"),
    "post_type_enum": ("news", "sg-note"),
    "content_key_enum": (
        "home_page", "about_page", "registration_page",
        "documents_page", "gallery_page", "site_config",
    ),
}


def enum_type(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def base_columns() -> list[sa.Column]:
    return [
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def position_column() -> sa.Column:
    return sa.Column('position', sa.Integer(), nullable=False, server_default='0')


def upgrade() -> None:
    for name, values in ENUMS.items():
        postgresql.ENUM(*values, name=name).create(op.get_bind(), checkfirst=True)

    op.create_table(
        'admin_users',
        *base_columns(),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admin_users_email', 'admin_users', ['email'], unique=True)

    op.create_table(
        'gallery_items',
        *base_columns(),
        position_column(),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('media_type', enum_type('media_type_enum'), nullable=False),
        sa.Column('image_url', sa.String(1000), nullable=True),
        sa.Column('video_url', sa.String(1000), nullable=True),
        sa.Column('display', enum_type('display_style_enum'), nullable=False),
        sa.Column('column_span', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_gallery_items_position', 'gallery_items', ['position'])

    op.create_table(
        'schedule_days',
        *base_columns(),
        position_column(),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('date', sa.String(100), nullable=False, server_default=''),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_schedule_days_position', 'schedule_days', ['position'])

    op.create_table(
        'schedule_events',
        *base_columns(),
        position_column(),
        sa.Column('day_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('time', sa.String(100), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('location', sa.String(200), nullable=False, server_default=''),
        sa.ForeignKeyConstraint(['day_id'], ['schedule_days.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_schedule_events_day_id', 'schedule_events', ['day_id'])
    op.create_index('ix_schedule_events_position', 'schedule_events', ['position'])

    op.create_table(
        'secretariat_members',
        *base_columns(),
        position_column(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('role', sa.String(200), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False, server_default=''),
        sa.Column('image_url', sa.String(1000), nullable=False, server_default=''),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_secretariat_members_position', 'secretariat_members', ['position'])

    op.create_table(
        'highlights',
        *base_columns(),
        position_column(),
        sa.Column('icon', enum_type('highlight_icon_enum'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_highlights_position', 'highlights', ['position'])

    op.create_table(
        'downloadable_documents',
        *base_columns(),
        position_column(),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_downloadable_documents_position', 'downloadable_documents', ['position'])

    op.create_table(
        'committees',
        *base_columns(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('chair_name', sa.String(200), nullable=False, server_default=''),
        sa.Column('chair_bio', sa.Text(), nullable=False, server_default=''),
        sa.Column('chair_image_url', sa.String(1000), nullable=False, server_default=''),
        sa.Column('topics', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('background_guide_url', sa.String(1000), nullable=False, server_default=''),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_committees_name', 'committees', ['name'])

    op.create_table(
        'countries',
        *base_columns(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('committee', sa.String(200), nullable=False),
        sa.Column('status', enum_type('country_status_enum'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_countries_committee', 'countries', ['committee'])

    op.create_table(
        'posts',
        *base_columns(),
        sa.Column('title', sa.String(300), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('type', enum_type('post_type_enum'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_posts_type', 'posts', ['type'])

    op.create_table(
        'site_content',
        *base_columns(),
        sa.Column('key', enum_type('content_key_enum'), nullable=False),
        sa.Column('data', postgresql.JSONB(), nullable=False, server_default='{}'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_site_content_key', 'site_content', ['key'], unique=True)


def downgrade() -> None:
    for table in (
        'site_content',
        'posts',
        'countries',
        'committees',
        'downloadable_documents',
        'highlights',
        'secretariat_members',
        'schedule_events',
        'schedule_days',
        'gallery_items',
        'admin_users',
    ):
        op.drop_table(table)
    for name in ENUMS:
        op.execute(f'DROP TYPE IF EXISTS {name}')
