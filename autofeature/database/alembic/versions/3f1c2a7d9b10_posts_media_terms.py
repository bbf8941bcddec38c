"""posts, attachments, terms and post meta

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f1c2a7d9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = 'autofeature'


def _service_columns():
    return [
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
    ]


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")

    post_status = postgresql.ENUM(
        'draft', 'pending', 'private', 'future', 'publish', 'trash',
        name='post_status', schema=SCHEMA, create_type=False,
    )
    term_axis = postgresql.ENUM('tag', 'category', name='term_axis', schema=SCHEMA, create_type=False)
    post_status.create(op.get_bind(), checkfirst=True)
    term_axis.create(op.get_bind(), checkfirst=True)

    op.create_table(
        'post',
        *_service_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('status', post_status, server_default='draft', nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_post')),
        schema=SCHEMA,
    )
    op.create_table(
        'attachment',
        *_service_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('mime_type', sa.String(length=100), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='inherit', nullable=False),
        sa.Column('file_name', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_attachment')),
        schema=SCHEMA,
    )
    op.create_index(
        'ix_attachment_title_pattern', 'attachment', ['title'], unique=False,
        schema=SCHEMA, postgresql_ops={'title': 'text_pattern_ops'},
    )
    op.create_index('ix_attachment_mime_status', 'attachment', ['mime_type', 'status'], unique=False, schema=SCHEMA)

    op.create_table(
        'term',
        *_service_columns(),
        sa.Column('axis', term_axis, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_term')),
        sa.UniqueConstraint('axis', 'slug', name='uq_term_axis_slug'),
        schema=SCHEMA,
    )
    op.create_table(
        'post_term',
        sa.Column('post_id', sa.UUID(), nullable=False),
        sa.Column('term_id', sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(['post_id'], [f'{SCHEMA}.post.id'], name=op.f('fk_post_term_post_id_post'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['term_id'], [f'{SCHEMA}.term.id'], name=op.f('fk_post_term_term_id_term'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('post_id', 'term_id', name=op.f('pk_post_term')),
        schema=SCHEMA,
    )
    op.create_index('ix_post_term_term_id', 'post_term', ['term_id'], unique=False, schema=SCHEMA)

    op.create_table(
        'post_meta',
        sa.Column('post_id', sa.UUID(), nullable=False),
        sa.Column('meta_key', sa.String(length=255), nullable=False),
        sa.Column('meta_value', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['post_id'], [f'{SCHEMA}.post.id'], name=op.f('fk_post_meta_post_id_post'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('post_id', 'meta_key', name=op.f('pk_post_meta')),
        schema=SCHEMA,
    )
    op.create_index('ix_post_meta_key', 'post_meta', ['meta_key'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_post_meta_key', table_name='post_meta', schema=SCHEMA)
    op.drop_table('post_meta', schema=SCHEMA)
    op.drop_index('ix_post_term_term_id', table_name='post_term', schema=SCHEMA)
    op.drop_table('post_term', schema=SCHEMA)
    op.drop_table('term', schema=SCHEMA)
    op.drop_index('ix_attachment_mime_status', table_name='attachment', schema=SCHEMA)
    op.drop_index('ix_attachment_title_pattern', table_name='attachment', schema=SCHEMA)
    op.drop_table('attachment', schema=SCHEMA)
    op.drop_table('post', schema=SCHEMA)
    postgresql.ENUM(name='term_axis', schema=SCHEMA).drop(op.get_bind(), checkfirst=True)
    postgresql.ENUM(name='post_status', schema=SCHEMA).drop(op.get_bind(), checkfirst=True)
