"""Initial schema: users, proposals, evaluators, evaluations, sessions, notifications

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-19 00:00:00.000000
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
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(50), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'proposals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('track', sa.String(40), nullable=False),
        sa.Column('session_type', sa.String(20), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('submitted_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('reviewed_at', sa.DateTime()),
        sa.Column('review_notes', sa.Text()),
        *_timestamps(),
    )
    op.create_index('ix_proposals_user_id', 'proposals', ['user_id'])
    op.create_index('ix_proposals_status', 'proposals', ['status'])

    op.create_table(
        'proposal_evaluators',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, unique=True),
        sa.Column('expertise', sa.String(120)),
        sa.Column('status', sa.String(20), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'proposal_evaluations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('proposal_id', sa.Integer(), sa.ForeignKey('proposals.id'), nullable=False),
        sa.Column('evaluator_id', sa.Integer(), sa.ForeignKey('proposal_evaluators.id'), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('relevance_score', sa.Integer()),
        sa.Column('quality_score', sa.Integer()),
        sa.Column('innovation_score', sa.Integer()),
        sa.Column('impact_score', sa.Integer()),
        sa.Column('feasibility_score', sa.Integer()),
        sa.Column('overall_score', sa.Integer()),
        sa.Column('comments', sa.Text()),
        sa.Column('recommendation', sa.String(20)),
        sa.Column('assigned_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('completed_at', sa.DateTime()),
        sa.UniqueConstraint('proposal_id', 'evaluator_id', name='uq_evaluations_proposal_evaluator'),
    )
    op.create_index('ix_proposal_evaluations_proposal_id', 'proposal_evaluations', ['proposal_id'])
    op.create_index('ix_proposal_evaluations_evaluator_id', 'proposal_evaluations', ['evaluator_id'])

    op.create_table(
        'sessions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('proposal_id', sa.Integer(), sa.ForeignKey('proposals.id'), nullable=False, unique=True),
        sa.Column('speaker_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('track', sa.String(40), nullable=False),
        sa.Column('session_type', sa.String(20), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('scheduled_date', sa.Date()),
        sa.Column('scheduled_time', sa.String(20)),
        sa.Column('room', sa.String(80)),
        *_timestamps(),
    )

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('proposal_id', sa.Integer(), sa.ForeignKey('proposals.id'), nullable=False),
        sa.Column('type', sa.String(50)),
        sa.Column('sent_to', sa.String(255)),
        sa.Column('subject', sa.String(255)),
        sa.Column('body', sa.Text()),
        sa.Column('provider_message_id', sa.String(255)),
        sa.Column('sent_at', sa.DateTime()),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table('notifications')
    op.drop_table('sessions')
    op.drop_index('ix_proposal_evaluations_evaluator_id', table_name='proposal_evaluations')
    op.drop_index('ix_proposal_evaluations_proposal_id', table_name='proposal_evaluations')
    op.drop_table('proposal_evaluations')
    op.drop_table('proposal_evaluators')
    op.drop_index('ix_proposals_status', table_name='proposals')
    op.drop_index('ix_proposals_user_id', table_name='proposals')
    op.drop_table('proposals')
    op.drop_table('users')
