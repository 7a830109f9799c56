"""Initial schema - workspaces, boards, lists, cards and memberships.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "workspace",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_workspace_owner_id", "workspace", ["owner_id"])

    op.create_table(
        "workspace_member",
        sa.Column("workspace_id", sa.UUID(), sa.ForeignKey("workspace.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("user_id", sa.String(255), primary_key=True),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("role IN ('OWNER', 'MEMBER', 'VIEWER')", name="ck_workspace_member_role"),
    )
    op.create_index("ix_workspace_member_user_id", "workspace_member", ["user_id"])

    op.create_table(
        "board",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("workspace_id", sa.UUID(), sa.ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_board_workspace_id", "board", ["workspace_id"])

    op.create_table(
        "board_member",
        sa.Column("board_id", sa.UUID(), sa.ForeignKey("board.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("user_id", sa.String(255), primary_key=True),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("role IN ('ADMIN', 'MEMBER', 'VIEWER')", name="ck_board_member_role"),
    )
    op.create_index("ix_board_member_user_id", "board_member", ["user_id"])

    op.create_table(
        "board_list",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("board_id", sa.UUID(), sa.ForeignKey("board.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_board_list_board_id", "board_list", ["board_id"])

    op.create_table(
        "card",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("list_id", sa.UUID(), sa.ForeignKey("board_list.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("assignee_id", sa.String(255), nullable=True),
    )
    op.create_index("ix_card_list_id", "card", ["list_id"])


def downgrade() -> None:
    op.drop_table("card")
    op.drop_table("board_list")
    op.drop_table("board_member")
    op.drop_table("board")
    op.drop_table("workspace_member")
    op.drop_table("workspace")
