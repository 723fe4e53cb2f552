"""
Clients and projects collections.

Revision ID: 0001_clients_and_projects
Revises:
Create Date: 2026-10-19 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "0001_clients_and_projects"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id", name="clients_pkey"),
        sa.UniqueConstraint("email", name="clients_email_key"),
    )

    # No foreign key on client_id: the resolvers own that relationship
    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column(
            "status",
            sa.String(length=20),
            server_default=sa.text("'Not Started'"),
            nullable=False,
        ),
        sa.Column("client_id", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id", name="projects_pkey"),
    )
    op.create_index("idx_projects_client_id", "projects", ["client_id"])


def downgrade() -> None:
    op.drop_index("idx_projects_client_id", table_name="projects")
    op.drop_table("projects")
    op.drop_table("clients")
