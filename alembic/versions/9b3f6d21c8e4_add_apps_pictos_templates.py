"""add apps, pictos and templates

Revision ID: 9b3f6d21c8e4
Revises: 5c1e8a0f42d7
Create Date: 2026-10-20
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "9b3f6d21c8e4"
down_revision = "5c1e8a0f42d7"
branch_labels = None
depends_on = None

APP_LINK_TABLES = (
    ("app_users", "user_id", "users"),
    ("app_materials", "material_id", "materials"),
    ("app_fonts", "font_id", "fonts"),
)


def upgrade():
    op.create_table(
        "pictos",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("folder_id", sa.Integer),
        sa.Column("tags", sa.Text, nullable=False),
        sa.Column("url", sa.String(1024), nullable=False),
    )
    op.create_index("ix_pictos_folder_id", "pictos", ["folder_id"])

    op.create_table(
        "templates",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("folder_id", sa.Integer),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("tags", sa.Text, nullable=False),
        sa.Column("preview_url", sa.String(1024)),
        sa.Column("config", sa.Text),
    )
    op.create_index("ix_templates_folder_id", "templates", ["folder_id"])
    op.create_index("ix_templates_name", "templates", ["name"])

    op.create_table(
        "apps",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
    )

    for table_name, column, target in APP_LINK_TABLES:
        op.create_table(
            table_name,
            sa.Column(
                "app_id",
                sa.Integer,
                sa.ForeignKey("apps.id", ondelete="CASCADE"),
                primary_key=True,
            ),
            sa.Column(
                column,
                sa.Integer,
                sa.ForeignKey(f"{target}.id", ondelete="CASCADE"),
                primary_key=True,
            ),
        )


def downgrade():
    for table_name, _, _ in reversed(APP_LINK_TABLES):
        op.drop_table(table_name)
    op.drop_table("apps")
    op.drop_index("ix_templates_name", table_name="templates")
    op.drop_index("ix_templates_folder_id", table_name="templates")
    op.drop_table("templates")
    op.drop_index("ix_pictos_folder_id", table_name="pictos")
    op.drop_table("pictos")
