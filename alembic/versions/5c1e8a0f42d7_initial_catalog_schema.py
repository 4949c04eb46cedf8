"""initial catalog schema

Revision ID: 5c1e8a0f42d7
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "5c1e8a0f42d7"
down_revision = None
branch_labels = None
depends_on = None

LINK_TABLES = (
    ("material_dimensions", "dimension_id", "dimensions"),
    ("material_discounts", "discount_id", "discounts"),
    ("material_fixations", "fixation_id", "fixations"),
    ("material_shapes", "shape_id", "shapes"),
    ("material_badges", "badge_id", "badges"),
)


def upgrade():
    op.create_table(
        "materials",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("preview", sa.String(1024), nullable=False),
        sa.Column("background", sa.String(1024), nullable=False),
        sa.Column("min_width", sa.Float, nullable=False),
        sa.Column("min_height", sa.Float, nullable=False),
        sa.Column("max_width", sa.Float, nullable=False),
        sa.Column("max_height", sa.Float, nullable=False),
        sa.Column("weight", sa.Float, nullable=False),
        sa.Column("fixed_price", sa.Float, nullable=False),
        sa.Column("surface_price", sa.Float, nullable=False),
        sa.Column("manufacturing_time", sa.SmallInteger, nullable=False),
        sa.Column("more", sa.Text),
        sa.Column("transparency", sa.Integer, nullable=False),
    )
    op.create_index("ix_materials_title", "materials", ["title"])

    op.create_table(
        "fixations",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("preview_url", sa.String(1024), nullable=False),
        sa.Column("icon_url", sa.String(1024), nullable=False),
        sa.Column("video_url", sa.String(1024)),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("diameter", sa.Float, nullable=False),
        sa.Column("drill_diameter", sa.Float, nullable=False),
    )

    op.create_table(
        "shapes",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("folder_id", sa.Integer),
        sa.Column("tags", sa.Text, nullable=False),
        sa.Column("url", sa.String(1024), nullable=False),
    )
    op.create_index("ix_shapes_folder_id", "shapes", ["folder_id"])

    op.create_table(
        "fixation_conditions",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "fixation_id",
            sa.Integer,
            sa.ForeignKey("fixations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "shape_id",
            sa.Integer,
            sa.ForeignKey("shapes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("area_min", sa.Integer),
        sa.Column("area_max", sa.Integer),
        sa.Column("padding_h", sa.Float),
        sa.Column("padding_v", sa.Float),
        *[sa.Column(f"pos_{p}", sa.Boolean) for p in ("tl", "tc", "tr", "cl", "cr", "bl", "bc", "br")],
    )
    op.create_index("ix_fixation_conditions_fixation_id", "fixation_conditions", ["fixation_id"])
    op.create_index("ix_fixation_conditions_shape_id", "fixation_conditions", ["shape_id"])

    op.create_table(
        "discounts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("amount", sa.SmallInteger, nullable=False),
        sa.Column("quantity", sa.SmallInteger, nullable=False),
    )

    op.create_table(
        "dimensions",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("width", sa.Float, nullable=False),
        sa.Column("height", sa.Float, nullable=False),
        sa.Column("pos", sa.Integer, nullable=False),
    )

    op.create_table(
        "badges",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("icon_url", sa.String(1024), nullable=False),
    )

    op.create_table(
        "fonts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("url", sa.String(1024), nullable=False),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("username", sa.String(200), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("token", sa.Text),
        sa.Column("is_admin", sa.Boolean, nullable=False, server_default="0"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    for table_name, column, target in LINK_TABLES:
        op.create_table(
            table_name,
            sa.Column(
                "material_id",
                sa.Integer,
                sa.ForeignKey("materials.id", ondelete="CASCADE"),
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
    for table_name, _, _ in reversed(LINK_TABLES):
        op.drop_table(table_name)
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
    op.drop_table("fonts")
    op.drop_table("badges")
    op.drop_table("dimensions")
    op.drop_table("discounts")
    op.drop_index("ix_fixation_conditions_shape_id", table_name="fixation_conditions")
    op.drop_index("ix_fixation_conditions_fixation_id", table_name="fixation_conditions")
    op.drop_table("fixation_conditions")
    op.drop_index("ix_shapes_folder_id", table_name="shapes")
    op.drop_table("shapes")
    op.drop_table("fixations")
    op.drop_index("ix_materials_title", table_name="materials")
    op.drop_table("materials")
