"""Create annotators, catalog and annotations tables."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_annotation_tables"
down_revision = None
branch_labels = None
depends_on = None


def _timestamp(name: str, *, on_update: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        onupdate=sa.func.now() if on_update else None,
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "annotators",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("nickname", sa.String(length=64), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at", on_update=True),
    )
    op.create_index("ix_annotators_nickname", "annotators", ["nickname"], unique=True)

    op.create_table(
        "attributes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=64), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        _timestamp("created_at"),
    )

    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp("created_at"),
    )

    op.create_table(
        "annotations",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "item_id",
            sa.Integer(),
            sa.ForeignKey("items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "attribute_id",
            sa.Integer(),
            sa.ForeignKey("attributes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "annotator_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("annotators.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("value", sa.String(length=255), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at", on_update=True),
        sa.UniqueConstraint(
            "item_id",
            "attribute_id",
            "annotator_id",
            name="uq_annotations_item_attribute_annotator",
        ),
    )
    op.create_index("ix_annotations_item_id", "annotations", ["item_id"])
    op.create_index("ix_annotations_annotator_id", "annotations", ["annotator_id"])


def downgrade() -> None:
    op.drop_index("ix_annotations_annotator_id", table_name="annotations")
    op.drop_index("ix_annotations_item_id", table_name="annotations")
    op.drop_table("annotations")
    op.drop_table("items")
    op.drop_table("attributes")
    op.drop_index("ix_annotators_nickname", table_name="annotators")
    op.drop_table("annotators")
