# pictosigns/models/material.py
from typing import Optional

from sqlalchemy import Column, Float, ForeignKey, Integer, SmallInteger, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class Material(Base):
    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    preview: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    background: Mapped[str] = mapped_column(String(1024), nullable=False, default="")

    min_width: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    min_height: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    max_width: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    max_height: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    # weight factor, multiplied by the surface in the quote
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    fixed_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    surface_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    manufacturing_time: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    more: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    transparency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Material id={self.id} title={self.title!r}>"


def _material_link(table_name: str, column: str, target: str) -> Table:
    return Table(
        table_name,
        Base.metadata,
        Column(
            "material_id",
            ForeignKey("materials.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(column, ForeignKey(f"{target}.id", ondelete="CASCADE"), primary_key=True),
    )


material_dimensions = _material_link("material_dimensions", "dimension_id", "dimensions")
material_discounts = _material_link("material_discounts", "discount_id", "discounts")
material_fixations = _material_link("material_fixations", "fixation_id", "fixations")
material_shapes = _material_link("material_shapes", "shape_id", "shapes")
material_badges = _material_link("material_badges", "badge_id", "badges")
