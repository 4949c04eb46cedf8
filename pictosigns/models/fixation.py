# pictosigns/models/fixation.py
from typing import Optional

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class Fixation(Base):
    __tablename__ = "fixations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    preview_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    icon_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    video_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    # unit price, paid once per mounting point
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    diameter: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    drill_diameter: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    def __repr__(self) -> str:
        return f"<Fixation id={self.id} name={self.name!r}>"


class FixationCondition(Base):
    __tablename__ = "fixation_conditions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fixation_id: Mapped[int] = mapped_column(
        ForeignKey("fixations.id", ondelete="CASCADE"), index=True, nullable=False
    )
    shape_id: Mapped[int] = mapped_column(
        ForeignKey("shapes.id", ondelete="CASCADE"), index=True, nullable=False
    )

    # unset or 0 means unbounded
    area_min: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    area_max: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    padding_h: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    padding_v: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # mounting points: top/center/bottom x left/center/right
    pos_tl: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    pos_tc: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    pos_tr: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    pos_cl: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    pos_cr: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    pos_bl: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    pos_bc: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    pos_br: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<FixationCondition id={self.id} fixation={self.fixation_id} "
            f"shape={self.shape_id} area=[{self.area_min}, {self.area_max}]>"
        )
