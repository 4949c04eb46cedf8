# pictosigns/models/shape.py
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class Shape(Base):
    __tablename__ = "shapes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # folders are managed by the tagging UI, kept here as an opaque id
    folder_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    tags: Mapped[str] = mapped_column(Text, nullable=False, default="")
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
