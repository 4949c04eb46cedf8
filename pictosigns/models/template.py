# pictosigns/models/template.py
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class Template(Base):
    __tablename__ = "templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    folder_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    tags: Mapped[str] = mapped_column(Text, nullable=False, default="")
    preview_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    # editor layout, JSON text
    config: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Template id={self.id} name={self.name!r}>"
