# pictosigns/models/font.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class Font(Base):
    __tablename__ = "fonts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
