# pictosigns/models/picto.py
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class Picto(Base):
    __tablename__ = "pictos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    folder_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    # comma separated, searched by the shop
    tags: Mapped[str] = mapped_column(Text, nullable=False, default="")
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
