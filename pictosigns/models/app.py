# pictosigns/models/app.py
from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class App(Base):
    """A white-label storefront: which users run it, which materials and fonts it sells."""

    __tablename__ = "apps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    def __repr__(self) -> str:
        return f"<App id={self.id} name={self.name!r}>"


def _app_link(table_name: str, column: str, target: str) -> Table:
    return Table(
        table_name,
        Base.metadata,
        Column("app_id", ForeignKey("apps.id", ondelete="CASCADE"), primary_key=True),
        Column(column, ForeignKey(f"{target}.id", ondelete="CASCADE"), primary_key=True),
    )


app_users = _app_link("app_users", "user_id", "users")
app_materials = _app_link("app_materials", "material_id", "materials")
app_fonts = _app_link("app_fonts", "font_id", "fonts")
