# pictosigns/models/discount.py
from sqlalchemy import Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from pictosigns.db import Base


class Discount(Base):
    __tablename__ = "discounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # percentage, 0..100
    amount: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    # minimum ordered quantity for this tier
    quantity: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<Discount id={self.id} qty>={self.quantity} amount={self.amount}%>"
