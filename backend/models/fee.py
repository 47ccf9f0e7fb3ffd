"""Fee model for DB persistence."""
from sqlalchemy import Boolean, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Fee(Base):
    """Fee table: a charge levied on apartments for one month (area fee, parking fee, ...)."""

    __tablename__ = "fee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False)
    month: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    compulsory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Fee {self.type} {self.month} amount={self.amount}>"
