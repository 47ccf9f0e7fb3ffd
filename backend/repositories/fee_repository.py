"""Fee repository: list, get, create."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.fee import Fee


def create_fee(
    session: Session,
    *,
    type: str,
    amount: float,
    month: str,
    description: str,
    compulsory: bool = True,
) -> Fee:
    """Create a fee, commit, and return it."""
    fee = Fee(
        type=type,
        amount=amount,
        month=month,
        description=description,
        compulsory=compulsory,
    )
    session.add(fee)
    session.commit()
    session.refresh(fee)
    return fee


def get_fee(session: Session, fee_id: int) -> Optional[Fee]:
    """Return a fee by id or None."""
    return session.get(Fee, fee_id)


def list_fees(session: Session, month: str | None = None) -> list[Fee]:
    """Return fees ordered by month then type, optionally for one month only."""
    stmt = select(Fee).order_by(Fee.month, Fee.type, Fee.id)
    if month is not None:
        stmt = stmt.where(Fee.month == month)
    return list(session.execute(stmt).scalars().all())
