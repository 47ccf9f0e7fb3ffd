"""Fee API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from db import get_db
from repositories.fee_repository import create_fee as repo_create_fee
from repositories.fee_repository import get_fee as repo_get_fee
from repositories.fee_repository import list_fees as repo_list_fees
from schemas.fees import FeeCreate, FeeResponse

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/fees", tags=["fees"])


def _fee_to_response(fee) -> FeeResponse:
    """Build FeeResponse from model instance."""
    return FeeResponse(
        id=fee.id,
        type=fee.type,
        amount=float(fee.amount),
        month=fee.month,
        description=fee.description,
        compulsory=fee.compulsory,
    )


@router.get("", response_model=list[FeeResponse])
def list_fees(month: Optional[str] = None, db: Session = Depends(get_db)) -> list[FeeResponse]:
    """List fees, optionally only those for one month (?month=...)."""
    return [_fee_to_response(f) for f in repo_list_fees(db, month)]


@router.get("/{fee_id}", response_model=FeeResponse)
def get_fee(fee_id: int, db: Session = Depends(get_db)) -> FeeResponse:
    """Get one fee by id."""
    fee = repo_get_fee(db, fee_id)
    if fee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fee not found")
    return _fee_to_response(fee)


@router.post("", response_model=FeeResponse, status_code=status.HTTP_201_CREATED)
def create_fee(body: FeeCreate, db: Session = Depends(get_db)) -> FeeResponse:
    """Create a fee for a month."""
    fee = repo_create_fee(
        db,
        type=body.type,
        amount=body.amount,
        month=body.month,
        description=body.description,
        compulsory=body.compulsory,
    )
    LOG.info("Fee created: id=%s type=%s month=%s amount=%s", fee.id, fee.type, fee.month, fee.amount)
    return _fee_to_response(fee)
