from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from boxoffice.core.db import get_db
from boxoffice.services.ledger import CapacityLedger


def get_ledger(request: Request) -> CapacityLedger:
    return request.app.state.ledger


SessionDep = Annotated[Session, Depends(get_db)]
LedgerDep = Annotated[CapacityLedger, Depends(get_ledger)]
