from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import Session

from boxoffice.api.main import api_router
from boxoffice.core.config import settings
from boxoffice.core.db import create_tables, engine
from boxoffice.exceptions.handlers import register_exception_handlers
from boxoffice.logging_ import setup_logger
from boxoffice.services import purchases as purchases_service
from boxoffice.services.ledger import CapacityLedger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logger("api")
    if settings.CREATE_TABLES_ON_STARTUP:
        create_tables()

    ledger = CapacityLedger(lock_timeout=settings.RESERVATION_LOCK_TIMEOUT_SECONDS)
    with Session(engine) as session:
        purchases_service.init_ledger(session=session, ledger=ledger)
    app.state.ledger = ledger
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
register_exception_handlers(app)
app.include_router(api_router, prefix=settings.API_V1_STR)
