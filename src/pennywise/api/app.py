"""REST API exposing the transaction store over FastAPI."""

import datetime
import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pennywise.api.schemas import (
    DashboardOut,
    InstallmentPurchaseIn,
    InstallmentSeriesOut,
    TransactionIn,
    TransactionOut,
)
from pennywise.database.base import Database
from pennywise.database.factories import create_sqlite_database
from pennywise.domain.errors import (
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from pennywise.domain.summary import SummaryService
from pennywise.domain.transaction import TransactionService

logger = logging.getLogger(__name__)


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_transaction_service(db: Database = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


def get_summary_service(db: Database = Depends(get_db)) -> SummaryService:
    return SummaryService(db)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": code, "message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors onto HTTP status codes."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return _error(400, exc.code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_payload_error(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return _error(400, "invalid_payload", details)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.code, str(exc))

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        logger.error(
            "Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
        )
        return _error(500, exc.code, "Unexpected error in the transaction store")

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError):
        logger.error(
            "Unhandled domain error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
        )
        return _error(500, "unknown", str(exc))


def create_app(db: Optional[Database] = None) -> FastAPI:
    """Build the API application.

    Args:
        db: Database instance. If None, a SQLite database is created from
            PENNYWISE_DB_PATH or the default location.
    """
    if db is None:
        db = create_sqlite_database()
        db.connect()
        db.initialize_schema()

    app = FastAPI(title="pennywise", version="0.1.0")
    app.state.db = db
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/transactions", response_model=List[TransactionOut])
    async def list_transactions(
        service: TransactionService = Depends(get_transaction_service),
    ):
        return [TransactionOut.from_entity(txn) for txn in service.list_transactions()]

    @app.get("/transactions/{transaction_id}", response_model=TransactionOut)
    async def get_transaction(
        transaction_id: str,
        service: TransactionService = Depends(get_transaction_service),
    ):
        return TransactionOut.from_entity(service.require_transaction(transaction_id))

    @app.post("/transactions", response_model=TransactionOut, status_code=201)
    async def create_transaction(
        payload: TransactionIn,
        service: TransactionService = Depends(get_transaction_service),
    ):
        txn = service.create_from_fields(payload.to_fields(), transaction_id=payload.id)
        logger.info("Created transaction %s", txn.id)
        return TransactionOut.from_entity(txn)

    @app.post(
        "/transactions/installments",
        response_model=List[TransactionOut],
        status_code=201,
    )
    async def create_installment_purchase(
        payload: InstallmentPurchaseIn,
        service: TransactionService = Depends(get_transaction_service),
    ):
        installments = service.create_installment_purchase(
            description=payload.description,
            total_amount=payload.total_amount,
            category=payload.category,
            installment_count=payload.installment_count,
            kind=payload.kind,
            start_date=payload.start_date,
        )
        logger.info(
            "Created %d installments for '%s'", len(installments), payload.description
        )
        return [TransactionOut.from_entity(txn) for txn in installments]

    @app.put("/transactions/{transaction_id}", response_model=TransactionOut)
    async def replace_transaction(
        transaction_id: str,
        payload: TransactionIn,
        service: TransactionService = Depends(get_transaction_service),
    ):
        txn = service.replace_transaction(transaction_id, payload.to_fields())
        return TransactionOut.from_entity(txn)

    @app.delete("/transactions/{transaction_id}", status_code=204)
    async def delete_transaction(
        transaction_id: str,
        service: TransactionService = Depends(get_transaction_service),
    ):
        service.delete_transaction(transaction_id)
        return Response(status_code=204)

    @app.get("/summary", response_model=DashboardOut)
    async def summary(
        as_of: Optional[datetime.date] = Query(None, alias="asOf"),
        service: SummaryService = Depends(get_summary_service),
    ):
        return DashboardOut.from_figures(service.dashboard(as_of))

    @app.get("/installments", response_model=List[InstallmentSeriesOut])
    async def installments(
        as_of: Optional[datetime.date] = Query(None, alias="asOf"),
        service: SummaryService = Depends(get_summary_service),
    ):
        return [
            InstallmentSeriesOut.from_progress(txn, progress)
            for txn, progress in service.installment_overview(as_of)
        ]

    return app
