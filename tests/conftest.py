"""Shared pytest fixtures for pennywise tests."""

import tempfile
import os
import uuid
from datetime import date
from decimal import Decimal

import pytest

from pennywise.database.factories import create_sqlite_database
from pennywise.domain.entities import Frequency, Transaction, TransactionKind
from pennywise.domain.summary import SummaryService
from pennywise.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def make_transaction():
    """Return a factory for in-memory Transaction entities."""

    def factory(**overrides) -> Transaction:
        fields = {
            "id": str(uuid.uuid4()),
            "kind": TransactionKind.EXPENSE,
            "frequency": Frequency.VARIABLE,
            "description": "Groceries",
            "amount": Decimal("100"),
            "category": "Food",
            "date": date(2025, 3, 10),
        }
        fields.update(overrides)
        return Transaction(**fields)

    return factory


@pytest.fixture
def sample_transactions(transaction_service):
    """Store a salary, a rent payment and a 12-month laptop purchase.

    Everything is dated around March 2025.
    """
    salary_id = transaction_service.create_transaction(
        kind="income",
        frequency="fixed",
        description="Salary",
        amount=Decimal("5000"),
        category="Salary",
        date=date(2025, 3, 5),
    )
    rent_id = transaction_service.create_transaction(
        kind="expense",
        frequency="fixed",
        description="Rent",
        amount=Decimal("1500"),
        category="Housing",
        date=date(2025, 3, 5),
    )
    laptop = transaction_service.create_installment_purchase(
        description="Laptop",
        total_amount=Decimal("4800"),
        category="Education",
        installment_count=12,
        start_date=date(2025, 1, 20),
    )
    return {"salary": salary_id, "rent": rent_id, "laptop": [txn.id for txn in laptop]}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def api_client(temp_db):
    """Create a FastAPI test client bound to the temporary database."""
    from fastapi.testclient import TestClient
    from pennywise.api.app import create_app

    with TestClient(create_app(temp_db)) as client:
        yield client
