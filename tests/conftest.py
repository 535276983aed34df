"""Shared pytest fixtures for fintrack tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService


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
def sample_transactions(transaction_service):
    """Create a small set of transactions spanning two years."""
    rows = [
        (Decimal("-50.00"), date(2024, 3, 15), "Groceries"),
        (Decimal("200.00"), date(2024, 3, 20), "Freelance"),
        (Decimal("-30.00"), date(2024, 7, 1), "Gas"),
        (Decimal("1000.00"), date(2023, 12, 31), "Salary"),
    ]
    return [
        transaction_service.create_transaction(amount=amount, date=day, description=text)
        for amount, day, text in rows
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
