# tests/test_sa/conftest.py
import os
import pytest
from datetime import date
from sqlalchemy import event
from sqlalchemy.orm import Session
from sqlalchemy.sql import text

from core.sa.models import Base, User, Category, Author, Book, Reservation, Loan
from core.sa.database import Database

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_library.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Enforce foreign keys the way MySQL InnoDB does
    @event.listens_for(db.engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()
    # Clean up the test database file after all tests
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM Emprestimo"))
    db_session.execute(text("DELETE FROM Reserva"))
    db_session.execute(text("DELETE FROM Livro"))
    db_session.execute(text("DELETE FROM Categoria"))
    db_session.execute(text("DELETE FROM Autor"))
    db_session.execute(text("DELETE FROM Usuario"))
    db_session.commit()
    yield
    # Clean up after test as well
    db_session.rollback()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def sample_user(db_session):
    """Create a sample user for testing."""
    user = User(name="Test User", emails=["test@example.com"], phones=["5555-0000"])
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def sample_category(db_session):
    """Create a sample category for testing."""
    category = Category(name="Ficção")
    db_session.add(category)
    db_session.commit()
    return category

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(name="Machado de Assis", nationality="Brasileiro")
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_book(db_session, sample_category):
    """Create a sample book for testing."""
    book = Book(
        title="Dom Casmurro",
        publication_year=1899,
        publisher="Garnier",
        category_id=sample_category.id
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_reservation(db_session, sample_user, sample_book):
    """Create a reservation of the sample book by the sample user."""
    reservation = Reservation(user_id=sample_user.id, book_id=sample_book.id)
    db_session.add(reservation)
    db_session.commit()
    return reservation

@pytest.fixture
def sample_loan(db_session, sample_reservation):
    """Create a loan for the sample reservation."""
    loan = Loan(
        reservation_id=sample_reservation.id,
        loan_date=date(2024, 3, 1),
        expected_return_date=date(2024, 3, 15)
    )
    db_session.add(loan)
    db_session.commit()
    return loan
