# core/sa/repositories/book.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from core.sa.models import Book

logger = logging.getLogger(__name__)

class BookRepository:
    """Repository for managing Book entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_book(
        self,
        title: str,
        publication_year: Optional[int],
        publisher: Optional[str],
        category_id: Optional[int]
    ) -> Book:
        """Create a new book.
        
        Args:
            title: Title of the book
            publication_year: Year of publication
            publisher: Name of the publisher
            category_id: ID of the book's category
            
        Returns:
            The created Book object
        """
        book = Book(
            title=title,
            publication_year=publication_year,
            publisher=publisher,
            category_id=category_id
        )
        self.session.add(book)
        self.session.commit()
        logger.debug(f"Created book {book.id}")
        return book

    def get_books(self) -> List[Book]:
        """Get all books ordered by ID"""
        return self.session.query(Book).order_by(Book.id).all()

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by ID, or None if it does not exist"""
        return self.session.query(Book).filter(Book.id == book_id).first()

    def get_books_by_category(self, category_id: int) -> List[Book]:
        """Get all books filed under a category"""
        return (self.session.query(Book)
                .filter(Book.category_id == category_id)
                .order_by(Book.id)
                .all())

    def update_book(
        self,
        book_id: int,
        title: str,
        publication_year: Optional[int],
        publisher: Optional[str],
        category_id: Optional[int]
    ) -> Optional[Book]:
        """Replace a book's fields.
        
        Args:
            book_id: The ID of the book to update
            title: New title
            publication_year: New year of publication
            publisher: New publisher
            category_id: New category ID
            
        Returns:
            The updated Book object if found, None otherwise
        """
        book = self.get_by_id(book_id)
        if not book:
            return None

        book.title = title
        book.publication_year = publication_year
        book.publisher = publisher
        book.category_id = category_id
        self.session.commit()
        return book

    def delete_book(self, book_id: int) -> bool:
        """Delete a book. Reservations referencing it are not checked or removed.
        
        Args:
            book_id: The ID of the book to delete
            
        Returns:
            True if the book was deleted, False if not found
        """
        result = self.session.query(Book).filter(Book.id == book_id).delete()
        self.session.commit()
        return result > 0
