# core/sa/models/__init__.py
from .base import Base
from .user import User
from .category import Category
from .author import Author
from .book import Book
from .reservation import Reservation
from .loan import Loan

__all__ = [
    'Base',
    'User',
    'Category',
    'Author',
    'Book',
    'Reservation',
    'Loan'
]
