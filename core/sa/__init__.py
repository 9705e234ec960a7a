# core/sa/__init__.py
from .database import Database
from .models import (
    Base, User, Category, Author,
    Book, Reservation, Loan
)

__all__ = [
    'Database',
    'Base',
    'User',
    'Category',
    'Author',
    'Book',
    'Reservation',
    'Loan'
]
